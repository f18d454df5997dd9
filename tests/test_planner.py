"""
Tests for the srcset planner.
"""

from pathlib import Path

import pytest

from responsive_images.layout.resolutions import DEFAULT_RESOLUTIONS, LIMITED_RESOLUTIONS
from responsive_images.models import ImageLayout, ImagePlanRequest, SourceImage
from responsive_images.pipeline.planner import SrcsetPlanner


def test_plan_fixed():
    planner = SrcsetPlanner()
    plan = planner.plan(ImagePlanRequest(layout="fixed", width=400, src="hero.jpg"))

    assert plan.layout == ImageLayout.FIXED
    assert plan.widths == [400, 800]
    assert plan.sizes == "400px"
    assert plan.srcset == "hero.jpg?w=400 400w, hero.jpg?w=800 800w"
    assert plan.is_renderable()


def test_plan_none_layout():
    plan = SrcsetPlanner().plan(ImagePlanRequest(layout="none", width=400, src="hero.jpg"))

    assert plan.widths == []
    assert plan.sizes is None
    assert plan.srcset == ""
    assert not plan.is_renderable()


def test_plan_request_breakpoints_override():
    plan = SrcsetPlanner().plan(ImagePlanRequest(
        layout="full-width",
        breakpoints=[1920, 640, 750, 828],
        original_width=1000,
    ))

    assert plan.widths == [640, 750, 828]
    assert plan.sizes is None


def test_custom_url_template():
    planner = SrcsetPlanner(url_template="/_img/{width}/{src}")
    plan = planner.plan(ImagePlanRequest(layout="constrained", width=400, original_width=200, src="a.png"))

    assert plan.widths == [100, 140, 200]
    assert plan.srcset == "/_img/100/a.png 100w, /_img/140/a.png 140w, /_img/200/a.png 200w"
    assert plan.sizes == "(min-width: 400px) 400px, 100vw"


def test_default_resolutions():
    planner = SrcsetPlanner()
    assert planner.breakpoints == DEFAULT_RESOLUTIONS


def test_resolutions_from_environment(monkeypatch):
    monkeypatch.setenv("RESPONSIVE_RESOLUTIONS", "limited")
    planner = SrcsetPlanner()

    plan = planner.plan(ImagePlanRequest(layout="full-width"))
    assert plan.widths == list(LIMITED_RESOLUTIONS)


def test_explicit_resolutions_beat_environment(monkeypatch):
    monkeypatch.setenv("RESPONSIVE_RESOLUTIONS", "limited")
    assert SrcsetPlanner(resolutions="default").breakpoints == DEFAULT_RESOLUTIONS


def test_url_template_from_environment(monkeypatch):
    monkeypatch.setenv("RESPONSIVE_URL_TEMPLATE", "{src}@{width}")
    plan = SrcsetPlanner().plan(ImagePlanRequest(layout="fixed", width=10, src="x"))
    assert plan.srcset == "x@10 10w, x@20 20w"


def test_unknown_resolutions():
    with pytest.raises(ValueError):
        SrcsetPlanner(resolutions="huge")


def test_plan_for_image():
    source = SourceImage(path=Path("img/hero.png"), width=600, height=400)
    plan = SrcsetPlanner().plan_for_image(source, "fixed", width=400)

    assert plan.original_width == 600
    assert plan.widths == [400, 600]
    assert plan.srcset == "img/hero.png?w=400 400w, img/hero.png?w=600 600w"


def test_build_srcset_empty():
    assert SrcsetPlanner().build_srcset("hero.jpg", []) == ""


def test_unknown_url_template_placeholder():
    with pytest.raises(ValueError, match="Invalid URL template"):
        SrcsetPlanner(url_template="{src}/{w}")


def test_malformed_url_template_from_environment(monkeypatch):
    monkeypatch.setenv("RESPONSIVE_URL_TEMPLATE", "{src}?w={width")
    with pytest.raises(ValueError, match="Invalid URL template"):
        SrcsetPlanner()
