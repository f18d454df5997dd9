"""
Shared test fixtures.
"""

import pytest

from responsive_images.utils.plan_logger import PlanLogger


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from RESPONSIVE_* settings and the logger singleton."""
    for name in (
        "RESPONSIVE_RESOLUTIONS",
        "RESPONSIVE_URL_TEMPLATE",
        "RESPONSIVE_DEBUG_LEVEL",
        "RESPONSIVE_LOG_TO_FILE",
        "RESPONSIVE_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    PlanLogger.reset()
    yield
    PlanLogger.reset()
