"""
Plans the rendered variants of a responsive image: widths, `sizes` and `srcset`.
"""

import os
from typing import List, Optional, Union

from dotenv import load_dotenv

from responsive_images.layout.breakpoints import get_sizes_attribute, get_widths
from responsive_images.layout.resolutions import get_resolutions
from responsive_images.models import (
    ImageLayout,
    ImagePlan,
    ImagePlanRequest,
    ResolutionSet,
    SourceImage,
)
from responsive_images.utils.plan_logger import get_logger


DEFAULT_URL_TEMPLATE = "{src}?w={width}"


class SrcsetPlanner:
    """Combines breakpoint selection and `sizes` derivation into one plan."""

    def __init__(
        self,
        resolutions: Optional[Union[str, ResolutionSet]] = None,
        url_template: Optional[str] = None
    ):
        """
        Initialize the planner.

        Args:
            resolutions: Breakpoint universe name ("default" or "limited").
                If None, reads from RESPONSIVE_RESOLUTIONS env var.
            url_template: Format string for srcset URLs, with {src} and {width}
                placeholders. If None, reads from RESPONSIVE_URL_TEMPLATE env var.

        Raises:
            ValueError: If the resolution set or URL template is invalid.
        """
        load_dotenv()

        resolutions = resolutions or os.getenv("RESPONSIVE_RESOLUTIONS", ResolutionSet.DEFAULT.value)
        self.breakpoints = get_resolutions(resolutions)
        self.url_template = url_template or os.getenv("RESPONSIVE_URL_TEMPLATE", DEFAULT_URL_TEMPLATE)
        try:
            self.url_template.format(src="", width=0)
        except (IndexError, KeyError, ValueError) as e:
            raise ValueError(f"Invalid URL template {self.url_template!r}: {e}") from e
        self.logger = get_logger()

    def build_srcset(self, src: str, widths: List[int]) -> str:
        """
        Format a `srcset` attribute for the given widths.

        Args:
            src: Image source passed to the URL template.
            widths: Widths to list, in order.

        Returns:
            Comma-separated `<url> <width>w` entries, or "" for no widths.
        """
        return ", ".join(
            f"{self.url_template.format(src=src, width=w)} {w}w" for w in widths
        )

    def plan(self, request: ImagePlanRequest) -> ImagePlan:
        """
        Compute widths, sizes and srcset for one image.

        Args:
            request: Layout, widths and optional breakpoints for the image.

        Returns:
            ImagePlan. Its widths may be empty when nothing is renderable.
        """
        breakpoints = request.breakpoints or list(self.breakpoints)

        widths = get_widths(
            width=request.width,
            layout=request.layout,
            breakpoints=breakpoints,
            original_width=request.original_width,
        )
        sizes = get_sizes_attribute(width=request.width, layout=request.layout)

        plan = ImagePlan(
            layout=request.layout,
            width=request.width,
            original_width=request.original_width,
            widths=widths,
            sizes=sizes,
            srcset=self.build_srcset(request.src, widths),
        )

        self.logger.log_plan(plan, src=request.src, breakpoints=breakpoints)
        return plan

    def plan_for_image(
        self,
        source: SourceImage,
        layout: Union[ImageLayout, str],
        width: Optional[int] = None
    ) -> ImagePlan:
        """
        Plan a source image, capping widths at its true width.

        Args:
            source: Probed source image.
            layout: Image layout.
            width: Display width; required for fixed and constrained layouts.

        Returns:
            ImagePlan for the image.
        """
        request = ImagePlanRequest(
            layout=layout,
            width=width,
            original_width=source.width,
            src=source.path.as_posix(),
        )
        return self.plan(request)
