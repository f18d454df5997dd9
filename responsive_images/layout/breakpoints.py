"""
Breakpoint selection for responsive images.

The rules are as follows:

- For full-width layout we return every breakpoint no wider than the original image.
- For fixed layout we return 1x and 2x the requested width, unless the original
  image is smaller than that.
- For constrained layout we return a range of widths from a quarter to double the
  requested width in steps of roughly √2, unless the original image is smaller.

Both functions are pure: they read nothing but their arguments and never raise.
"""

import math
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from responsive_images.layout.resolutions import DEFAULT_RESOLUTIONS, MAX_RESOLUTION
from responsive_images.models import ImageLayout


STEPS_FIXED: Tuple[float, ...] = (1.0, 2.0)
STEPS_CONSTRAINED: Tuple[float, ...] = (0.25, 0.35, 0.5, 0.71, 1.0, 1.41, 2.0)  # Ratio: √2

LAYOUT_STEPS: Mapping[ImageLayout, Tuple[float, ...]] = MappingProxyType({
    ImageLayout.FIXED: STEPS_FIXED,
    ImageLayout.CONSTRAINED: STEPS_CONSTRAINED,
})


def _as_layout(layout: Union[ImageLayout, str, None]) -> Optional[ImageLayout]:
    """Coerce a layout value to ImageLayout, or None if it is not one."""
    if isinstance(layout, ImageLayout):
        return layout
    try:
        return ImageLayout(layout)
    except (TypeError, ValueError):
        return None


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up."""
    return int(math.floor(value + 0.5))


def get_widths(
    *,
    width: Optional[int] = None,
    layout: Union[ImageLayout, str],
    breakpoints: Optional[Sequence[int]] = None,
    original_width: Optional[int] = None,
) -> List[int]:
    """
    Get the widths an image should be rendered at.

    Args:
        width: Width the image is designed to display at. Required for
            fixed and constrained layouts.
        layout: Image layout.
        breakpoints: Breakpoint universe; defaults to DEFAULT_RESOLUTIONS.
            Never modified.
        original_width: Pixel width of the source image. Nothing wider is
            ever returned.

    Returns:
        Ascending list of distinct widths. May be empty.
    """
    layout = _as_layout(layout)
    if layout is None or layout == ImageLayout.NONE:
        return []

    breakpoints_sorted = sorted(set(DEFAULT_RESOLUTIONS if breakpoints is None else breakpoints))

    def smaller_than_original(w: int) -> bool:
        return not original_width or w <= original_width

    if layout == ImageLayout.FULL_WIDTH:
        return [w for w in breakpoints_sorted if smaller_than_original(w)]

    # Nothing to base breakpoints on
    if not width or not breakpoints_sorted:
        return []

    steps = LAYOUT_STEPS.get(layout)
    if steps is None:
        return []

    candidates = sorted(_round_half_up(width * step) for step in steps)

    # Cap at the original width: add it here, filter below
    if original_width and original_width < candidates[-1]:
        candidates.append(original_width)

    # Twice the biggest screen, but never beyond 6K
    largest_screen_size = min(breakpoints_sorted[-1] * 2, MAX_RESOLUTION)
    if candidates[-1] > largest_screen_size:
        candidates.append(largest_screen_size)

    return sorted({
        w for w in candidates
        if smaller_than_original(w) and w <= largest_screen_size
    })


def get_sizes_attribute(
    *,
    width: Optional[int] = None,
    layout: Union[ImageLayout, str, None] = None,
) -> Optional[str]:
    """
    Get the `sizes` attribute for an image, based on the layout and width.
    """
    if not width or not layout:
        return None

    layout = _as_layout(layout)

    # Wider screens get the max size, narrower ones the full screen width
    if layout == ImageLayout.CONSTRAINED:
        return f"(min-width: {width}px) {width}px, 100vw"

    # Same width whatever the screen
    if layout == ImageLayout.FIXED:
        return f"{width}px"

    # Always the width of the screen
    if layout == ImageLayout.FULL_WIDTH:
        return "100vw"

    return None
