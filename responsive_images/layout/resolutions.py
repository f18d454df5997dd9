"""
Common screen widths used as the breakpoint universe for full-width images.
"""

from typing import Tuple, Union

from responsive_images.models import ResolutionSet


# Filtered later according to the image size and layout
DEFAULT_RESOLUTIONS: Tuple[int, ...] = (
    640,   # older and lower-end phones
    750,   # iPhone 6-8
    828,   # iPhone XR/11
    960,   # older horizontal phones
    1080,  # iPhone 6-8 Plus
    1280,  # 720p
    1668,  # Various iPads
    1920,  # 1080p
    2048,  # QXGA
    2560,  # WQXGA
    3200,  # QHD+
    3840,  # 4K
    4480,  # 4.5K
    5120,  # 5K
    6016,  # 6K
)

# Smaller set for statically generated images
LIMITED_RESOLUTIONS: Tuple[int, ...] = (
    640,   # older and lower-end phones
    750,   # iPhone 6-8
    828,   # iPhone XR/11
    1080,  # iPhone 6-8 Plus
    1280,  # 720p
    1668,  # Various iPads
    2048,  # QXGA
    2560,  # WQXGA
)

# No rendered variant is ever wider than 6K
MAX_RESOLUTION = 6016


def get_resolutions(name: Union[str, ResolutionSet] = ResolutionSet.DEFAULT) -> Tuple[int, ...]:
    """
    Look up a resolution table by name.

    Args:
        name: "default" or "limited".

    Returns:
        The matching resolution table.

    Raises:
        ValueError: If the name is not a known table.
    """
    try:
        resolution_set = ResolutionSet(str(getattr(name, "value", name)).lower())
    except ValueError:
        raise ValueError(f"Unknown resolution set: {name}") from None

    if resolution_set == ResolutionSet.LIMITED:
        return LIMITED_RESOLUTIONS
    return DEFAULT_RESOLUTIONS
