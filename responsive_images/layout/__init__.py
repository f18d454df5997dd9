"""
Breakpoint selection and `sizes` attribute derivation.
"""

from responsive_images.layout.breakpoints import get_sizes_attribute, get_widths
from responsive_images.layout.resolutions import (
    DEFAULT_RESOLUTIONS,
    LIMITED_RESOLUTIONS,
    MAX_RESOLUTION,
    get_resolutions,
)

__all__ = [
    "DEFAULT_RESOLUTIONS",
    "LIMITED_RESOLUTIONS",
    "MAX_RESOLUTION",
    "get_resolutions",
    "get_sizes_attribute",
    "get_widths",
]
