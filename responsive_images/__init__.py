"""
Responsive Image Breakpoints

Computes the widths at which a responsive image should be rendered and the
matching `sizes` attribute, for use by an image-rendering pipeline.
"""

from responsive_images.layout.breakpoints import get_sizes_attribute, get_widths
from responsive_images.models import ImageLayout

__version__ = "0.1.0"

__all__ = [
    "ImageLayout",
    "get_sizes_attribute",
    "get_widths",
]
