"""
Data models for responsive image breakpoint planning.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, PositiveInt


class ImageLayout(str, Enum):
    """How a responsive image is laid out on the page."""
    NONE = "none"
    FIXED = "fixed"
    FULL_WIDTH = "full-width"
    CONSTRAINED = "constrained"


class ResolutionSet(str, Enum):
    """Named breakpoint universes."""
    DEFAULT = "default"
    LIMITED = "limited"  # For statically generated images


class SourceImage(BaseModel):
    """Dimensions of a source image on disk."""
    path: Path
    width: PositiveInt
    height: PositiveInt
    format: Optional[str] = None


class ImagePlanRequest(BaseModel):
    """Inputs for planning the rendered variants of one image."""
    layout: ImageLayout
    width: Optional[PositiveInt] = None
    original_width: Optional[PositiveInt] = None
    breakpoints: Optional[List[PositiveInt]] = None
    src: str = ""


class ImagePlan(BaseModel):
    """Widths to render and the matching `sizes`/`srcset` attributes."""
    layout: ImageLayout
    width: Optional[int] = None
    original_width: Optional[int] = None
    widths: List[int] = Field(default_factory=list)
    sizes: Optional[str] = None
    srcset: str = ""
    created_at: datetime = Field(default_factory=datetime.now)

    def is_renderable(self) -> bool:
        """Whether at least one width was produced."""
        return bool(self.widths)
