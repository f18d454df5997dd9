"""
Utilities for reading the dimensions of source images.
"""

from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from responsive_images.models import SourceImage


class ImageProbe:
    """Reads source image dimensions without decoding pixel data."""

    def probe(self, image_path: Union[str, Path]) -> SourceImage:
        """
        Read the size and format of an image on disk.

        Args:
            image_path: Path to the image file.

        Returns:
            SourceImage with the image's width, height and format.

        Raises:
            FileNotFoundError: If the path does not point to a file.
            ValueError: If the file is not a recognizable image.
        """
        image_path = Path(image_path)
        if not image_path.is_file():
            raise FileNotFoundError(f"Image not found: {image_path}")

        try:
            # Image.open only reads the header
            with Image.open(image_path) as image:
                width, height = image.size
                image_format = image.format
        except UnidentifiedImageError as e:
            raise ValueError(f"Not an image: {image_path}") from e

        return SourceImage(
            path=image_path,
            width=width,
            height=height,
            format=image_format
        )
