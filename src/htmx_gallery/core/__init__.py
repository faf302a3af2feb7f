"""Core building blocks for the HTMX Gallery.

- **ImageCounter**: application-owned counter used to vary placeholder URLs
- **Direction / ImageReference**: modal navigation parsing
- **GalleryConfig**: configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)
"""

from htmx_gallery.core.config import GalleryConfig, config
from htmx_gallery.core.counter import ImageCounter
from htmx_gallery.core.navigation import (
    Direction,
    ImageReference,
    InvalidImageReference,
    parse_direction,
    parse_image_reference,
)

__all__ = [
    "Direction",
    "GalleryConfig",
    "ImageCounter",
    "ImageReference",
    "InvalidImageReference",
    "config",
    "parse_direction",
    "parse_image_reference",
]
