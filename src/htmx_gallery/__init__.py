"""HTMX Gallery - server-rendered infinite-scroll image gallery."""

__version__ = "0.1.0"

from htmx_gallery.core.config import GalleryConfig, config

__all__ = [
    "GalleryConfig",
    "config",
]
