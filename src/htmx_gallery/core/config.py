"""Configuration management for HTMX Gallery.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the GALLERY_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (GALLERY_* prefix)
2. .env file in the project root
3. Default values defined in GalleryConfig

Example .env file:
    GALLERY_SERVER_PORT=9000
    GALLERY_IMAGES_PER_PAGE=24
    GALLERY_IMAGE_SOURCE_URL=https://picsum.photos/600/600

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
It is read by ``htmx_gallery.api.main`` when the application is built and
when the uvicorn server is launched.

Usage Example
-------------
    from htmx_gallery.core.config import config

    print(config.server_port)
    print(config.static_dir)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Directory shipped inside the package with the compiled stylesheet.
PACKAGE_STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


class GalleryConfig(BaseSettings):
    """Main configuration for HTMX Gallery.

    Values are loaded from environment variables with the GALLERY_ prefix,
    with fallback to defaults defined here.

    Attributes
    ----------
    Page Settings:
        app_title : str
            Text used for the page ``<title>`` and heading
        htmx_script_url : str
            CDN URL of the htmx client library

    Gallery Settings:
        image_source_url : str
            Base URL of the placeholder image service; the counter value is
            appended as ``?<n>``
        images_per_page : int
            Number of image items rendered per list fragment (1-100)
        scroll_trigger_delay : str
            htmx ``intersect`` delay before the next list fragment is fetched

    Paths:
        static_dir : Path
            Directory served under ``/static``

    Server Settings:
        server_host : str
            Server bind address (0.0.0.0 for all interfaces)
        server_port : int
            Server port (1024-65535)
        log_level : Literal["critical", "error", "warning", "info", "debug"]
            Log level handed to uvicorn

    Examples
    --------
        >>> custom_config = GalleryConfig(images_per_page=8, server_port=9000)
        >>> custom_config.images_per_page
        8
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GALLERY_",
        case_sensitive=False,
    )

    # Page settings
    app_title: str = Field(
        default="HTMX Infinite Scroll Gallery",
        description="Page title and heading",
    )
    htmx_script_url: str = Field(
        default="https://unpkg.com/htmx.org@1.9.3/dist/htmx.min.js",
        description="CDN URL of the htmx client library",
    )

    # Gallery settings
    image_source_url: str = Field(
        default="https://picsum.photos/800/800",
        description="Placeholder image service base URL",
    )
    images_per_page: int = Field(
        default=16,
        description="Image items rendered per list fragment",
        ge=1,
        le=100,
    )
    scroll_trigger_delay: str = Field(
        default="0.75s",
        description="Delay before an intersecting sentinel requests more images",
    )

    # Paths
    static_dir: Path = Field(
        default=PACKAGE_STATIC_DIR,
        description="Directory served under /static",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for all interfaces)",
    )
    server_port: int = Field(
        default=8080,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["critical", "error", "warning", "info", "debug"] = Field(
        default="info",
        description="Log level passed to uvicorn",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the static directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        # StaticFiles refuses to mount a directory that does not exist
        self.static_dir.mkdir(parents=True, exist_ok=True)


# Global configuration instance
config = GalleryConfig()
