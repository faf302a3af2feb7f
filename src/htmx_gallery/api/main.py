"""HTMX Gallery — FastAPI Application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, the HTML routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
- **Rendering** is done by :mod:`htmx_gallery.api.fragments`; every route
  returns an ``HTMLResponse`` and the browser swaps it into the page with
  htmx.
- **State** is a single :class:`~htmx_gallery.core.counter.ImageCounter`
  created in the lifespan handler and stored on ``app.state``.  Handlers
  receive it through the :func:`get_counter` dependency.
- **Static assets** (the compiled stylesheet) are served by FastAPI's
  ``StaticFiles`` at ``/static``.

Endpoints
---------
========  ===============  ==========================================
Method    Path             Purpose
========  ===============  ==========================================
GET       ``/``            Page shell with the first batch of images
GET       ``/more``        Next batch of images plus a new sentinel
GET       ``/modal/open``  Lightbox modal for ``url`` (and ``dir``)
========  ===============  ==========================================

Usage
-----
CLI (installed entry point)::

    htmx-gallery

Direct invocation::

    python -m htmx_gallery.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from html import escape

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from htmx_gallery import __version__
from htmx_gallery.api.fragments import render_image_list, render_modal, render_shell
from htmx_gallery.core.config import config
from htmx_gallery.core.counter import ImageCounter
from htmx_gallery.core.navigation import (
    InvalidImageReference,
    parse_direction,
    parse_image_reference,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the image counter on startup and report it on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    app.state.counter = ImageCounter(config.image_source_url)
    logger.info("Gallery started, serving images from %s", config.image_source_url)

    yield

    logger.info("Gallery stopped after %d images", app.state.counter.value)


app = FastAPI(
    title="HTMX Gallery",
    description="Infinite-scroll image gallery rendered as HTML fragments.",
    version=__version__,
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=str(config.static_dir)), name="static")


def get_counter(request: Request) -> ImageCounter:
    """Return the application's image counter."""
    return request.app.state.counter


@app.exception_handler(InvalidImageReference)
async def invalid_reference_handler(request: Request, exc: InvalidImageReference) -> HTMLResponse:
    """Translate a malformed image reference into a 400 response.

    Args:
        request: The failing request.
        exc: The parse error raised by the handler.

    Returns:
        A minimal HTML error fragment with status 400.
    """
    logger.warning("Rejected %s (%s): %r", request.url.path, exc.reason, exc.reference)
    return HTMLResponse(
        content=f'<p class="error">Invalid image reference: {escape(str(exc))}</p>',
        status_code=400,
    )


@app.get("/", response_class=HTMLResponse)
async def index(counter: ImageCounter = Depends(get_counter)) -> HTMLResponse:
    """Serve the page shell with the first batch of images."""
    return HTMLResponse(
        content=render_shell(
            counter,
            title=config.app_title,
            htmx_script_url=config.htmx_script_url,
            count=config.images_per_page,
            trigger_delay=config.scroll_trigger_delay,
        )
    )


@app.get("/more", response_class=HTMLResponse)
async def more(counter: ImageCounter = Depends(get_counter)) -> HTMLResponse:
    """Serve the next batch of images.

    Requested by the sentinel at the end of the previous batch once it
    scrolls into view.  The response replaces that sentinel.
    """
    return HTMLResponse(
        content=render_image_list(
            counter,
            count=config.images_per_page,
            trigger_delay=config.scroll_trigger_delay,
        )
    )


@app.get("/modal/open", response_class=HTMLResponse)
async def open_modal(url: str = "", dir: str | None = None) -> HTMLResponse:
    """Serve the lightbox modal for one image.

    Args:
        url: Image reference formatted ``<base>?<id>``.
        dir: Navigation direction (``left`` / ``right``); anything else is
            ignored.

    Returns:
        The modal fragment.

    Raises:
        InvalidImageReference: If ``url`` is missing or malformed (handled
            as a 400 response).
    """
    reference = parse_image_reference(url)
    return HTMLResponse(content=render_modal(reference, parse_direction(dir)))


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~htmx_gallery.core.config.config`
    (``GALLERY_SERVER_HOST``, ``GALLERY_SERVER_PORT``, ``GALLERY_LOG_LEVEL``).
    Defaults to ``0.0.0.0:8080``.

    This function is registered as the ``htmx-gallery`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    uvicorn.run(
        "htmx_gallery.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level,
        reload=False,
    )


if __name__ == "__main__":
    main()
