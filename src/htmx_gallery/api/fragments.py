"""HTML fragment renderers.

Every function here returns a ready-to-send HTML string.  Interactivity is
expressed entirely through htmx attributes:

- the sentinel at the end of each image list fetches ``/more`` once it
  scrolls into view and replaces itself with the response,
- each image item fetches ``/modal/open`` on click or Enter and appends the
  modal to ``<body>``,
- the modal's navigation buttons re-request ``/modal/open`` for the
  neighbouring image and replace the modal in place,
- the backdrop and close button remove the modal client-side.

Styling uses Tailwind utility classes compiled into ``/static/output.css``.
Apart from advancing the image counter, rendering has no side effects.
"""

from __future__ import annotations

import logging
from html import escape
from urllib.parse import urlencode

from htmx_gallery.core.counter import ImageCounter
from htmx_gallery.core.navigation import Direction, ImageReference

logger = logging.getLogger(__name__)

MORE_PATH = "/more"
MODAL_PATH = "/modal/open"
STYLESHEET_PATH = "/static/output.css"

# Removes the whole modal from the DOM without a server round-trip.
CLOSE_MODAL_ACTION = "click: this.parentElement.outerHTML = ''"

ITEM_CLASSES = (
    "w-auto h-auto overflow-hidden flex rounded-xl shadow-md bg-gray-100 group "
    "hover:ring-2 hover:ring-neutral-400 hover:ring-offset-2 "
    "focus:ring-2 focus:ring-neutral-400 focus:ring-offset-2 cursor-pointer outline-none"
)
NAV_BUTTON_CLASSES = (
    "fixed text-2xl top-1/2 -translate-y-1/2 cursor-pointer text-white p-2 "
    "aspect-square rounded-full ring-1 ring-gray-50 active:bg-gray-500"
)

CHEVRON_LEFT = "M15.75 19.5L8.25 12l7.5-7.5"
CHEVRON_RIGHT = "M8.25 4.5l7.5 7.5-7.5 7.5"
CROSS = "M6 18L18 6M6 6l12 12"


def _query(**params: str) -> str:
    # Keep slashes and colons readable; '?' and '&' must be encoded.
    return urlencode(params, safe="/:")


def modal_link(reference: ImageReference | str, direction: Direction | None = None) -> str:
    """Build the ``/modal/open`` URL for an image reference.

    Args:
        reference: Image to open, either parsed or in ``<base>?<id>`` form.
        direction: Navigation direction to pass as ``dir``, if any.

    Returns:
        The unescaped request path with its query string.
    """
    if direction is None:
        return f"{MODAL_PATH}?{_query(url=str(reference))}"
    return f"{MODAL_PATH}?{_query(dir=str(direction), url=str(reference))}"


def modal_content_id(direction: Direction | None) -> str:
    """Element id of the modal image container.

    The id only exists so the stylesheet can animate the slide direction.
    """
    if direction is None:
        return "modal-content"
    return f"modal-content-{direction}"


def _icon(path: str) -> str:
    return (
        '<svg fill="none" viewBox="0 0 24 24" stroke-width="1.5" stroke="currentColor" '
        'class="w-6 h-6">'
        f'<path stroke-linecap="round" stroke-linejoin="round" d="{path}"/>'
        "</svg>"
    )


def render_indicator() -> str:
    """Render the three bouncing dots shown while more images load."""
    dot = '<span class="inline-block animate-bounce">.</span>'
    return f'<div class="indicator text-3xl">{dot * 3}</div>'


def render_image_item(image_url: str) -> str:
    """Render a single clickable gallery image.

    Args:
        image_url: Image source; also passed to the modal as ``url``.

    Returns:
        An ``<li>`` element.
    """
    return (
        f'<li tabindex="1" class="{ITEM_CLASSES}" '
        "hx-trigger=\"click, keyup[key=='Enter']\" "
        f'hx-get="{escape(modal_link(image_url))}" '
        'hx-target="body" hx-swap="beforeend">'
        '<img class="w-full h-full object-cover aspect-square transition duration-[2s] '
        'group-hover:scale-110 group-focus:scale-110" '
        f'src="{escape(image_url)}" alt=""/>'
        "</li>"
    )


def render_image_list(
    counter: ImageCounter,
    *,
    count: int = 16,
    trigger_delay: str = "0.75s",
) -> str:
    """Render a batch of images followed by the infinite-scroll sentinel.

    Each item draws a fresh URL from ``counter``, so successive batches
    show different pictures.  The sentinel requests ``/more`` after it has
    been visible for ``trigger_delay`` and is replaced by the next batch,
    which carries its own sentinel.

    Args:
        counter: Application image counter.
        count: Number of image items.
        trigger_delay: htmx ``intersect`` delay (e.g. ``"0.75s"``).

    Returns:
        ``count`` ``<li>`` items plus one sentinel ``<li>``.
    """
    items = "".join(render_image_item(counter.next_image_url()) for _ in range(count))
    logger.debug("Rendered %d images, counter now at %d", count, counter.value)

    sentinel = (
        '<li id="indicator-container" '
        'class="w-auto h-auto overflow-hidden flex rounded-xl mt-4 col-span-full justify-center" '
        f'hx-trigger="intersect delay:{escape(trigger_delay)}" '
        f'hx-get="{MORE_PATH}" hx-target="this" hx-swap="outerHTML">'
        f"{render_indicator()}"
        "</li>"
    )
    return items + sentinel


def render_modal(reference: ImageReference, direction: Direction | None = None) -> str:
    """Render the lightbox modal for one image.

    The previous/next buttons point at the references one id below and
    above ``reference`` and carry ``dir=left`` / ``dir=right`` respectively.
    The wrapper declares ``hx-target="this"`` so navigation swaps the whole
    modal in place.

    Args:
        reference: Image being displayed.
        direction: Direction the user navigated from, if any.

    Returns:
        The modal ``<div>``.
    """
    previous_link = modal_link(reference.shifted(-1), Direction.LEFT)
    next_link = modal_link(reference.shifted(1), Direction.RIGHT)

    return (
        '<div class="fixed w-full h-full top-0 left-0 focus:opacity-75 overflow-hidden" '
        'hx-target="this" hx-swap="outerHTML">'
        # Backdrop
        f'<div class="w-full h-full bg-gray-800 opacity-75" hx-on="{CLOSE_MODAL_ACTION}"></div>'
        # Navigation
        f'<button class="{NAV_BUTTON_CLASSES} left-10" hx-trigger="click" '
        f'hx-get="{escape(previous_link)}" aria-label="Previous image">'
        f"{_icon(CHEVRON_LEFT)}</button>"
        f'<button class="{NAV_BUTTON_CLASSES} right-10" hx-trigger="click" '
        f'hx-get="{escape(next_link)}" aria-label="Next image">'
        f"{_icon(CHEVRON_RIGHT)}</button>"
        # Image
        f'<div id="{modal_content_id(direction)}" '
        'class="fixed top-1/2 left-1/2 -translate-x-1/2 -translate-y-1/2 w-4/5 lg:w-1/2 '
        'max-w-3xl aspect-square rounded-md shadow-md overflow-hidden outline-none" '
        'tabindex="1" autofocus>'
        f'<img class="w-full h-full object-cover aspect-square" src="{escape(str(reference))}" alt=""/>'
        "</div>"
        # Close
        '<button class="fixed top-6 right-6 rounded-full bg-white shadow-xl w-8 h-8 flex '
        'items-center justify-center font-light text-xl text-neutral-700 cursor-pointer" '
        f'hx-on="{CLOSE_MODAL_ACTION}" aria-label="Close">'
        f"{_icon(CROSS)}</button>"
        "</div>"
    )


def render_shell(
    counter: ImageCounter,
    *,
    title: str = "HTMX Infinite Scroll Gallery",
    htmx_script_url: str = "https://unpkg.com/htmx.org@1.9.3/dist/htmx.min.js",
    count: int = 16,
    trigger_delay: str = "0.75s",
) -> str:
    """Render the full index page with the first batch of images.

    Args:
        counter: Application image counter.
        title: Page title and heading.
        htmx_script_url: Where the browser loads htmx from.
        count: Number of images in the first batch.
        trigger_delay: htmx ``intersect`` delay for the sentinel.

    Returns:
        A complete HTML document.
    """
    title = escape(title)
    image_list = render_image_list(counter, count=count, trigger_delay=trigger_delay)
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="utf-8"/>'
        '<meta name="viewport" content="width=device-width, initial-scale=1"/>'
        f"<title>{title}</title>"
        f'<link rel="stylesheet" href="{STYLESHEET_PATH}"/>'
        "</head>"
        '<body class="max-w-7xl m-auto px-8 lg:px-12 pb-12 pt-20 bg-gray-200 font-poppins">'
        '<main class="w-full flex flex-col items-center gap-2 lg:gap-4 space-y-10">'
        f'<h1 class="text-5xl tracking-wide font-semibold">{title}</h1>'
        '<ul id="images" class="w-full grid grid-cols-2 md:grid-cols-3 lg:grid-cols-4 gap-3">'
        f"{image_list}"
        "</ul>"
        "</main>"
        f'<script src="{escape(htmx_script_url)}"></script>'
        "</body>"
        "</html>"
    )
