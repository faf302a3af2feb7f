"""Tests for htmx_gallery.api.fragments — HTML fragment rendering.

Tests cover:
- The loading indicator.
- Single image items and their modal link.
- Image list cardinality, sentinel attributes and counter side effects.
- Modal navigation targets, content id per direction, and close actions.
- The full page shell.
"""

from __future__ import annotations

import pytest

from htmx_gallery.api.fragments import (
    modal_content_id,
    modal_link,
    render_image_item,
    render_image_list,
    render_indicator,
    render_modal,
    render_shell,
)
from htmx_gallery.core.counter import ImageCounter
from htmx_gallery.core.navigation import Direction, ImageReference

ITEM_MARKER = '<li tabindex="1"'
SENTINEL_MARKER = 'id="indicator-container"'


class TestIndicator:
    def test_three_bouncing_dots(self):
        html = render_indicator()
        assert html.count('class="inline-block animate-bounce"') == 3
        assert 'class="indicator text-3xl"' in html


class TestImageItem:
    """Test render_image_item."""

    def test_image_source(self):
        html = render_image_item("images?3")
        assert 'src="images?3"' in html

    def test_opens_modal_on_click_or_enter(self):
        html = render_image_item("images?3")
        assert "hx-trigger=\"click, keyup[key=='Enter']\"" in html
        assert 'hx-get="/modal/open?url=images%3F3"' in html
        assert 'hx-target="body"' in html
        assert 'hx-swap="beforeend"' in html

    def test_placeholder_url_is_encoded_in_link(self):
        html = render_image_item("https://picsum.photos/800/800?12")
        assert 'hx-get="/modal/open?url=https://picsum.photos/800/800%3F12"' in html

    def test_attribute_values_are_escaped(self):
        html = render_image_item('images"onload="x?1')
        assert 'src="images&quot;onload=&quot;x?1"' in html


class TestImageList:
    """Test render_image_list."""

    def test_sixteen_items_and_one_sentinel(self, counter: ImageCounter):
        for _ in range(3):
            html = render_image_list(counter)
            assert html.count(ITEM_MARKER) == 16
            assert html.count(SENTINEL_MARKER) == 1

    def test_sentinel_is_last(self, counter: ImageCounter):
        html = render_image_list(counter)
        assert html.rindex(ITEM_MARKER) < html.index(SENTINEL_MARKER)
        assert html.endswith("</li>")

    def test_sentinel_requests_more(self, counter: ImageCounter):
        html = render_image_list(counter)
        assert 'hx-trigger="intersect delay:0.75s"' in html
        assert 'hx-get="/more"' in html
        assert 'hx-target="this"' in html
        assert 'hx-swap="outerHTML"' in html
        assert render_indicator() in html

    def test_advances_counter_once_per_item(self, counter: ImageCounter):
        render_image_list(counter)
        assert counter.value == 16
        html = render_image_list(counter)
        assert counter.value == 32
        assert 'src="images?17"' in html
        assert 'src="images?32"' in html
        assert 'src="images?16"' not in html

    def test_custom_count_and_delay(self, counter: ImageCounter):
        html = render_image_list(counter, count=4, trigger_delay="2s")
        assert html.count(ITEM_MARKER) == 4
        assert 'hx-trigger="intersect delay:2s"' in html


class TestModal:
    """Test render_modal and its helpers."""

    def test_navigation_targets(self):
        html = render_modal(ImageReference("images", 5))
        assert 'hx-get="/modal/open?dir=left&amp;url=images%3F4"' in html
        assert 'hx-get="/modal/open?dir=right&amp;url=images%3F6"' in html

    def test_previous_button_comes_first(self):
        html = render_modal(ImageReference("images", 5))
        assert html.index("url=images%3F4") < html.index("url=images%3F6")

    def test_navigation_from_zero_goes_negative(self):
        html = render_modal(ImageReference("images", 0))
        assert "url=images%3F-1" in html

    @pytest.mark.parametrize(
        ("direction", "element_id"),
        [
            (None, "modal-content"),
            (Direction.LEFT, "modal-content-left"),
            (Direction.RIGHT, "modal-content-right"),
        ],
    )
    def test_content_id_follows_direction(self, direction, element_id):
        html = render_modal(ImageReference("images", 5), direction)
        assert f'id="{element_id}"' in html
        assert modal_content_id(direction) == element_id

    def test_image_source_is_reference(self):
        html = render_modal(ImageReference("https://picsum.photos/800/800", 10))
        assert 'src="https://picsum.photos/800/800?10"' in html

    def test_swaps_itself_on_navigation(self):
        html = render_modal(ImageReference("images", 5))
        assert html.startswith("<div")
        assert 'hx-target="this" hx-swap="outerHTML"' in html

    def test_backdrop_and_close_remove_modal_client_side(self):
        html = render_modal(ImageReference("images", 5))
        assert html.count("hx-on=\"click: this.parentElement.outerHTML = ''\"") == 2

    def test_modal_link_without_direction(self):
        assert modal_link("images?5") == "/modal/open?url=images%3F5"

    def test_modal_link_with_direction(self):
        link = modal_link(ImageReference("images", 2), Direction.RIGHT)
        assert link == "/modal/open?dir=right&url=images%3F2"


class TestShell:
    """Test render_shell."""

    def test_document_structure(self, counter: ImageCounter):
        html = render_shell(counter)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>HTMX Infinite Scroll Gallery</title>" in html
        assert '<link rel="stylesheet" href="/static/output.css"/>' in html
        assert '<ul id="images"' in html

    def test_embeds_one_list(self, counter: ImageCounter):
        html = render_shell(counter)
        assert html.count(ITEM_MARKER) == 16
        assert html.count(SENTINEL_MARKER) == 1
        assert counter.value == 16

    def test_loads_htmx(self, counter: ImageCounter):
        html = render_shell(counter)
        assert '<script src="https://unpkg.com/htmx.org@1.9.3/dist/htmx.min.js"></script>' in html

    def test_custom_title_is_escaped(self, counter: ImageCounter):
        html = render_shell(counter, title="Cats & Dogs")
        assert "<title>Cats &amp; Dogs</title>" in html
