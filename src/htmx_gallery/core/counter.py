"""Placeholder image counter.

Every rendered image item asks the counter for a fresh URL so that the
placeholder service returns a visually distinct picture each time.  The
counter is owned by the application (``app.state.counter``) and handed to
the renderers explicitly; there is no module-level state.
"""

from __future__ import annotations

import threading

DEFAULT_IMAGE_SOURCE_URL = "https://picsum.photos/800/800"


class ImageCounter:
    """Monotonic counter producing placeholder image URLs.

    The counter starts at ``start`` (0 by default) and is incremented once per
    call to :meth:`next_value` or :meth:`next_image_url`.  Increments are
    serialised with a lock, so concurrent requests never observe the same
    value.  The value lives for the lifetime of the process only.

    Args:
        base_url: Placeholder image URL; the counter value is appended as
            ``?<n>``.
        start: Initial counter value.
    """

    def __init__(self, base_url: str = DEFAULT_IMAGE_SOURCE_URL, start: int = 0):
        self.base_url = base_url
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Current counter value (the last value handed out)."""
        with self._lock:
            return self._value

    def next_value(self) -> int:
        """Increment the counter and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def next_image_url(self) -> str:
        """Return a placeholder URL parameterised by the next counter value.

        Returns:
            URL of the form ``<base_url>?<n>``.
        """
        return f"{self.base_url}?{self.next_value()}"

    def __repr__(self) -> str:
        return f"ImageCounter(base_url={self.base_url!r}, value={self.value})"
