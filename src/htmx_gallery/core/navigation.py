"""Modal navigation parsing.

The modal endpoint receives two query parameters:

- ``dir``: the direction the user navigated in (``left`` / ``right``), used
  only to pick the CSS slide animation.  Anything else means "unspecified".
- ``url``: an image reference of the form ``<base>?<id>``.  The ``?`` is a
  literal separator inside the value, so ``https://picsum.photos/800/800?5``
  splits into the base ``https://picsum.photos/800/800`` and the id ``5``.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

REFERENCE_SEPARATOR = "?"

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids are 32-bit signed integers.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


class InvalidImageReference(ValueError):
    """Raised when an image reference cannot be split into base and id.

    The offending value is kept on ``reference`` and the short cause on
    ``reason`` so the HTTP layer can report both.
    """

    def __init__(self, reference: str, reason: str):
        super().__init__(f"{reason}: {reference!r}")
        self.reference = reference
        self.reason = reason


class Direction(Enum):
    """Direction of the last modal navigation."""

    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value


class ImageReference(NamedTuple):
    """An image identified by a base path and a numeric sequence id."""

    base: str
    id: int

    def shifted(self, delta: int) -> ImageReference:
        """Return the reference ``delta`` positions away from this one."""
        return ImageReference(self.base, self.id + delta)

    def __str__(self) -> str:
        return f"{self.base}{REFERENCE_SEPARATOR}{self.id}"


def parse_direction(token: str | None) -> Direction | None:
    """Parse a direction token.

    Matching is exact and case-sensitive.  A missing token and an unknown
    token are treated the same way.

    Args:
        token: Raw ``dir`` query parameter, or ``None`` if absent.

    Returns:
        The matching :class:`Direction`, or ``None``.
    """
    if not token:
        return None
    try:
        return Direction(token)
    except ValueError:
        return None


def parse_image_reference(raw: str) -> ImageReference:
    """Split an image reference on its first ``?``.

    Args:
        raw: Reference string formatted ``<base>?<id>``.

    Returns:
        The parsed :class:`ImageReference`.

    Raises:
        InvalidImageReference: If the separator is missing or the trailing
            segment is not an integer in the 32-bit signed range.
    """
    base, separator, raw_id = raw.partition(REFERENCE_SEPARATOR)
    if not separator:
        raise InvalidImageReference(raw, "missing '?' separator")
    if not _ID_PATTERN.fullmatch(raw_id):
        raise InvalidImageReference(raw, "image id is not an integer")
    # Bound the digit count before converting so huge ids never reach int().
    if len(raw_id.lstrip("+-").lstrip("0")) > len(str(ID_MAX)):
        raise InvalidImageReference(raw, "image id is out of range")
    image_id = int(raw_id)
    if not ID_MIN <= image_id <= ID_MAX:
        raise InvalidImageReference(raw, "image id is out of range")
    return ImageReference(base, image_id)
