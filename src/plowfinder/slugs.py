"""Slug normalization.

Every slug in the system comes out of :func:`normalize`; nothing builds a
slug by hand. The function is total (any string, including the empty string,
produces a possibly empty slug) and idempotent.
"""

import re

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")
_SLUG_SHAPE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def normalize(text: str) -> str:
    """Return the canonical slug for *text*.

    Examples::

        normalize("Lake City")                  -> "lake-city"
        normalize("Glander Excavating & Sons")  -> "glander-excavating-and-sons"
        normalize("  --Red   Wing!! ")          -> "red-wing"
        normalize("")                           -> ""
    """
    lowered = text.lower().replace("&", "and")
    return _NON_SLUG_RUN.sub("-", lowered).strip("-")


def is_slug(value: str) -> bool:
    """True when *value* is a non-empty, well-formed slug."""
    return bool(_SLUG_SHAPE.match(value))
