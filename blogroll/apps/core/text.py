"""Plain-text sanitizing helpers."""

from __future__ import annotations

import re

from django.utils.html import strip_tags

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_text_field(value: object) -> str:
    """Reduce ``value`` to a single line of plain text.

    Strips HTML tags, collapses runs of whitespace (including newlines and
    tabs) to single spaces and trims the ends. ``None`` becomes ``""``.
    """
    if value is None:
        return ""
    text = strip_tags(str(value))
    return _WHITESPACE_RE.sub(" ", text).strip()
