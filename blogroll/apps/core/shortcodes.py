"""Placeholder markers ("shortcodes") embedded in page content.

Apps register a marker name and a render callable in ``AppConfig.ready()``;
core has no imports from those apps.

Marker syntax:
- ``[name]`` / ``[name /]`` - marker with default attributes
- ``[name key="value" key2='value' key3=value]`` - attributes (names are
  case-insensitive, unknown names are passed through for the handler to ignore)
- ``[[name]]`` - escaped; renders the literal text ``[name]``

Public API:
- register(), unregister(), clear_registry(), Shortcode  - registration
- parse_attributes()                                    - attribute parsing
- render_shortcodes()                                   - expansion
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from django.utils.html import conditional_escape
from django.utils.safestring import SafeData, SafeString, mark_safe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Shortcode:
    """One registered marker (e.g. ``blogroll-links``)."""

    name: str
    render: Callable[[Mapping[str, str]], str]
    description: str = ""


_registry: dict[str, Shortcode] = {}
_pattern: re.Pattern[str] | None = None

_NAME_RE = re.compile(r"^[A-Za-z0-9_][\w-]*$")

_ATTR_RE = re.compile(
    r"""([\w-]+)\s*=\s*"([^"]*)\""""
    r"""|([\w-]+)\s*=\s*'([^']*)'"""
    r"""|([\w-]+)\s*=\s*([^\s'"]+)"""
)


def _compile() -> re.Pattern[str] | None:
    if not _registry:
        return None
    names = "|".join(re.escape(name) for name in sorted(_registry, key=len, reverse=True))
    # Groups: 1 opening escape "[", 2 name, 3 attribute text, 4 closing escape "]"
    return re.compile(rf"\[(\[?)({names})(?![\w-])([^\]]*?)/?\](\]?)")


def register(shortcode: Shortcode) -> None:
    """Register a marker. Called from each app's AppConfig.ready()."""
    global _pattern
    if not _NAME_RE.match(shortcode.name):
        raise ValueError(f"Invalid shortcode name '{shortcode.name}'")
    if shortcode.name in _registry:
        raise ValueError(f"Shortcode '{shortcode.name}' is already registered")
    _registry[shortcode.name] = shortcode
    _pattern = _compile()


def unregister(name: str) -> None:
    """Remove a marker if registered."""
    global _pattern
    _registry.pop(name, None)
    _pattern = _compile()


def clear_registry() -> None:
    """Reset registry state. For tests only."""
    global _pattern
    _registry.clear()
    _pattern = None


def get_shortcode(name: str) -> Shortcode | None:
    """Get a registered marker by name, or None."""
    return _registry.get(name)


def parse_attributes(text: str) -> dict[str, str]:
    """Parse ``key="value"`` pairs from a marker's attribute text.

    Double-quoted, single-quoted and bare values are supported. Keys are
    lower-cased; later duplicates win. Positional (key-less) values are ignored.
    """
    attrs: dict[str, str] = {}
    for match in _ATTR_RE.finditer(text or ""):
        if match.group(1) is not None:
            key, value = match.group(1), match.group(2)
        elif match.group(3) is not None:
            key, value = match.group(3), match.group(4)
        else:
            key, value = match.group(5), match.group(6)
        attrs[key.lower()] = value
    return attrs


def render_shortcodes(text: str) -> SafeString:
    """Expand every registered marker in ``text``.

    Handler output is inserted as-is and must already be safe HTML. The text
    around markers is escaped unless ``text`` itself is marked safe.
    """
    if not text:
        return mark_safe("")
    is_safe = isinstance(text, SafeData)

    def _text(segment: str) -> str:
        return segment if is_safe else str(conditional_escape(segment))

    if _pattern is None:
        return mark_safe(_text(text))  # noqa: S308 - escaped unless already safe

    parts: list[str] = []
    position = 0
    for match in _pattern.finditer(text):
        parts.append(_text(text[position : match.start()]))
        position = match.end()

        if match.group(1) == "[" and match.group(4) == "]":
            # [[name]] -> literal [name]
            parts.append(_text(match.group(0)[1:-1]))
            continue

        shortcode = _registry[match.group(2)]
        attrs = parse_attributes(match.group(3))
        logger.debug(
            "shortcode_rendered",
            extra={"shortcode": shortcode.name, "attribute_names": sorted(attrs)},
        )
        parts.append(_text(match.group(1)))
        parts.append(str(shortcode.render(attrs)))
        parts.append(_text(match.group(4)))

    parts.append(_text(text[position:]))
    return mark_safe("".join(parts))  # noqa: S308 - segments escaped, handler output is safe
