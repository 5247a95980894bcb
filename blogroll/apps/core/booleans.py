"""Permissive boolean parsing for marker attributes and stored options."""

from __future__ import annotations

TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


def parse_loose_boolean(value: object, default: bool) -> bool:
    """Interpret ``value`` as a boolean, falling back to ``default`` when absent.

    ``None`` means the value was never supplied, so ``default`` wins. Strings
    are true only when they match :data:`TRUE_STRINGS` (case-insensitive,
    surrounding whitespace ignored); every other string, including ``""``,
    is false.

    Examples:
        parse_loose_boolean(None, True) -> True
        parse_loose_boolean("YES", False) -> True
        parse_loose_boolean("0", True) -> False
        parse_loose_boolean("maybe", True) -> False
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    return str(value).strip().lower() in TRUE_STRINGS
