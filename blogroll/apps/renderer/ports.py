"""Collaborator interfaces used by the blogroll renderer.

The pipeline and the toggle controller only talk to these protocols;
``adapters`` provides the Django-backed implementations.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class BookmarkRecord:
    """A bookmark as handed to the pipeline (read-only)."""

    url: str
    name: str
    description: str = ""
    image_ref: str = ""
    categories: tuple[str, ...] = field(default=())


class BookmarkStore(Protocol):
    def query(
        self, order_by: str, order: str, category_name: str | None = None
    ) -> Sequence[BookmarkRecord]:
        """Return bookmarks in the requested order, optionally filtered by category."""
        ...


class MediaLibrary(Protocol):
    def resolve_attachment_id(self, url: str) -> int | None:
        """Map a media URL back to its library id, or None for external URLs."""
        ...

    def render_attachment_image(
        self, attachment_id: int, size: str, attrs: Mapping[str, str]
    ) -> str:
        """Return trusted ``<img>`` markup for a library item."""
        ...


class SettingsStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...


class FeatureOverride(Protocol):
    def set(self, flag_name: str, value: bool) -> None:
        """Force a platform feature flag regardless of its stored value."""
        ...


class AdminMenu(Protocol):
    def hide_entry(self, identifier: str) -> None: ...


class CapabilityChecker(Protocol):
    def has_capability(self, capability: str) -> bool: ...
