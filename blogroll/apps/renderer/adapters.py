"""Django-backed implementations of the renderer's collaborator ports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from django.conf import settings

from blogroll.apps.core import features
from blogroll.apps.links.selectors import get_bookmarks
from blogroll.apps.media.rendering import render_attachment_image
from blogroll.apps.media.selectors import attachment_url_to_id

from .ports import BookmarkRecord


class OrmBookmarkStore:
    """Bookmark queries against the Links app."""

    def query(
        self, order_by: str, order: str, category_name: str | None = None
    ) -> list[BookmarkRecord]:
        return [
            BookmarkRecord(
                url=bookmark.url,
                name=bookmark.name,
                description=bookmark.description,
                image_ref=bookmark.image,
                categories=tuple(c.name for c in bookmark.categories.all()),
            )
            for bookmark in get_bookmarks(
                order_by=order_by, order=order, category_name=category_name
            )
        ]


class DjangoMediaLibrary:
    """Reverse URL lookup and managed rendering via the Media app."""

    def resolve_attachment_id(self, url: str) -> int | None:
        return attachment_url_to_id(url)

    def render_attachment_image(
        self, attachment_id: int, size: str, attrs: Mapping[str, str]
    ) -> str:
        return render_attachment_image(attachment_id, size, attrs)


class ConstanceSettingsStore:
    """Settings in django-constance's database backend.

    ``get`` returns the caller's default when the key is not configured or
    has no stored row, so a deleted setting reads as absent rather than as
    the CONSTANCE_CONFIG default.
    """

    def _row_key(self, key: str) -> str:
        return f"{getattr(settings, 'CONSTANCE_DATABASE_PREFIX', '')}{key}"

    def _rows(self, key: str):
        from constance.models import Constance

        return Constance.objects.filter(key=self._row_key(key))

    def get(self, key: str, default: Any = None) -> Any:
        if key not in settings.CONSTANCE_CONFIG or not self._rows(key).exists():
            return default
        from constance import config

        return getattr(config, key)

    def set(self, key: str, value: Any) -> None:
        from constance import config

        setattr(config, key, value)

    def delete(self, key: str) -> None:
        self._rows(key).delete()

    def __contains__(self, key: str) -> bool:
        return key in settings.CONSTANCE_CONFIG and self._rows(key).exists()


class CoreFeatureOverride:
    """Feature overrides through the core feature registry."""

    def set(self, flag_name: str, value: bool) -> None:
        features.set_override(flag_name, value)


class RequestAdminMenu:
    """Admin menu visibility for the current request only."""

    def __init__(self, request):
        self.request = request

    def hide_entry(self, identifier: str) -> None:
        hidden = getattr(self.request, "hidden_admin_menu_entries", None)
        if hidden is None:
            hidden = set()
            self.request.hidden_admin_menu_entries = hidden
        hidden.add(identifier)


class UserCapabilities:
    """Capability checks mapped onto Django permissions."""

    def __init__(self, user):
        self.user = user

    def has_capability(self, capability: str) -> bool:
        user = self.user
        if user is None or not user.is_authenticated or not user.is_active:
            return False
        return user.has_perm(capability)
