"""Default wiring of the renderer against the Django-backed adapters."""

from __future__ import annotations

from collections.abc import Mapping

from django.utils.safestring import SafeString

from .adapters import (
    ConstanceSettingsStore,
    CoreFeatureOverride,
    DjangoMediaLibrary,
    OrmBookmarkStore,
)
from .rendering import render_blogroll_links
from .toggle import LinksManagerToggle


def get_settings_store() -> ConstanceSettingsStore:
    return ConstanceSettingsStore()


def build_links_manager_toggle() -> LinksManagerToggle:
    return LinksManagerToggle(settings=get_settings_store(), features=CoreFeatureOverride())


def render_blogroll_marker(attrs: Mapping[str, str] | None = None) -> SafeString:
    """Handler for the ``[blogroll-links]`` marker and template tag."""
    return render_blogroll_links(
        attrs,
        bookmarks=OrmBookmarkStore(),
        media=DjangoMediaLibrary(),
        settings=get_settings_store(),
    )
