"""Install/uninstall hooks for the renderer's persisted settings."""

from __future__ import annotations

import logging

from . import conf
from .ports import SettingsStore

logger = logging.getLogger(__name__)

_MISSING = object()


def install(store: SettingsStore) -> list[str]:
    """Seed default settings; existing values are left alone.

    Returns the keys that were seeded.
    """
    seeded = []
    for key, default in conf.DEFAULTS.items():
        if store.get(key, _MISSING) is _MISSING:
            store.set(key, default)
            seeded.append(key)
    logger.info("blogroll_installed", extra={"seeded_keys": seeded})
    return seeded


def uninstall(store: SettingsStore) -> list[str]:
    """Delete every setting the renderer owns. Returns the deleted keys."""
    keys = list(conf.DEFAULTS)
    for key in keys:
        store.delete(key)
    logger.info("blogroll_uninstalled", extra={"deleted_keys": keys})
    return keys
