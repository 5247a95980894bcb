"""Platform feature flags with process-level overrides.

A feature is backed by a persisted constance option (its "enable record").
Code that needs the feature forced one way regardless of what the option
holds sets an override; overrides always win over the stored value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feature:
    """A platform feature that can be switched on and off."""

    name: str
    option_key: str  # constance key holding the persisted enable record
    label: str = ""


_registry: dict[str, Feature] = {}
_overrides: dict[str, bool] = {}


def register(feature: Feature) -> None:
    """Register a feature. Called from the owning app's AppConfig.ready()."""
    if feature.name in _registry:
        raise ValueError(f"Feature '{feature.name}' is already registered")
    _registry[feature.name] = feature


def get_feature(name: str) -> Feature | None:
    """Get a registered feature by name, or None."""
    return _registry.get(name)


def set_override(name: str, value: bool) -> None:
    """Force ``name`` to ``value`` until cleared."""
    previous = _overrides.get(name)
    _overrides[name] = bool(value)
    if previous is not bool(value):
        logger.debug("feature_override_set", extra={"feature": name, "value": bool(value)})


def clear_override(name: str) -> None:
    _overrides.pop(name, None)


def clear_overrides() -> None:
    """Drop every override. For tests only."""
    _overrides.clear()


def get_override(name: str) -> bool | None:
    return _overrides.get(name)


def is_enabled(name: str) -> bool:
    """Whether a feature is on: override first, then the stored option."""
    if name in _overrides:
        return _overrides[name]
    feature = _registry.get(name)
    if feature is None:
        return False
    from constance import config

    return bool(getattr(config, feature.option_key, False))
