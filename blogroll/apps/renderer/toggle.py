"""Keep the platform's Links Manager feature in lockstep with our setting."""

from __future__ import annotations

import enum
import logging

from blogroll.apps.core.booleans import parse_loose_boolean
from blogroll.apps.links.apps import LINK_MANAGER_FEATURE, LINKS_MENU_ENTRY

from . import conf
from .ports import AdminMenu, CapabilityChecker, FeatureOverride, SettingsStore

logger = logging.getLogger(__name__)


class ToggleState(enum.Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"

    @classmethod
    def from_bool(cls, enabled: bool) -> ToggleState:
        return cls.ENABLED if enabled else cls.DISABLED


class LinksManagerToggle:
    """Two-state controller for the Links Manager feature.

    ENABLED: override forced on, enable record stored.
    DISABLED: override forced off, enable record deleted, admin menu entry
    hidden for users who can manage settings.

    Every operation is idempotent; reconciling on each admin request corrects
    drift from anything else that touched the enable record.
    """

    def __init__(self, settings: SettingsStore, features: FeatureOverride):
        self.settings = settings
        self.features = features

    def desired_state(self) -> ToggleState:
        default = conf.DEFAULTS[conf.ENABLE_LINKS_MANAGER]
        value = self.settings.get(conf.ENABLE_LINKS_MANAGER, default)
        return ToggleState.from_bool(parse_loose_boolean(value, False))

    def apply(self, enabled: bool) -> ToggleState:
        state = ToggleState.from_bool(bool(enabled))
        if state is ToggleState.ENABLED:
            self.features.set(LINK_MANAGER_FEATURE, True)
            if self.settings.get(conf.LINK_MANAGER_RECORD) is not True:
                self.settings.set(conf.LINK_MANAGER_RECORD, True)
        else:
            self.features.set(LINK_MANAGER_FEATURE, False)
            self.settings.delete(conf.LINK_MANAGER_RECORD)
        logger.debug("links_manager_state_applied", extra={"state": state.value})
        return state

    def reconcile(self) -> ToggleState:
        """Re-apply the state the setting asks for."""
        return self.apply(self.desired_state() is ToggleState.ENABLED)

    def hide_menu(self, menu: AdminMenu, capabilities: CapabilityChecker) -> bool:
        """Hide the Links menu entry when disabled; returns whether it was hidden."""
        if self.desired_state() is ToggleState.ENABLED:
            return False
        if not capabilities.has_capability(conf.MANAGE_SETTINGS_CAPABILITY):
            return False
        menu.hide_entry(LINKS_MENU_ENTRY)
        return True
