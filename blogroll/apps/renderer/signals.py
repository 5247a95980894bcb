"""Apply Links Manager changes as soon as the setting is saved."""

import logging

from constance.signals import config_updated
from django.dispatch import receiver

from blogroll.apps.core.booleans import parse_loose_boolean

from . import conf

logger = logging.getLogger(__name__)


@receiver(config_updated)
def apply_links_manager_setting(sender, key, old_value, new_value, **kwargs):
    """Apply BLOGROLL_ENABLE_LINKS_MANAGER immediately, not on the next admin load."""
    if key != conf.ENABLE_LINKS_MANAGER:
        return
    from .services import build_links_manager_toggle

    state = build_links_manager_toggle().apply(parse_loose_boolean(new_value, False))
    logger.info(
        "links_manager_setting_changed",
        extra={"old_value": old_value, "new_value": new_value, "state": state.value},
    )
