"""Blogroll settings form."""

from django import forms
from django.utils.translation import gettext_lazy as _

from blogroll.apps.core.booleans import parse_loose_boolean
from blogroll.apps.core.forms import AdminStyledFormMixin
from blogroll.apps.core.text import sanitize_text_field

from . import conf
from .ports import SettingsStore


class BlogrollSettingsForm(AdminStyledFormMixin, forms.Form):
    """Plugin settings: Links Manager switch and the container CSS class."""

    enable_links_manager = forms.BooleanField(
        label=_("Enable Links Manager"),
        required=False,
    )
    custom_class = forms.CharField(
        label=_("Custom CSS Class"),
        required=False,
        max_length=200,
        help_text=_("Added to the blogroll links container next to 'blogroll-links'."),
    )

    @classmethod
    def initial_from(cls, store: SettingsStore) -> dict:
        return {
            "enable_links_manager": parse_loose_boolean(
                store.get(conf.ENABLE_LINKS_MANAGER, conf.DEFAULTS[conf.ENABLE_LINKS_MANAGER]),
                False,
            ),
            "custom_class": store.get(conf.CUSTOM_CLASS, conf.DEFAULTS[conf.CUSTOM_CLASS]) or "",
        }

    def clean_custom_class(self):
        return sanitize_text_field(self.cleaned_data.get("custom_class"))

    def save(self, store: SettingsStore) -> None:
        """Write the cleaned values to ``store``."""
        store.set(conf.ENABLE_LINKS_MANAGER, bool(self.cleaned_data["enable_links_manager"]))
        store.set(conf.CUSTOM_CLASS, self.cleaned_data["custom_class"])
