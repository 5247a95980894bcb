"""Blogroll settings page in the Django admin."""

from __future__ import annotations

import logging

from django.contrib import admin, messages
from django.http import HttpResponseForbidden
from django.shortcuts import redirect, render
from django.utils.translation import gettext as _
from django.utils.translation import gettext_noop

from . import conf
from .adapters import UserCapabilities
from .forms import BlogrollSettingsForm
from .services import build_links_manager_toggle, get_settings_store

logger = logging.getLogger(__name__)

# Marker examples shown in the "How to use" panel; texts are translated per request
USAGE_EXAMPLES = [
    (f"[{conf.SHORTCODE_NAME}]", gettext_noop("Display all links.")),
    (
        f'[{conf.SHORTCODE_NAME} category="MyCategory"]',
        gettext_noop("Filter links by category name."),
    ),
    (
        f'[{conf.SHORTCODE_NAME} show_images="1"]',
        gettext_noop("Show link images/icons if available."),
    ),
    (
        f'[{conf.SHORTCODE_NAME} show_titles="1"]',
        gettext_noop("Add link descriptions as tooltips."),
    ),
]


def blogroll_settings(request):
    """Settings page; requires permission to change site configuration."""
    if not UserCapabilities(request.user).has_capability(conf.MANAGE_SETTINGS_CAPABILITY):
        return HttpResponseForbidden("Permission to change settings required")

    store = get_settings_store()
    if request.method == "POST":
        form = BlogrollSettingsForm(request.POST)
        if form.is_valid():
            form.save(store)
            state = build_links_manager_toggle().apply(form.cleaned_data["enable_links_manager"])
            logger.info(
                "blogroll_settings_saved",
                extra={
                    "links_manager": state.value,
                    "custom_class": form.cleaned_data["custom_class"],
                },
            )
            messages.success(request, _("Settings saved."))
            return redirect("admin-blogroll-settings")
    else:
        form = BlogrollSettingsForm(initial=BlogrollSettingsForm.initial_from(store))

    context = {
        **admin.site.each_context(request),
        "title": _("Blogroll Links Renderer Settings"),
        "form": form,
        "usage_examples": [(code, _(text)) for code, text in USAGE_EXAMPLES],
    }
    return render(request, "renderer/settings.html", context)


blogroll_settings_view = admin.site.admin_view(blogroll_settings)
