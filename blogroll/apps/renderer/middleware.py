"""Reconcile the Links Manager state on admin page loads."""

from __future__ import annotations

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse
from django.urls import NoReverseMatch, reverse

from .adapters import RequestAdminMenu, UserCapabilities
from .services import build_links_manager_toggle


class LinksManagerMiddleware:
    """Re-apply the Links Manager setting on every request under the admin.

    Must run after AuthenticationMiddleware so menu hiding can check the
    user's permissions.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def _admin_prefix(self) -> str | None:
        try:
            return reverse("admin:index")
        except NoReverseMatch:
            return None

    def __call__(self, request: HttpRequest) -> HttpResponse:
        prefix = self._admin_prefix()
        if prefix and request.path.startswith(prefix):
            toggle = build_links_manager_toggle()
            toggle.reconcile()
            toggle.hide_menu(
                RequestAdminMenu(request),
                UserCapabilities(getattr(request, "user", None)),
            )
        return self.get_response(request)
