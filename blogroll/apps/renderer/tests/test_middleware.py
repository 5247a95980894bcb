"""Tests for reconciling the Links Manager state on admin requests."""

from constance import config
from constance.test import override_config
from django.contrib.auth.models import Permission
from django.test import TestCase, tag

from blogroll.apps.core import features
from blogroll.apps.core.test_utils import TestDataMixin
from blogroll.apps.renderer.adapters import ConstanceSettingsStore


@tag("admin", "feature_flags")
class LinksManagerMiddlewareTests(TestDataMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.store = ConstanceSettingsStore()

    def test_admin_request_forces_feature_off_by_default(self):
        self.store.set("LINK_MANAGER_ENABLED", True)
        self.client.force_login(self.superuser)

        response = self.client.get("/admin/")

        self.assertEqual(response.status_code, 200)
        self.assertIs(features.get_override("link_manager"), False)
        self.assertNotIn("LINK_MANAGER_ENABLED", self.store)
        self.assertEqual(response.wsgi_request.hidden_admin_menu_entries, {"links"})

    def test_links_section_absent_from_admin_index_when_disabled(self):
        self.client.force_login(self.superuser)
        response = self.client.get("/admin/")
        self.assertNotContains(response, "/admin/links/bookmark/")

    def test_admin_request_restores_record_when_enabled(self):
        config.BLOGROLL_ENABLE_LINKS_MANAGER = True
        self.store.delete("LINK_MANAGER_ENABLED")
        features.clear_overrides()
        self.client.force_login(self.superuser)

        response = self.client.get("/admin/")

        self.assertIs(features.get_override("link_manager"), True)
        self.assertIs(self.store.get("LINK_MANAGER_ENABLED"), True)
        self.assertFalse(hasattr(response.wsgi_request, "hidden_admin_menu_entries"))
        self.assertContains(response, "/admin/links/bookmark/")

    def test_menu_not_hidden_for_user_without_permission(self):
        self.client.force_login(self.staff_user)
        response = self.client.get("/admin/")
        self.assertFalse(hasattr(response.wsgi_request, "hidden_admin_menu_entries"))

    def test_non_admin_requests_untouched(self):
        self.client.get("/links/")
        self.assertIsNone(features.get_override("link_manager"))


@tag("admin", "feature_flags")
class LinksMenuForBookmarkEditorTests(TestDataMixin, TestCase):
    """Staff who can view bookmarks but cannot change site settings."""

    def setUp(self):
        super().setUp()
        self.staff_user.user_permissions.add(
            Permission.objects.get(content_type__app_label="links", codename="view_bookmark")
        )
        self.client.force_login(self.staff_user)

    def test_links_section_hidden_while_disabled(self):
        response = self.client.get("/admin/")

        self.assertEqual(response.status_code, 200)
        self.assertNotContains(response, "/admin/links/bookmark/")
        self.assertFalse(hasattr(response.wsgi_request, "hidden_admin_menu_entries"))

    def test_links_section_shown_once_enabled(self):
        with override_config(BLOGROLL_ENABLE_LINKS_MANAGER=True):
            response = self.client.get("/admin/")

        self.assertContains(response, "/admin/links/bookmark/")

    def test_bookmark_changelist_follows_setting(self):
        self.assertEqual(self.client.get("/admin/links/bookmark/").status_code, 403)

        with override_config(BLOGROLL_ENABLE_LINKS_MANAGER=True):
            response = self.client.get("/admin/links/bookmark/")

        self.assertEqual(response.status_code, 200)
