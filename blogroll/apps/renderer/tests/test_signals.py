"""Tests for applying the Links Manager setting when it is saved."""

from constance import config
from constance.test import override_config
from django.test import TestCase, tag

from blogroll.apps.core import features
from blogroll.apps.core.test_utils import FeatureOverrideIsolationMixin
from blogroll.apps.renderer.adapters import ConstanceSettingsStore


@tag("feature_flags", "constance")
class LinksManagerSettingSignalTests(FeatureOverrideIsolationMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.store = ConstanceSettingsStore()

    def test_enabling_applies_immediately(self):
        with override_config(BLOGROLL_ENABLE_LINKS_MANAGER=True):
            self.assertIs(features.get_override("link_manager"), True)
            self.assertIs(self.store.get("LINK_MANAGER_ENABLED"), True)
            self.assertTrue(features.is_enabled("link_manager"))

    def test_disabling_removes_record(self):
        config.BLOGROLL_ENABLE_LINKS_MANAGER = True
        config.BLOGROLL_ENABLE_LINKS_MANAGER = False

        self.assertIs(features.get_override("link_manager"), False)
        self.assertNotIn("LINK_MANAGER_ENABLED", self.store)

    def test_other_keys_ignored(self):
        config.BLOGROLL_CUSTOM_CLASS = "wide"
        self.assertIsNone(features.get_override("link_manager"))
