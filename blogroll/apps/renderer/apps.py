from django.apps import AppConfig


class RendererConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "blogroll.apps.renderer"
    verbose_name = "Blogroll renderer"

    def ready(self):
        from . import signals

        del signals  # imported for side effects (signal registration)

        self._register_shortcodes()

    @staticmethod
    def _register_shortcodes():
        from blogroll.apps.core.shortcodes import Shortcode, get_shortcode, register

        from .conf import SHORTCODE_NAME
        from .services import render_blogroll_marker

        if get_shortcode(SHORTCODE_NAME) is None:
            register(
                Shortcode(
                    name=SHORTCODE_NAME,
                    render=render_blogroll_marker,
                    description="Bookmarks list with optional category filter",
                )
            )
