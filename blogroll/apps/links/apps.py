from django.apps import AppConfig

LINK_MANAGER_FEATURE = "link_manager"

# Admin menu identifier for the Links Manager section
LINKS_MENU_ENTRY = "links"


class LinksConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "blogroll.apps.links"
    verbose_name = "Links"

    def ready(self):
        from blogroll.apps.core.features import Feature, register

        register(
            Feature(
                name=LINK_MANAGER_FEATURE,
                option_key="LINK_MANAGER_ENABLED",
                label="Links Manager",
            )
        )
