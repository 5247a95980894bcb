from django.apps import AppConfig


class MediaConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "blogroll.apps.media"
    verbose_name = "Media library"
