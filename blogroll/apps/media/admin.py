from django.contrib import admin

from .models import MediaAsset


@admin.register(MediaAsset)
class MediaAssetAdmin(admin.ModelAdmin):
    list_display = ("__str__", "file", "created_at")
    search_fields = ("title", "alt_text", "file")
    readonly_fields = ("created_at", "updated_at")
