from django.contrib import admin

from blogroll.apps.core import features

from .apps import LINK_MANAGER_FEATURE, LINKS_MENU_ENTRY
from .models import Bookmark, LinkCategory


def links_menu_visible(request) -> bool:
    """Whether the Links Manager section should appear for this request.

    Hidden when the feature is off or when something hid the entry for this
    request (see ``hidden_admin_menu_entries``).
    """
    if not features.is_enabled(LINK_MANAGER_FEATURE):
        return False
    return LINKS_MENU_ENTRY not in getattr(request, "hidden_admin_menu_entries", ())


class LinksManagerAdminMixin:
    """Gate the Links Manager models on the link_manager feature."""

    def has_module_permission(self, request):
        return links_menu_visible(request) and super().has_module_permission(request)

    def has_view_permission(self, request, obj=None):
        return links_menu_visible(request) and super().has_view_permission(request, obj)

    def has_add_permission(self, request):
        return links_menu_visible(request) and super().has_add_permission(request)

    def has_change_permission(self, request, obj=None):
        return links_menu_visible(request) and super().has_change_permission(request, obj)

    def has_delete_permission(self, request, obj=None):
        return links_menu_visible(request) and super().has_delete_permission(request, obj)


@admin.register(LinkCategory)
class LinkCategoryAdmin(LinksManagerAdminMixin, admin.ModelAdmin):
    list_display = ("name", "slug")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Bookmark)
class BookmarkAdmin(LinksManagerAdminMixin, admin.ModelAdmin):
    list_display = ("name", "url", "visible", "updated_at")
    list_filter = ("visible", "categories")
    search_fields = ("name", "url", "description")
    filter_horizontal = ("categories",)
    fieldsets = (
        (None, {"fields": ("name", "url", "description", "categories")}),
        ("Display", {"fields": ("image", "target", "rel", "visible")}),
        ("Notes", {"fields": ("notes",), "classes": ("collapse",)}),
    )
