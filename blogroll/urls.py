from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from django.views.generic import TemplateView

from blogroll.apps.renderer.views import blogroll_settings_view

urlpatterns = [
    #
    # Public blogroll page
    #
    path(
        "links/",
        TemplateView.as_view(template_name="renderer/links_page.html"),
        name="blogroll-page",
    ),
    #
    # Django admin
    #
    path(
        "admin/blogroll/settings/",
        blogroll_settings_view,
        name="admin-blogroll-settings",
    ),  # Blogroll settings page
    path("admin/", admin.site.urls),  # Django admin app
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
