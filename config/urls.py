from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView
from django.conf import settings


urlpatterns = [
    path("", RedirectView.as_view(pattern_name="installer:index", permanent=False)),
    path("admin/", admin.site.urls),
    path("install/", include("installer.urls", namespace="installer")),
]

from django.conf.urls.static import static
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
