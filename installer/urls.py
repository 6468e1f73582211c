from django.urls import path

from installer.views.done import index, setup_done
from installer.views.site import site_configure
from installer.views.staging import staging_configure

app_name = "installer"

urlpatterns = [
    path("", index, name="index"),
    path("staging/", staging_configure, name="staging"),
    path("site/", site_configure, name="site"),
    path("done/", setup_done, name="done"),
]
