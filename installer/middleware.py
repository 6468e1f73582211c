from django.shortcuts import redirect
from django.urls import reverse
from django.utils.deprecation import MiddlewareMixin

from installer.services.setup import get_setup_state


class InitialSetupMiddleware(MiddlewareMixin):
    """
    Until installation is completed every request is sent to the installer.
    Installer pages, static and media files are left alone.
    """

    EXEMPT_PREFIXES = (
        "/install/",
        "/static/",
        "/media/",
    )

    def process_request(self, request):
        path = request.path or "/"

        for p in self.EXEMPT_PREFIXES:
            if path.startswith(p):
                return None

        state = get_setup_state()
        if not state.is_completed:
            return redirect(reverse("installer:index"))
        return None
