
from django.contrib.auth import login
from django.shortcuts import render, redirect
from django.utils import timezone

from installer.forms.site import SiteConfigureForm
from installer.models.setup import SetupState
from installer.services.profile import ProfileFixer
from installer.services.settings_file import SettingsFileStore, settings_write_warning
from installer.services.setup import get_setup_state
from installer.utils.system_message import SystemMessage


def site_configure(request):
    state = get_setup_state()

    if state.is_completed:
        return redirect("installer:done")
    if state.current_step < SetupState.STEP_SITE:
        return redirect("installer:staging")

    if request.method == "POST":
        form = SiteConfigureForm(request.POST)
        if form.is_valid():
            account = form.save()

            state.is_completed = True
            state.completed_at = timezone.now()
            state.save(update_fields=["is_completed", "completed_at", "updated_at"])

            login(request, account)
            return redirect("installer:done")
    else:
        # first display only: not repeated on the page after submission
        settings_store = SettingsFileStore()
        ProfileFixer(settings_store=settings_store).fix()
        if settings_write_warning(settings_store.path):
            SystemMessage.warning(
                request,
                f"All necessary changes to {settings_store.path.parent} and {settings_store.path} have been made, "
                "so you should remove write permissions to them now in order to avoid security risks.",
                step=SetupState.STEP_SITE,
            )
        form = SiteConfigureForm()

    return render(request, "installer/site.html", {
        "form": form,
        "step": SetupState.STEP_SITE,
        "title": "Configure site",
    })
