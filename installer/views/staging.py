from django.shortcuts import render, redirect

from installer.exceptions import ExtractionFailed, ReconcileError
from installer.forms.staging import StagingConfigureForm
from installer.models.setup import SetupState
from installer.services.setup import get_setup_state
from installer.utils.system_message import SystemMessage


def staging_configure(request):
    state = get_setup_state()

    if state.is_completed:
        return redirect("installer:done")
    if state.current_step > SetupState.STEP_STAGING:
        return redirect("installer:site")

    if request.method == "POST":
        form = StagingConfigureForm(request.POST, request.FILES)
        if form.is_valid():
            try:
                config = form.save()
            except ExtractionFailed as exc:
                SystemMessage.error(
                    request,
                    f"Could not extract the contents of the tar file. The error message is {exc.message}",
                    step=SetupState.STEP_STAGING,
                )
            except ReconcileError as exc:
                form.add_error("staging_directory", str(exc))
            else:
                if form.has_upload():
                    SystemMessage.success(
                        request,
                        "Your configuration files were successfully uploaded, ready for import.",
                        step=SetupState.STEP_STAGING,
                    )
                state.staging_directory = config.directory_path
                state.current_step = SetupState.STEP_SITE
                state.save(update_fields=["staging_directory", "current_step", "updated_at"])
                return redirect("installer:site")
    else:
        form = StagingConfigureForm()

    return render(request, "installer/staging.html", {
        "form": form,
        "step": SetupState.STEP_STAGING,
        "title": "Configure configuration import location",
    })
