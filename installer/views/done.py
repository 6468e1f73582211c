from django.shortcuts import render, redirect

from installer.models.setup import SetupState
from installer.services.setup import get_setup_state


def index(request):
    state = get_setup_state()
    if state.is_completed:
        return redirect("installer:done")
    if state.current_step >= SetupState.STEP_SITE:
        return redirect("installer:site")
    return redirect("installer:staging")


def setup_done(request):
    state = SetupState.objects.first()
    if not state or not state.is_completed:
        return redirect("installer:index")

    # only once per session
    if request.session.get("setup_done_shown"):
        return redirect("admin:index")

    request.session["setup_done_shown"] = True
    return render(request, "installer/done.html", {"state": state})
