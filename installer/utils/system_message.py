# installer/utils/system_message.py
from django.contrib import messages


class SystemMessage:
    """Installer messages, tagged with their level and the installer step."""

    @staticmethod
    def success(request, text, *, step=None):
        messages.success(request, text, extra_tags=SystemMessage._tags("success", step))

    @staticmethod
    def error(request, text, *, step=None):
        messages.error(request, text, extra_tags=SystemMessage._tags("error", step))

    @staticmethod
    def warning(request, text, *, step=None):
        messages.warning(request, text, extra_tags=SystemMessage._tags("warning", step))

    @staticmethod
    def _tags(level, step):
        tags = ["installer", level]
        if step:
            tags.append(f"step-{step}")
        return " ".join(tags)
