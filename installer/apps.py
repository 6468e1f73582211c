from django.apps import AppConfig


class InstallerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "installer"
    verbose_name = "Config Installer"

    # The installer is itself an install profile; the profile fixer skips it.
    install_profile = True

    def ready(self):
        from installer import signals  # noqa: F401
