# installer/services/profile.py
import logging

from django.apps import apps
from django.conf import settings

from installer.services.settings_file import SettingsFileStore

logger = logging.getLogger(__name__)

INSTALL_PROFILE_KEY = "install_profile"


def installed_profiles():
    """Names of installed apps that declare ``install_profile = True`` on their AppConfig."""
    return [cfg.name for cfg in apps.get_app_configs() if getattr(cfg, "install_profile", False)]


class ProfileFixer:
    """
    Records the real install profile once the installer's own profile has
    done its work.
    """

    def __init__(self, profile_lister=installed_profiles, settings_store=None, own_profile=None):
        self.profile_lister = profile_lister
        self.settings_store = settings_store or SettingsFileStore()
        self.own_profile = own_profile or settings.INSTALLER_PROFILE_NAME

    def fix(self):
        for name in self.profile_lister():
            if name == self.own_profile:
                continue
            if self.settings_store.write(INSTALL_PROFILE_KEY, name):
                logger.info("Install profile set to %s", name)
            return name
        return None
