from django.core.management.base import BaseCommand, CommandError
from django.conf import settings
from django.contrib.auth import get_user_model

from installer.models.setup import SetupState
from installer.services.account import INSTALL_TIME_KEY
from installer.services.bootstrap import ensure_placeholder_admin
from installer.services.state import StateStore


class Command(BaseCommand):
    help = "Reset installer state so the install wizard runs again (DEV only)."

    def add_arguments(self, parser):
        parser.add_argument("--force", action="store_true", help="Allow run even if DEBUG=False")
        parser.add_argument("--delete-users", action="store_true", help="Delete all users (dangerous)")

    def handle(self, *args, **opts):
        if not settings.DEBUG and not opts["force"]:
            raise CommandError("Refusing to run reset_install because DEBUG=False. Use --force if you really want.")

        SetupState.objects.all().delete()
        StateStore().delete(INSTALL_TIME_KEY)
        self.stdout.write(self.style.WARNING("Deleted setup state and install_time (wizard will appear again)."))

        if opts["delete_users"]:
            User = get_user_model()
            User.objects.all().delete()
            self.stdout.write(self.style.WARNING("Deleted ALL users."))

        if ensure_placeholder_admin():
            self.stdout.write(self.style.WARNING("Recreated placeholder admin account."))

        self.stdout.write(self.style.SUCCESS("Reset complete."))
