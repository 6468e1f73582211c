import os

from django.core.management.base import BaseCommand, CommandError

from installer.exceptions import ReconcileError
from installer.services.staging import (
    StagingReconciler,
    UploadedArchive,
    current_staging_directory,
)


class Command(BaseCommand):
    help = "Populate the staging directory from a configuration export (.tar.gz)."

    def add_arguments(self, parser):
        parser.add_argument("archive", nargs="?", help="Configuration export tarball; omit to only check the directory")
        parser.add_argument("--directory", help="Staging directory (default: the configured one)")
        parser.add_argument(
            "--delete-archive",
            action="store_true",
            help="Delete the archive once it has been staged",
        )

    def handle(self, *args, **opts):
        default_path = current_staging_directory()
        requested_path = opts["directory"] or default_path

        upload = None
        if opts["archive"]:
            # checked before the reconciler clears the staging directory
            if not os.path.isfile(opts["archive"]):
                raise CommandError(f"Archive not found: {opts['archive']}")
            upload = UploadedArchive(temp_path=opts["archive"], delete_after=opts["delete_archive"])

        try:
            config = StagingReconciler().reconcile(requested_path, default_path, upload)
        except ReconcileError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(self.style.SUCCESS(f"Staging directory ready: {config.directory_path}"))
        if not config.is_default_path:
            self.stdout.write("Saved as the configured staging directory.")
