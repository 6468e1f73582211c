from django import forms

from installer.exceptions import ReconcileError
from installer.services.staging import (
    StagingReconciler,
    UploadedArchive,
    current_staging_directory,
)


class StagingConfigureForm(forms.Form):
    staging_directory = forms.CharField(
        label="Staging directory",
        max_length=255,
        help_text="Directory the configuration is imported from. It is created if it does not exist.",
        widget=forms.TextInput(attrs={"class": "form-control form-control-sm"}),
    )
    import_tarball = forms.FileField(
        label="Select your configuration export file",
        required=False,
        help_text="A .tar.gz configuration export. It replaces the contents of the staging directory.",
        widget=forms.ClearableFileInput(attrs={"class": "form-control", "accept": ".tar.gz,.tgz"}),
    )

    def __init__(self, *args, reconciler=None, default_path=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.reconciler = reconciler or StagingReconciler()
        self.default_path = default_path or current_staging_directory()
        self.fields["staging_directory"].initial = self.default_path

    def has_upload(self):
        upload = self.cleaned_data.get("import_tarball")
        return bool(upload) and upload.size > 0

    def clean(self):
        cleaned = super().clean()
        staging_directory = cleaned.get("staging_directory")
        if not staging_directory or self.errors:
            return cleaned

        try:
            self.reconciler.check(staging_directory, self.default_path, self.has_upload())
        except ReconcileError as exc:
            self.add_error("staging_directory", str(exc))
        return cleaned

    def save(self):
        """Run the reconciliation. ReconcileError propagates to the view."""
        upload = UploadedArchive.from_upload(self.cleaned_data.get("import_tarball"))
        return self.reconciler.reconcile(
            self.cleaned_data["staging_directory"],
            self.default_path,
            upload,
        )
