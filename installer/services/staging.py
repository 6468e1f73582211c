# installer/services/staging.py
"""
Staging directory reconciliation.

Given the directory the operator asked for and an optional uploaded export
tarball, make the directory usable, replace its contents with the tarball
(if any) and persist a non-default location into the site settings file.
"""
from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from installer.exceptions import (
    ArchiveError,
    DirectoryNotWritable,
    EmptyStaging,
    ExtractionFailed,
)
from installer.services.archive import ArchiveExtractor
from installer.services.settings_file import SettingsFileStore
from installer.services.storage import DirectoryStore, prepare_directory

logger = logging.getLogger(__name__)

STAGING = "staging"
STAGING_SETTINGS_KEY = f"config_directories.{STAGING}"


@dataclass
class StagingConfig:
    directory_path: str
    is_default_path: bool


@dataclass
class UploadedArchive:
    temp_path: str
    is_valid: bool = True
    # False for files the installer does not own (command line archives)
    delete_after: bool = True

    @classmethod
    def from_upload(cls, uploaded_file):
        """
        Wrap a Django ``UploadedFile``.

        Uploads kept in memory are spooled to a temp file so extraction always
        works from a path on disk.
        """
        if uploaded_file is None:
            return None

        if hasattr(uploaded_file, "temporary_file_path"):
            return cls(temp_path=uploaded_file.temporary_file_path(), is_valid=uploaded_file.size > 0)

        fd, tmp_path = tempfile.mkstemp(suffix=".tar.gz", prefix="config-upload-")
        with os.fdopen(fd, "wb") as out:
            for chunk in uploaded_file.chunks():
                out.write(chunk)
        return cls(temp_path=tmp_path, is_valid=uploaded_file.size > 0)

    def discard(self):
        if not self.delete_after:
            return
        try:
            os.unlink(self.temp_path)
        except FileNotFoundError:
            pass


def current_staging_directory():
    return settings.CONFIG_DIRECTORIES[STAGING]


class StagingReconciler:
    def __init__(self, settings_store=None, extractor=None, directories=None, store_class=DirectoryStore):
        self.settings_store = settings_store or SettingsFileStore()
        self.extractor = extractor or ArchiveExtractor()
        self.directories = settings.CONFIG_DIRECTORIES if directories is None else directories
        self.store_class = store_class

    def check(self, requested_path, default_path, has_upload=False):
        """
        Validation half of :meth:`reconcile`.

        A customised directory must exist (or be creatable) and be writable;
        without an upload the directory must already hold config files.
        """
        if requested_path != default_path or has_upload:
            if not prepare_directory(requested_path):
                raise DirectoryNotWritable(requested_path)

        if not has_upload and not self.store_class(requested_path).list_all():
            raise EmptyStaging(requested_path)

    def reconcile(self, requested_path, default_path, upload: Optional[UploadedArchive] = None) -> StagingConfig:
        has_upload = upload is not None and upload.is_valid
        is_default = requested_path == default_path

        try:
            self.check(requested_path, default_path, has_upload)

            failure = None
            if has_upload:
                failure = self._replace_contents(requested_path, upload.temp_path)

            if not is_default:
                self._persist(requested_path)

            if failure is not None:
                raise failure
        finally:
            if upload is not None:
                upload.discard()

        return StagingConfig(directory_path=requested_path, is_default_path=is_default)

    def _replace_contents(self, directory, archive_path):
        store = self.store_class(directory)
        store.delete_all()
        try:
            names = list(self.extractor.list_entries(archive_path))
            self.extractor.extract(archive_path, names, directory)
        except ArchiveError as exc:
            logger.warning("Could not extract %s into %s: %s", archive_path, directory, exc)
            return ExtractionFailed(str(exc))

        logger.info("Staged %d archive entries into %s", len(names), directory)
        return None

    def _persist(self, path):
        self.settings_store.write(STAGING_SETTINGS_KEY, path)
        self.directories[STAGING] = path
        logger.info("Staging directory set to %s", path)

