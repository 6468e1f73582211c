# installer/services/storage.py
import logging
import os
import stat
from pathlib import Path

from installer.exceptions import StagingIOError

logger = logging.getLogger(__name__)


class DirectoryStore:
    """
    Configuration objects stored as one ``<name>.yml`` file each in a flat
    directory (no sub-directories are listed).
    """
    extension = "yml"

    def __init__(self, directory):
        self.directory = Path(directory)

    def _suffix(self):
        return f".{self.extension}"

    def file_path(self, name):
        return self.directory / f"{name}{self._suffix()}"

    def list_all(self, prefix=""):
        if not self.directory.is_dir():
            return []

        suffix = self._suffix()
        names = []
        for entry in os.scandir(self.directory):
            if not entry.is_file() or not entry.name.endswith(suffix):
                continue
            name = entry.name[: -len(suffix)]
            if name and name.startswith(prefix):
                names.append(name)
        return sorted(names)

    def delete_all(self, prefix=""):
        names = self.list_all(prefix)
        for name in names:
            try:
                self.file_path(name).unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise StagingIOError(f"Could not delete {self.file_path(name)}: {exc}") from exc
        if names:
            logger.info("Deleted %d config files from %s", len(names), self.directory)
        return names


def prepare_directory(path, create=True, modify_permissions=True):
    """
    Make sure ``path`` is a writable directory.

    Creates it (with parents) when ``create`` is set, and tries to add the
    owner write bit when ``modify_permissions`` is set. Returns False when the
    directory still cannot be used.
    """
    path = Path(path)

    if not path.is_dir():
        if not create:
            return False
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Could not create directory %s: %s", path, exc)
            return False

    if not os.access(path, os.W_OK | os.X_OK):
        if not modify_permissions:
            return False
        try:
            mode = path.stat().st_mode
            path.chmod(mode | stat.S_IWUSR | stat.S_IXUSR)
        except OSError as exc:
            logger.warning("Could not make %s writable: %s", path, exc)
            return False
        return os.access(path, os.W_OK | os.X_OK)

    return True
