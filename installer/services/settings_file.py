# installer/services/settings_file.py
"""
Site settings file rewritten during installation.

The file is a small JSON document read by ``config/settings.py`` at start-up.
Keys are dotted paths, e.g. ``config_directories.staging``.
"""
import json
import logging
import os
import tempfile
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)

_MISSING = object()


class SettingsFileStore:
    def __init__(self, path=None):
        self.path = Path(path or settings.SITE_SETTINGS_FILE)

    def load(self):
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f) or {}
        except FileNotFoundError:
            return {}

    def read(self, key, default=None):
        node = self.load()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def write(self, key, value):
        """
        Set ``key`` to ``value`` and rewrite the file.

        Returns False without touching the file when the value is unchanged.
        """
        data = self.load()
        if self.read(key, _MISSING) == value:
            return False

        parts = key.split(".")
        node = data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[parts[-1]] = value

        self._dump(data)
        logger.info("Rewrote %s in %s", key, self.path)
        return True

    def _dump(self, data):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".settings-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


def settings_write_warning(path=None):
    """
    True when the settings file or its directory is still writable.

    The installer no longer needs to write them once the site is configured,
    so the operator is asked to drop the write permission.
    """
    path = Path(path or settings.SITE_SETTINGS_FILE)
    directory = path.parent

    file_locked = path.is_file() and os.access(path, os.R_OK) and not os.access(path, os.W_OK)
    dir_locked = directory.is_dir() and not os.access(directory, os.W_OK)
    return not (file_locked and dir_locked)
