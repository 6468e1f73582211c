"""
Shared fixtures for installer tests.

Every test gets its own site settings file and default staging directory
under ``tmp_path`` so nothing is written into the project tree.
"""
import io
import tarfile

import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def site_settings(settings, tmp_path):
    settings.SITE_SETTINGS_FILE = tmp_path / "site" / "settings.json"
    settings.CONFIG_DIRECTORIES = {"staging": str(tmp_path / "files" / "config" / "staging")}
    cache.clear()
    yield settings
    cache.clear()


@pytest.fixture
def default_staging(site_settings):
    return site_settings.CONFIG_DIRECTORIES["staging"]


@pytest.fixture
def make_tarball(tmp_path):
    """Build a .tar.gz from ``{member_name: text}``; returns its path."""
    counter = {"n": 0}

    def _make(files, name=None, links=None):
        counter["n"] += 1
        path = tmp_path / (name or f"export-{counter['n']}.tar.gz")
        with tarfile.open(path, "w:gz") as tar:
            for member_name, content in files.items():
                data = content.encode("utf-8")
                info = tarfile.TarInfo(member_name)
                info.size = len(data)
                tar.addfile(info, io.BytesIO(data))
            for member_name, target in (links or {}).items():
                info = tarfile.TarInfo(member_name)
                info.type = tarfile.SYMTYPE
                info.linkname = target
                tar.addfile(info)
        return path

    return _make


@pytest.fixture
def config_export(make_tarball):
    return make_tarball({
        "core.extension.yml": "module:\n  system: 0\n",
        "system.site.yml": "name: Example\n",
    })


@pytest.fixture
def placeholder_admin(db):
    from django.contrib.auth import get_user_model
    from installer.services.bootstrap import ensure_placeholder_admin

    ensure_placeholder_admin()
    return get_user_model().objects.get(pk=1)
