# installer/services/archive.py
"""
Reading configuration export tarballs (``.tar.gz``).

- list member names without extracting anything
- extract a chosen list of members into the staging directory
- refuse members that would land outside the destination
"""
from __future__ import annotations

import logging
import tarfile
import zlib
from pathlib import Path
from typing import Iterable, Iterator

from installer.exceptions import ArchiveExtractError, ArchiveReadError

logger = logging.getLogger(__name__)

READ_ERRORS = (tarfile.TarError, EOFError, OSError, zlib.error)
DRAIN_CHUNK = 64 * 1024


class ArchiveExtractor:
    mode = "r:gz"

    def list_entries(self, archive_path) -> Iterator[str]:
        """
        Yield member names lazily, in archive order.

        Raises ArchiveReadError when the file is not a gzip-compressed tar stream.
        """
        try:
            with tarfile.open(archive_path, self.mode) as tar:
                for member in tar:
                    yield member.name
                _drain(tar)
        except READ_ERRORS as exc:
            raise ArchiveReadError(f"Could not read {Path(archive_path).name}: {exc}") from exc

    def extract(self, archive_path, entry_names: Iterable[str], dest_dir) -> None:
        dest_root = Path(dest_dir).resolve()
        wanted = list(entry_names)

        try:
            tar = tarfile.open(archive_path, self.mode)
        except READ_ERRORS as exc:
            raise ArchiveReadError(f"Could not read {Path(archive_path).name}: {exc}") from exc

        with tar:
            try:
                tar.getmembers()
            except READ_ERRORS as exc:
                raise ArchiveReadError(f"Could not read {Path(archive_path).name}: {exc}") from exc

            members = []
            for name in wanted:
                try:
                    member = tar.getmember(name)
                except KeyError:
                    raise ArchiveExtractError(f"Archive has no entry named {name!r}") from None
                _guard_member(dest_root, member)
                members.append(member)

            try:
                dest_root.mkdir(parents=True, exist_ok=True)
                tar.extractall(dest_root, members=members, filter="data")
                _drain(tar)
            except READ_ERRORS as exc:
                raise ArchiveExtractError(str(exc)) from exc

        logger.info("Extracted %d entries into %s", len(members), dest_root)


# --------------------------
# internal helpers
# --------------------------

def _drain(tar: tarfile.TarFile) -> None:
    # tarfile stops at the end-of-archive blocks; the gzip CRC is only
    # verified once the stream is read to EOF
    while tar.fileobj.read(DRAIN_CHUNK):
        pass


def _inside(dest_root: Path, target: Path) -> bool:
    return target == dest_root or dest_root in target.parents


def _guard_member(dest_root: Path, member: tarfile.TarInfo) -> None:
    target = (dest_root / member.name).resolve()
    if not _inside(dest_root, target):
        raise ArchiveExtractError(f"Unsafe archive entry path: {member.name!r}")

    if member.issym():
        link_target = (target.parent / member.linkname).resolve()
        if not _inside(dest_root, link_target):
            raise ArchiveExtractError(f"Unsafe archive link: {member.name!r} -> {member.linkname!r}")
    elif member.islnk():
        link_target = (dest_root / member.linkname).resolve()
        if not _inside(dest_root, link_target):
            raise ArchiveExtractError(f"Unsafe archive link: {member.name!r} -> {member.linkname!r}")
