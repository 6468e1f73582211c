"""
Tests for ArchiveExtractor: listing, selective extraction and the
path traversal guard.
"""
import io
import random
import tarfile

import pytest

from installer.exceptions import ArchiveError, ArchiveExtractError, ArchiveReadError
from installer.services.archive import ArchiveExtractor


@pytest.fixture
def damaged_export(tmp_path):
    """A large .tar.gz whose compressed body has bytes flipped mid-stream."""
    blob = random.Random(0).randbytes(400_000)
    path = tmp_path / "damaged.tar.gz"
    with tarfile.open(path, "w:gz") as tar:
        info = tarfile.TarInfo("blob.yml")
        info.size = len(blob)
        tar.addfile(info, io.BytesIO(blob))

    data = bytearray(path.read_bytes())
    middle = len(data) // 2
    for i in range(middle, middle + 400):
        data[i] ^= 0xFF
    path.write_bytes(bytes(data))
    return path


class TestListEntries:

    def test_lists_members_in_archive_order(self, config_export):
        names = list(ArchiveExtractor().list_entries(config_export))
        assert names == ["core.extension.yml", "system.site.yml"]

    def test_listing_is_lazy(self, config_export):
        entries = ArchiveExtractor().list_entries(config_export)
        assert next(entries) == "core.extension.yml"
        entries.close()

    def test_garbage_file_raises_read_error(self, tmp_path):
        path = tmp_path / "broken.tar.gz"
        path.write_bytes(b"this is not an archive")

        with pytest.raises(ArchiveReadError):
            list(ArchiveExtractor().list_entries(path))

    def test_uncompressed_tar_is_rejected(self, tmp_path):
        path = tmp_path / "plain.tar"
        with tarfile.open(path, "w"):
            pass

        with pytest.raises(ArchiveReadError):
            list(ArchiveExtractor().list_entries(path))

    def test_missing_file_raises_read_error(self, tmp_path):
        with pytest.raises(ArchiveReadError):
            list(ArchiveExtractor().list_entries(tmp_path / "nope.tar.gz"))


class TestExtract:

    def test_extracts_selected_entries(self, config_export, tmp_path):
        dest = tmp_path / "out"
        ArchiveExtractor().extract(config_export, ["system.site.yml"], dest)

        assert (dest / "system.site.yml").read_text() == "name: Example\n"
        assert not (dest / "core.extension.yml").exists()

    def test_preserves_relative_paths(self, make_tarball, tmp_path):
        archive = make_tarball({"language/fr/system.site.yml": "name: Exemple\n"})
        dest = tmp_path / "out"

        ArchiveExtractor().extract(archive, ["language/fr/system.site.yml"], dest)

        assert (dest / "language" / "fr" / "system.site.yml").is_file()

    def test_creates_missing_destination(self, config_export, tmp_path):
        dest = tmp_path / "a" / "b" / "c"
        ArchiveExtractor().extract(config_export, ["core.extension.yml"], dest)
        assert (dest / "core.extension.yml").is_file()

    def test_unknown_entry_raises(self, config_export, tmp_path):
        with pytest.raises(ArchiveExtractError, match="no entry named"):
            ArchiveExtractor().extract(config_export, ["missing.yml"], tmp_path / "out")

    def test_parent_traversal_is_rejected_before_writing(self, make_tarball, tmp_path):
        archive = make_tarball({
            "good.yml": "ok: true\n",
            "../escaped.yml": "bad: true\n",
        })
        dest = tmp_path / "out"

        with pytest.raises(ArchiveExtractError, match="Unsafe"):
            ArchiveExtractor().extract(archive, ["good.yml", "../escaped.yml"], dest)

        assert not (tmp_path / "escaped.yml").exists()
        assert not (dest / "good.yml").exists()

    def test_absolute_path_is_rejected(self, make_tarball, tmp_path):
        target = tmp_path / "absolute.yml"
        archive = make_tarball({str(target): "bad: true\n"})

        with pytest.raises(ArchiveExtractError):
            ArchiveExtractor().extract(archive, [str(target)], tmp_path / "out")

        assert not target.exists()

    def test_symlink_out_of_destination_is_rejected(self, make_tarball, tmp_path):
        archive = make_tarball({}, links={"evil.yml": "../../outside.yml"})

        with pytest.raises(ArchiveExtractError, match="link"):
            ArchiveExtractor().extract(archive, ["evil.yml"], tmp_path / "out")

    def test_corrupt_archive_raises_read_error(self, tmp_path):
        path = tmp_path / "broken.tar.gz"
        path.write_bytes(b"\x1f\x8b not really gzip")

        with pytest.raises(ArchiveReadError):
            ArchiveExtractor().extract(path, ["x.yml"], tmp_path / "out")


class TestDamagedStream:

    def test_listing_checks_the_gzip_trailer(self, damaged_export):
        with pytest.raises(ArchiveReadError):
            list(ArchiveExtractor().list_entries(damaged_export))

    def test_extraction_checks_the_gzip_trailer(self, damaged_export, tmp_path):
        with pytest.raises(ArchiveError):
            ArchiveExtractor().extract(damaged_export, ["blob.yml"], tmp_path / "out")

    def test_intact_archive_still_extracts_after_full_read(self, config_export, tmp_path):
        dest = tmp_path / "out"
        ArchiveExtractor().extract(config_export, ["core.extension.yml", "system.site.yml"], dest)
        assert sorted(p.name for p in dest.iterdir()) == ["core.extension.yml", "system.site.yml"]
