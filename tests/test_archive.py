import struct
import zipfile
from datetime import datetime, timezone

import pytest

from servedoc.modules.docsite import ArchiveFileSystem, ArchiveOpenError
from servedoc.modules.docsite.archive import normalize


def test_reads_deflated_entries(make_archive):
    path = make_archive({"index.html": b"<html>hello</html>", "org/example/Demo.html": b"demo" * 100})

    with ArchiveFileSystem.open(path) as fs:
        assert fs.exists("/index.html")
        assert fs.exists("org/example/Demo.html")
        assert fs.read_all("/org/example/Demo.html") == b"demo" * 100
        assert len(fs) == 2


def test_directories_and_missing_entries_do_not_exist(make_archive):
    path = make_archive({"org/": b"", "org/example/Demo.html": b"demo"})

    with ArchiveFileSystem.open(path) as fs:
        assert not fs.exists("/org/")
        assert not fs.exists("/org")
        assert not fs.exists("/")
        assert not fs.exists("/missing.html")
        with pytest.raises(FileNotFoundError):
            fs.read_all("/missing.html")


def test_dos_timestamp_is_read_as_utc(make_archive):
    path = make_archive({"index.html": (b"x", (2023, 5, 17, 8, 30, 16))})

    with ArchiveFileSystem.open(path) as fs:
        assert fs.last_modified("/index.html") == datetime(2023, 5, 17, 8, 30, 16, tzinfo=timezone.utc)


def test_extended_timestamp_wins_over_dos_time(tmp_path):
    path = tmp_path / "bundle.jar"
    info = zipfile.ZipInfo("index.html", date_time=(1999, 1, 1, 0, 0, 0))
    info.extra = struct.pack("<HHBi", 0x5455, 5, 1, 1700000000)
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr(info, b"x")

    with ArchiveFileSystem.open(path) as fs:
        assert fs.last_modified("index.html") == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("/index.html", "index.html"),
        ("/a/./b.html", "a/b.html"),
        ("a//b.html", "a/b.html"),
        ("/", ""),
        ("/../etc/passwd", None),
        ("/docs/../../secret", None),
        ("/docs/..", None),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_entries_outside_root_are_unreachable(make_archive):
    path = make_archive({"../evil.txt": b"evil", "index.html": b"ok"})

    with ArchiveFileSystem.open(path) as fs:
        assert not fs.exists("/../evil.txt")
        assert not fs.exists("../evil.txt")


def test_open_rejects_non_archives(tmp_path):
    bogus = tmp_path / "bogus.jar"
    bogus.write_bytes(b"<html>404 from a proxy</html>")

    with pytest.raises(ArchiveOpenError):
        ArchiveFileSystem.open(bogus)

    with pytest.raises(ArchiveOpenError):
        ArchiveFileSystem.open(tmp_path / "absent.jar")


def test_zeroed_dos_date_falls_back_to_epoch(make_archive):
    path = make_archive({"index.html": (b"x", (1980, 0, 0, 0, 0, 0))})

    with ArchiveFileSystem.open(path) as fs:
        assert fs.read_all("/index.html") == b"x"
        assert fs.last_modified("/index.html") == datetime(1980, 1, 1, tzinfo=timezone.utc)
