import io

import pytest

from grftools.grfcomm import (
    GrfIOError,
    backup_filename,
    open_sprite_file,
    read_exact,
    sprite_filename,
    write_all,
)


def test_backup_filename():
    assert backup_filename("trg1.grf") == "trg1.bak"
    assert backup_filename("noext") == "noext.bak"


def test_sprite_filename_relative_directory(tmp_path):
    base = f"{tmp_path}/a.grf"
    result = sprite_filename(base, "sprites/", ".nfo", -1, "rb", False)
    assert result == f"{tmp_path}/sprites/a.nfo"


def test_sprite_filename_numbered(tmp_path):
    base = f"{tmp_path}/a.grf"
    assert sprite_filename(base, "sprites/", ".pcx", 3, "rb", False) == f"{tmp_path}/sprites/a03.pcx"
    assert sprite_filename(base, "sprites/", ".pcx", 123, "rb", False) == f"{tmp_path}/sprites/a123.pcx"


def test_sprite_filename_absolute_directory():
    assert sprite_filename("some/dir/a.grf", "/out/", ".nfo", -1, "rb", False) == "/out/a.nfo"


def test_sprite_filename_empty_directory():
    assert sprite_filename("some/a.grf", "", ".grf", -1, "rb", False) == "some/a.grf"


def test_sprite_filename_creates_directory_for_write(tmp_path):
    base = f"{tmp_path}/a.grf"
    result = sprite_filename(base, "out/", ".nfo", -1, "wb", True)
    assert (tmp_path / "out").is_dir()
    assert (tmp_path / "out" / "a.nfo").exists()
    assert result == f"{tmp_path}/out/a.nfo"


def test_sprite_filename_missing_for_read(tmp_path):
    with pytest.raises(GrfIOError, match="Cannot read"):
        sprite_filename(f"{tmp_path}/a.grf", "nowhere/", ".nfo", -1, "rb", True)


def test_open_sprite_file_roundtrip(tmp_path):
    name, stream = open_sprite_file(f"{tmp_path}/a.grf", "sprites/", ".nfo", "wt", True)
    with stream:
        stream.write("hello")
    name2, stream2 = open_sprite_file(f"{tmp_path}/a.grf", "sprites/", ".nfo", "rt", True)
    with stream2:
        assert stream2.read() == "hello"
    assert name == name2


def test_read_exact():
    stream = io.BytesIO(b"abcdef")
    assert read_exact("reading", stream, 4) == b"abcd"
    with pytest.raises(GrfIOError, match="Error while reading, got 2, wanted 4"):
        read_exact("reading", stream, 4)


def test_write_all():
    stream = io.BytesIO()
    write_all("writing", stream, b"xyz")
    assert stream.getvalue() == b"xyz"


def test_write_all_short():
    class Short:
        def write(self, data):
            return len(data) - 1

    with pytest.raises(GrfIOError, match="Error while writing"):
        write_all("writing", Short(), b"xyz")