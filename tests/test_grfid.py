import hashlib
import struct

import pytest

from grftools.grfid import (
    HEADER,
    FileReader,
    GrfIdError,
    get_grf_id,
    get_md5,
    main,
    skip_sprite_data,
)

GRFID_BYTES = b"\x12\x34\x56\x78"


def v1_file(*sprites: bytes) -> bytes:
    out = struct.pack("<HB", 4, 0xFF) + struct.pack("<I", len(sprites))
    for payload, stype in sprites:
        out += struct.pack("<HB", len(payload), stype) + payload
    return out + struct.pack("<H", 0)


def v1_grf(*sprites) -> bytes:
    body = struct.pack("<HB", 4, 0xFF) + struct.pack("<I", len(sprites))
    for sprite in sprites:
        body += sprite
    return body + struct.pack("<H", 0)


def pseudo_v1(data: bytes) -> bytes:
    return struct.pack("<HB", len(data), 0xFF) + data


def v2_grf(pseudo_data: bytes, sprite_section: bytes = b"") -> bytes:
    data = b"\x00" + struct.pack("<IB", 4, 0xFF) + struct.pack("<I", 1)
    data += struct.pack("<IB", len(pseudo_data), 0xFF) + pseudo_data
    data += struct.pack("<I", 0)
    return HEADER + struct.pack("<I", len(data)) + data + sprite_section


def write(tmp_path, content: bytes, name="x.grf"):
    path = tmp_path / name
    path.write_bytes(content)
    return path


def test_reader_little_endian_and_past_end():
    reader = FileReader(b"\x01\x02\x03\x04\x05")
    assert reader.read_dword() == 0x04030201
    assert reader.read_word() == 0x05
    assert reader.at_end()
    assert reader.read_byte() == 0


def test_reader_from_missing_or_empty(tmp_path):
    with pytest.raises(GrfIdError, match="Unable to open file"):
        FileReader.from_path(tmp_path / "missing.grf")
    with pytest.raises(GrfIdError, match="Unable to open file"):
        FileReader.from_path(write(tmp_path, b""))


def test_skip_uncompressed():
    reader = FileReader(bytes(20))
    skip_sprite_data(reader, 0x02, 7)
    assert reader.pos == 7


def test_skip_compressed_chunks():
    # literal chunk of 3 bytes, then a repeat chunk (0xF8 -> 1 byte) with one offset byte
    reader = FileReader(b"\x03abc\xf8\x00rest")
    skip_sprite_data(reader, 0x00, 4)
    assert reader.pos == 6


def test_skip_negative_does_nothing():
    reader = FileReader(bytes(4))
    skip_sprite_data(reader, 0x00, -3)
    assert reader.pos == 0


def test_grf_id_v1(tmp_path):
    path = write(tmp_path, v1_grf(pseudo_v1(b"\x08\x07" + GRFID_BYTES)))
    assert get_grf_id(path) == 0x12345678


def test_grf_id_v2(tmp_path):
    path = write(tmp_path, v2_grf(b"\x08\x08" + GRFID_BYTES))
    assert get_grf_id(path) == 0x12345678


def test_no_magic(tmp_path):
    path = write(tmp_path, b"\x05\x00\xff\x00\x00\x00\x00")
    with pytest.raises(GrfIdError, match="No magic header"):
        get_grf_id(path)


def test_no_grfid(tmp_path):
    path = write(tmp_path, v1_grf(pseudo_v1(b"\x01\x00\x00")))
    with pytest.raises(GrfIdError, match="no GrfID found"):
        get_grf_id(path)


def test_corrupt(tmp_path):
    content = struct.pack("<HB", 4, 0xFF) + struct.pack("<I", 1) + struct.pack("<HB", 50, 0xFF)
    path = write(tmp_path, content)
    with pytest.raises(GrfIdError, match="Corrupt GRF"):
        get_grf_id(path)


def test_md5_v1_is_whole_file(tmp_path):
    content = v1_grf(pseudo_v1(b"\x08\x07" + GRFID_BYTES))
    path = write(tmp_path, content)
    assert get_md5(path) == hashlib.md5(content).hexdigest()


def test_md5_v2_ignores_sprite_section(tmp_path):
    first = write(tmp_path, v2_grf(b"\x08\x08" + GRFID_BYTES, b"\x01\x02\x03"), "a.grf")
    second = write(tmp_path, v2_grf(b"\x08\x08" + GRFID_BYTES, b"\x09" * 10), "b.grf")
    third = write(tmp_path, v2_grf(b"\x08\x08\x00\x00\x00\x01"), "c.grf")
    assert get_md5(first) == get_md5(second)
    assert get_md5(first) != get_md5(third)


def test_md5_invalid_offset(tmp_path):
    path = write(tmp_path, HEADER + struct.pack("<I", 1000) + b"\x00")
    with pytest.raises(GrfIdError, match="Invalid sprite location offset"):
        get_md5(path)


def test_main_prints_grfid(tmp_path, capsys):
    path = write(tmp_path, v1_grf(pseudo_v1(b"\x08\x07" + GRFID_BYTES)))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "12345678\n"


def test_main_md5(tmp_path, capsys):
    content = v1_grf(pseudo_v1(b"\x08\x07" + GRFID_BYTES))
    path = write(tmp_path, content)
    assert main(["-m", str(path)]) == 0
    assert capsys.readouterr().out.strip() == hashlib.md5(content).hexdigest()


def test_main_usage_and_errors(tmp_path, capsys):
    assert main([]) == 1
    assert main(["-m"]) == 1
    assert main(["-h"]) == 1
    assert "Usage" in capsys.readouterr().out
    assert main([str(tmp_path / "nothing.grf")]) == 1
    assert "Unable to open file" in capsys.readouterr().err