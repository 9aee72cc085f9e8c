import pytest

from grftools.data_general import general_table, general_table_names, language_names


def test_language_names_count_and_ends():
    names = language_names()
    assert len(names) == 128
    assert names[0] == "American"
    assert names[0x7F] == "any"


def test_language_names_undefined_are_empty():
    names = language_names()
    assert names[0x17] == ""
    assert names[0x07] == "Russian"


def test_langs_table_round_trip():
    data = general_table("langs")
    assert data[:2] == b"\x00\x08"
    assert data[2:].decode("ascii").split("\n")[:-1] == language_names()


def test_79dv_header_and_length():
    data = general_table("79Dv")
    assert data[:2] == bytes([0x20, 5])
    assert len(data) == 3 + data[2]


def test_action_b_parameter_counts_match():
    data = general_table("B")
    assert data[2] == 0x03
    assert len(data[4:]) == data[3]


def test_callbacks_count_matches_length():
    data = general_table("callbacks")
    count = data[2] | (data[3] << 8)
    assert count == 0x162
    assert len(data) == 4 + count


def test_versions_table():
    data = general_table("versions")
    assert data[2] == 0x09
    assert (len(data) - 3) % 2 == 0


def test_action5_ends_with_terminator():
    data = general_table("5")
    assert data[:2] == bytes([0x04, 18])
    assert data[-1] == 0


def test_unknown_table_raises():
    with pytest.raises(KeyError):
        general_table("nosuch")


def test_all_tables_listed():
    for name in general_table_names():
        assert len(general_table(name)) > 2