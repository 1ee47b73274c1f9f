# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

import pytest

from l10n_podict import CSVFormatError, Dictionary, JSONFormatError
from l10n_podict.config import Settings, save_settings
from l10n_podict.io_handler import (
    load_csv_file, load_json_file, merge_file, parse_and_load_file,
    write_csv_file, write_json_file
)

PO = (
    "# Swedish\n"
    'msgid "Open"\n'
    'msgstr "Öppna"\n'
    "\n"
    'msgid "Close"\n'
    'msgstr "Stäng"'
)


@pytest.fixture
def po_file(tmp_path):
    path = tmp_path / "sv.po"
    path.write_text(PO, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


def test_parse_and_load_file(po_file):
    d = Dictionary()
    assert parse_and_load_file(d, po_file) == []
    assert d.messages == {"Open": "Öppna"}


def test_parse_and_load_file_strict(po_file):
    d = Dictionary()
    parse_and_load_file(d, po_file, Settings(strict=True))
    assert d.messages == {"Open": "Öppna", "Close": "Stäng"}


def test_strict_from_saved_settings(po_file):
    save_settings(Settings(strict=True))
    d = Dictionary()
    parse_and_load_file(d, po_file)
    assert len(d) == 2


def test_merge_file(po_file):
    d = Dictionary({"Open": "Open", "Help": "Hjälp"})
    merge_file(d, po_file)
    assert d.messages == {"Open": "Öppna", "Help": "Hjälp"}


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_and_load_file(Dictionary(), tmp_path / "nope.po")


def test_csv_file_round_trip(tmp_path):
    path = tmp_path / "out.csv"
    original = Dictionary({"a,b": "line\nbreak", "c": "d"})
    write_csv_file(original, path)
    assert path.read_bytes().startswith(b"MessageID,MessageString\r\n")

    loaded = Dictionary()
    load_csv_file(loaded, path)
    assert loaded == original


def test_csv_file_custom_header(tmp_path):
    path = tmp_path / "out.csv"
    write_csv_file(Dictionary({"a": "b"}), path, Settings(csv_header=("id", "str")))
    assert path.read_bytes() == b"id,str\r\na,b\r\n"


def test_load_empty_csv_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(CSVFormatError):
        load_csv_file(Dictionary(), path)


def test_json_file_round_trip(tmp_path):
    path = tmp_path / "out.json"
    original = Dictionary({"Open": "Öppna"})
    write_json_file(original, path)
    assert path.read_text(encoding="utf-8") == '{\n  "Open": "Öppna"\n}'

    loaded = Dictionary()
    load_json_file(loaded, path)
    assert loaded == original


def test_json_indent_from_settings(tmp_path):
    save_settings(Settings(json_indent=4))
    path = tmp_path / "out.json"
    write_json_file(Dictionary({"a": "b"}), path)
    assert path.read_text(encoding="utf-8") == '{\n    "a": "b"\n}'


def test_csv_file_with_bad_utf8(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_bytes(b"h1,h2\n\xff,x\n")
    d = Dictionary({"keep": "me"})
    with pytest.raises(CSVFormatError):
        load_csv_file(d, path)
    assert d.messages == {"keep": "me"}


def test_json_file_with_bad_utf8(tmp_path):
    path = tmp_path / "bad.json"
    path.write_bytes(b'{"a": "\xff"}')
    with pytest.raises(JSONFormatError):
        load_json_file(Dictionary(), path)


def test_po_file_with_bad_utf8_still_loads(tmp_path):
    path = tmp_path / "bad.po"
    path.write_bytes(
        b'msgid "Open"\nmsgstr "\xc3\x96ppna"\n\n'
        b'msgid "Bad"\nmsgstr "x\xffy"\n\n')
    d = Dictionary()
    assert parse_and_load_file(d, path) == []
    assert d.messages == {"Open": "Öppna", "Bad": "x\ufffdy"}


def test_po_file_crlf(tmp_path):
    path = tmp_path / "crlf.po"
    path.write_bytes(b'msgid "a"\r\nmsgstr "b"\r\n\r\n')
    d = Dictionary()
    parse_and_load_file(d, path)
    assert d.messages == {"a": "b"}
