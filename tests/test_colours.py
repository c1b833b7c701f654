from __future__ import annotations

import json
import logging

import pytest

from elementcards.colours import (DEFAULT_COLOUR, FROM_CATEGORY, FROM_DEFAULT, FROM_UNKNOWN,
                                  load_colour_table, parse_hex, resolve, resolve_colour)
from elementcards.errors import ColorParseError, ConfigLoadError


def test_parse_hex_forms() -> None:
    assert parse_hex("#3498db") == (0x34, 0x98, 0xDB, 0xFF)
    assert parse_hex("3498DB") == (0x34, 0x98, 0xDB, 0xFF)
    assert parse_hex(" #39d ") == (0x33, 0x99, 0xDD, 0xFF)


@pytest.mark.parametrize("bad", ["#12", "zzzzzz", "#12345", "#1234567", "", "#", "#gg0000"])
def test_parse_hex_rejects_malformed(bad) -> None:
    with pytest.raises(ColorParseError):
        parse_hex(bad)


def test_resolve_known_category() -> None:
    assert resolve("nonmetal", {"nonmetal": "#3498db"}) == (0x34, 0x98, 0xDB, 0xFF)
    assert resolve_colour("nonmetal", {"nonmetal": "#3498db"}).source == FROM_CATEGORY


def test_resolve_falls_back_to_unknown_entry() -> None:
    outcome = resolve_colour("ghost-category", {"unknown": "#e0e0e0"})
    assert outcome.colour == (0xE0, 0xE0, 0xE0, 0xFF)
    assert outcome.source == FROM_UNKNOWN
    assert outcome.fallback


def test_resolve_without_unknown_entry_is_grey() -> None:
    outcome = resolve_colour("ghost-category", {"nonmetal": "#3498db"})
    assert outcome.colour == DEFAULT_COLOUR
    assert outcome.source == FROM_DEFAULT
    assert resolve("anything", {}) == DEFAULT_COLOUR


@pytest.mark.parametrize("bad", ["#12", "zzzzzz", "not a colour"])
def test_malformed_hex_resolves_to_grey_and_warns(bad, caplog) -> None:
    table = {"nonmetal": bad, "unknown": "#e0e0e0"}
    with caplog.at_level(logging.WARNING, logger="elementcards.colours"):
        outcome = resolve_colour("nonmetal", table)
    assert outcome.colour == DEFAULT_COLOUR
    assert outcome.problem
    assert "grey" in caplog.text


def test_malformed_unknown_entry_resolves_to_grey() -> None:
    assert resolve("ghost", {"unknown": "#12"}) == DEFAULT_COLOUR


def test_resolved_colours_are_opaque() -> None:
    for table in ({"x": "#000"}, {"unknown": "fff"}, {}, {"x": "bogus"}):
        assert resolve("x", table)[3] == 255


def test_load_colour_table_normalizes_keys(tmp_path) -> None:
    path = tmp_path / "colours.json"
    path.write_text(json.dumps({"Noble Gases": "#9b59b6", "unknown": "#e0e0e0"}), encoding="utf-8")
    table = load_colour_table(str(path))
    assert table == {"noble gas": "#9b59b6", "unknown": "#e0e0e0"}


def test_load_colour_table_warns_without_unknown(tmp_path, caplog) -> None:
    path = tmp_path / "colours.json"
    path.write_text('{"nonmetal": "#3498db"}', encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="elementcards.colours"):
        load_colour_table(str(path))
    assert "'unknown'" in caplog.text


def test_load_colour_table_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigLoadError):
        load_colour_table(str(tmp_path / "nope.json"))


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_load_colour_table_rejects_bad_content(tmp_path, content) -> None:
    path = tmp_path / "colours.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigLoadError):
        load_colour_table(str(path))
