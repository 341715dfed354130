"""Tests for mapping table loading."""

import json
import logging

import pytest

from karen_latin.mapping import MappingError, default_mapping, find_unmapped, load_mapping
from karen_latin.models import MappingTable
from karen_latin.normalize.segmentation import KAREN_GRAMMAR


def test_packaged_mapping_covers_grammar(karen_table):
    """Test that the packaged table has an entry for every grapheme."""
    assert find_unmapped(karen_table, KAREN_GRAMMAR) == {}
    assert set(karen_table.consonants) == KAREN_GRAMMAR.consonants
    assert set(karen_table.tone) == set(KAREN_GRAMMAR.tones)


def test_packaged_mapping_empty_tone_entries(karen_table):
    """Test that empty tone entries are kept rather than dropped."""
    assert "်" in karen_table.tone
    assert karen_table.tone["်"] == ""


def test_default_mapping_is_cached():
    """Test that the packaged table is loaded once."""
    assert default_mapping() is default_mapping()


def test_table_is_read_only(karen_table):
    """Test that tables cannot be modified after load."""
    with pytest.raises(TypeError):
        karen_table.consonants["က"] = "x"  # type: ignore[index]


def test_table_round_trip(fake_table):
    """Test dict conversion."""
    assert MappingTable.from_dict(fake_table.to_dict()) == fake_table


def test_find_unmapped_reports_gaps(fake_table):
    """Test coverage report on a partial table."""
    missing = find_unmapped(fake_table)

    assert "ဂ" in missing["consonants"]
    assert "က" not in missing["consonants"]
    assert "ၢ်" in missing["tone"]
    assert "ြ" not in missing.get("medials", [])


def test_load_custom_mapping(temp_dir):
    """Test loading a mapping file from disk."""
    path = temp_dir / "mapping.json"
    path.write_text(
        json.dumps({"consonants": {"က": "g"}, "medials": {}, "vowels": {}, "tone": {"း": ""}}),
        encoding="utf-8",
    )

    table = load_mapping(path)

    assert table.consonants["က"] == "g"
    assert table.tone["း"] == ""


def test_load_partial_mapping_warns(temp_dir, caplog):
    """Test that coverage gaps are logged as a warning."""
    path = temp_dir / "mapping.json"
    path.write_text(
        json.dumps({"consonants": {}, "medials": {}, "vowels": {}, "tone": {}}),
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="karen_latin"):
        load_mapping(path)

    assert any("does not cover" in record.getMessage() for record in caplog.records)


def test_load_invalid_mapping(temp_dir):
    """Test that schema violations raise MappingError."""
    path = temp_dir / "mapping.json"
    path.write_text(json.dumps({"consonants": {"က": 1}}), encoding="utf-8")

    with pytest.raises(MappingError) as exc_info:
        load_mapping(path)

    assert exc_info.value.path == path
    assert len(exc_info.value.errors) > 0


def test_load_malformed_json(temp_dir):
    """Test that unparseable files raise MappingError."""
    path = temp_dir / "mapping.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(MappingError):
        load_mapping(path)


def test_load_missing_file(temp_dir):
    """Test that a missing file raises MappingError."""
    with pytest.raises(MappingError):
        load_mapping(temp_dir / "missing.json")
