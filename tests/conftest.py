"""Pytest fixtures for karen_latin tests."""

import tempfile
from pathlib import Path

import pytest

from karen_latin.mapping import load_mapping
from karen_latin.models import MappingTable
from karen_latin.normalize.transliteration import Transliterator


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_karen_text():
    """Sample Karen text mixed with Latin and punctuation."""
    return "ကု  text, ခၢ်!"


@pytest.fixture
def fake_table():
    """Small fabricated table with distinctive upper-case renderings."""
    return MappingTable(
        consonants={"က": "K", "ခ": "KH"},
        medials={"ြ": "R"},
        vowels={"ၢ": "V", "ု": "U"},
        tone={"်": "T", "း": "H", "ၤ": ""},
    )


@pytest.fixture
def fake_engine(fake_table):
    """Engine over the fabricated table."""
    return Transliterator(fake_table)


@pytest.fixture
def karen_table():
    """Packaged Karen mapping table."""
    return load_mapping()


@pytest.fixture
def karen_engine(karen_table):
    """Engine over the packaged Karen mapping."""
    return Transliterator(karen_table)


@pytest.fixture
def schema_dir():
    """Path to schemas directory."""
    return Path(__file__).parent.parent / "karen_latin" / "etc" / "schemas"
