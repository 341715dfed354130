"""Loading of grapheme to Latin mapping tables."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from karen_latin.models import MappingTable
from karen_latin.normalize.segmentation import KAREN_GRAMMAR, SyllableGrammar
from karen_latin.utils.io import read_json
from karen_latin.utils.log import log_with_context
from karen_latin.utils.schema import SCHEMA_DIR, validate_mapping


logger = logging.getLogger(__name__)

DEFAULT_MAPPING_PATH = Path(__file__).parent / "etc" / "karen_mapping.json"


class MappingError(ValueError):
    """A mapping document could not be read or is invalid."""

    def __init__(self, path: Path, errors: list[str]):
        self.path = path
        self.errors = errors
        super().__init__(f"Invalid mapping {path}: " + "; ".join(errors))


def find_unmapped(
    table: MappingTable,
    grammar: SyllableGrammar = KAREN_GRAMMAR,
) -> dict[str, list[str]]:
    """
    Find grammar graphemes that have no entry in the table.

    Args:
        table: Mapping table to check
        grammar: Grammar whose grapheme sets should be covered

    Returns:
        Missing graphemes per table, only for tables with gaps
    """
    expected = {
        "consonants": grammar.consonants,
        "medials": grammar.medials,
        "vowels": grammar.vowels,
        "tone": grammar.tones,
    }
    missing = {}
    for key, graphemes in expected.items():
        entries = getattr(table, key)
        gaps = sorted(g for g in graphemes if g not in entries)
        if gaps:
            missing[key] = gaps
    return missing


def load_mapping(
    path: Path | None = None,
    schema_dir: Path = SCHEMA_DIR,
    grammar: SyllableGrammar = KAREN_GRAMMAR,
) -> MappingTable:
    """
    Load and validate a mapping document.

    Args:
        path: JSON mapping file (default: packaged Karen table)
        schema_dir: Directory holding mapping.schema.json
        grammar: Grammar used for the coverage check

    Returns:
        Immutable mapping table

    Raises:
        MappingError: If the file cannot be parsed or fails validation
    """
    path = Path(path) if path is not None else DEFAULT_MAPPING_PATH

    try:
        data = read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise MappingError(path, [str(e)]) from e

    errors = validate_mapping(data, schema_dir)
    if errors:
        raise MappingError(path, errors)

    table = MappingTable.from_dict(data)
    log_with_context(
        logger,
        "debug",
        f"Loaded mapping from {path}",
        consonants=len(table.consonants),
        medials=len(table.medials),
        vowels=len(table.vowels),
        tone=len(table.tone),
    )

    missing = find_unmapped(table, grammar)
    if missing:
        log_with_context(logger, "warning", f"Mapping {path} does not cover the grammar", missing=missing)

    return table


@lru_cache(maxsize=1)
def default_mapping() -> MappingTable:
    """Packaged Karen mapping, loaded once per process."""
    return load_mapping()
