"""Transliteration of Karen script to Latin letters."""

from functools import lru_cache
from typing import NamedTuple

from karen_latin.mapping import default_mapping
from karen_latin.models import MappingTable, SyllableUnit
from karen_latin.normalize.segmentation import KAREN_GRAMMAR, SyllableGrammar, iter_segments


class NucleusRule(NamedTuple):
    """How a syllable renders after its onset and medial."""

    name: str
    vowel_from_table: bool
    literal: str
    tone_suffix: bool
    ending: str


# Open-a with the generic marker: the marker is part of the "ah" ending
OPEN_A_CLOSED = NucleusRule("open_a_closed", False, "ah", False, "")
VOWEL = NucleusRule("vowel", True, "", True, "")
# Non-generic tone on a bare consonant implies an "a" nucleus
DEFAULT_A = NucleusRule("default_a", False, "a", True, "")
OPEN_A = NucleusRule("open_a", True, "", True, "")
# The generic marker on a bare consonant closes it with "ee" and is consumed
DEFAULT_EE = NucleusRule("default_ee", False, "", False, "ee")
BARE = NucleusRule("bare", False, "", True, "")

# Keyed by (vowel present, vowel is open-a, tone present, tone is generic).
# Combinations missing here cannot be produced by the grammar.
NUCLEUS_RULES: dict[tuple[bool, bool, bool, bool], NucleusRule] = {
    (True, True, True, True): OPEN_A_CLOSED,
    (True, False, False, False): VOWEL,
    (True, False, True, False): VOWEL,
    (True, False, True, True): VOWEL,
    (False, False, True, False): DEFAULT_A,
    (True, True, False, False): OPEN_A,
    (True, True, True, False): OPEN_A,
    (False, False, True, True): DEFAULT_EE,
    (False, False, False, False): BARE,
}


def nucleus_rule(unit: SyllableUnit, grammar: SyllableGrammar = KAREN_GRAMMAR) -> NucleusRule:
    """Pick the rendering rule for a syllable's vowel and tone slots."""
    key = (
        unit.vowel is not None,
        unit.vowel == grammar.open_a,
        unit.tone is not None,
        unit.tone == grammar.generic_tone,
    )
    return NUCLEUS_RULES[key]


def resolve_syllable(
    unit: SyllableUnit,
    table: MappingTable,
    grammar: SyllableGrammar = KAREN_GRAMMAR,
) -> str:
    """
    Render one syllable in Latin letters.

    Graphemes without a table entry contribute nothing.

    Args:
        unit: Matched syllable
        table: Lookup tables
        grammar: Grammar the syllable was matched with

    Returns:
        Latin rendering of the syllable
    """
    rule = nucleus_rule(unit, grammar)

    parts = [table.consonants.get(unit.consonant, "")]
    if unit.medial:
        parts.append(table.medials.get(unit.medial, ""))
    if rule.vowel_from_table and unit.vowel:
        parts.append(table.vowels.get(unit.vowel, ""))
    parts.append(rule.literal)
    if rule.tone_suffix and unit.tone:
        parts.append(table.tone.get(unit.tone, ""))
    parts.append(rule.ending)

    return "".join(parts)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and strip the ends."""
    return " ".join(text.split())


class Transliterator:
    """Karen to Latin transliteration engine over a fixed mapping table."""

    def __init__(self, table: MappingTable, grammar: SyllableGrammar = KAREN_GRAMMAR):
        self.table = table
        self.grammar = grammar

    def render_segments(self, text: str) -> list[str]:
        """Render each segment of ``text``; passthrough spans are kept verbatim."""
        rendered = []
        for segment in iter_segments(text, self.grammar):
            if segment.syllable is None:
                rendered.append(segment.text)
            else:
                rendered.append(resolve_syllable(segment.syllable, self.table, self.grammar))
        return rendered

    def transliterate(self, text: str) -> str:
        """
        Transliterate Karen text to Latin letters.

        Every syllable is replaced by its rendering and every other span is
        kept as is. Segments are joined by single spaces, whitespace runs are
        collapsed and the ends are stripped.

        Args:
            text: Input text, any mix of scripts

        Returns:
            Transliterated text
        """
        return normalize_whitespace(" ".join(self.render_segments(text)))


@lru_cache(maxsize=1)
def default_transliterator() -> Transliterator:
    """Engine over the packaged Karen mapping, built on first use."""
    return Transliterator(default_mapping())


def transliterate(text: str) -> str:
    """
    Transliterate Karen text using the packaged mapping.

    Args:
        text: Input text

    Returns:
        Transliterated text
    """
    return default_transliterator().transliterate(text)
