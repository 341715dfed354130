"""Syllable segmentation for Karen script."""

from collections.abc import Iterator
from dataclasses import dataclass

from karen_latin.models import Segment, SyllableUnit


@dataclass(frozen=True)
class SyllableGrammar:
    """
    Closed grapheme sets for the four syllable slots.

    Tone alternatives are tried in the listed order, so multi-character
    markers must come before their single-character suffixes.
    """

    consonants: frozenset[str]
    medials: frozenset[str]
    vowels: frozenset[str]
    tones: tuple[str, ...]
    open_a: str
    generic_tone: str


KAREN_CONSONANTS = frozenset(
    [
        "က", "ခ", "ဂ", "ဃ", "င", "စ", "ဆ", "ၡ", "ည", "တ", "ထ", "ဒ", "န",
        "ပ", "ဖ", "ဘ", "မ", "ယ", "ရ", "လ", "ဝ", "သ", "ဟ", "အ", "ဧ",
    ]
)

KAREN_MEDIALS = frozenset(["ှ", "ၠ", "ြ", "ျ", "ွ"])

KAREN_VOWELS = frozenset(["ါ", "ံ", "ၢ", "ု", "ူ", "့", "ဲ", "ိ", "ီ"])

KAREN_TONES = ("ၢ်", "ာ်", "း", "ၣ်", "ၤ", "်")

KAREN_GRAMMAR = SyllableGrammar(
    consonants=KAREN_CONSONANTS,
    medials=KAREN_MEDIALS,
    vowels=KAREN_VOWELS,
    tones=KAREN_TONES,
    open_a="ၢ",
    generic_tone="်",
)


def _match_one(text: str, pos: int, graphemes: frozenset[str]) -> str | None:
    if pos < len(text) and text[pos] in graphemes:
        return text[pos]
    return None


def _match_tone(text: str, pos: int, tones: tuple[str, ...]) -> str | None:
    for tone in tones:
        if text.startswith(tone, pos):
            return tone
    return None


def match_syllable(
    text: str,
    pos: int,
    grammar: SyllableGrammar = KAREN_GRAMMAR,
) -> SyllableUnit | None:
    """
    Match one syllable starting exactly at ``pos``.

    Args:
        text: Input text
        pos: Start offset
        grammar: Grapheme sets to match against

    Returns:
        The matched syllable, or None if no consonant starts at ``pos``
    """
    consonant = _match_one(text, pos, grammar.consonants)
    if consonant is None:
        return None
    end = pos + len(consonant)

    medial = _match_one(text, end, grammar.medials)
    if medial:
        end += len(medial)

    vowel = _match_one(text, end, grammar.vowels)
    if vowel:
        end += len(vowel)

    tone = _match_tone(text, end, grammar.tones)
    if tone:
        end += len(tone)

    return SyllableUnit(
        consonant=consonant,
        medial=medial,
        vowel=vowel,
        tone=tone,
        start=pos,
        end=end,
    )


def iter_syllables(text: str, grammar: SyllableGrammar = KAREN_GRAMMAR) -> Iterator[SyllableUnit]:
    """Yield non-overlapping syllables from left to right."""
    pos = 0
    while pos < len(text):
        unit = match_syllable(text, pos, grammar)
        if unit is None:
            pos += 1
            continue
        yield unit
        pos = unit.end


def iter_segments(text: str, grammar: SyllableGrammar = KAREN_GRAMMAR) -> Iterator[Segment]:
    """
    Split text into passthrough spans and syllables, in input order.

    Args:
        text: Input text
        grammar: Grapheme sets to match against

    Yields:
        Segments; passthrough segments carry the skipped text verbatim
        and syllable segments carry the matched source text
    """
    last = 0
    for unit in iter_syllables(text, grammar):
        if unit.start > last:
            yield Segment(text=text[last : unit.start])
        yield Segment(text=unit.text, syllable=unit)
        last = unit.end

    if last < len(text):
        yield Segment(text=text[last:])
