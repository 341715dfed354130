"""Karen script to Latin transliteration."""

from karen_latin.normalize.transliteration import transliterate


__all__ = ['transliterate']
