"""Syllable segmentation and transliteration."""
