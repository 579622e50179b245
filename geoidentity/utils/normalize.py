"""Shared text normalization utilities.

This module provides the accent folding and label helpers used by the
countries and subdivisions modules.
"""

import re
import unicodedata

from unidecode import unidecode


def _fold_latin(ch: str) -> str:
    """Base letters for a non-ASCII Latin letter (ø -> o, ß -> ss), else ch."""
    if ch.isascii() or not unicodedata.name(ch, "").startswith("LATIN"):
        return ch
    return unidecode(ch) or ch


def remove_diacritics(s: str) -> str:
    """Fold accented Latin letters to their base letters, keeping case.

    Transformations:
      1. Unicode decomposition (NFD)
      2. Drop combining marks (the diacritics)
      3. Transliterate Latin letters that carry no combining mark
         (ø, ł, đ, æ, ß) with unidecode
      4. Recompose (NFC) so non-Latin scripts stay intact

    Unlike the ASCII transliteration used for slugs, characters outside the
    Latin script (Hangul, Kanji, Cyrillic) are kept as they are.

    Examples:
        >>> remove_diacritics("São Tomé")
        'Sao Tome'

        >>> remove_diacritics("Føroyar Weißrussland")
        'Foroyar Weissrussland'
    """
    if not s:
        return ""

    decomposed = unicodedata.normalize("NFD", s)
    stripped = "".join(_fold_latin(ch) for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", stripped)


def strip_accents(s: str) -> str:
    """Fold a string for accent- and case-insensitive comparison.

    Args:
        s: Raw text

    Returns:
        Folded string

    Examples:
        >>> strip_accents("Côte d'Ivoire")
        "cote d'ivoire"

        >>> strip_accents("Québec")
        'quebec'

        >>> strip_accents("대한민국")
        '대한민국'
    """
    return remove_diacritics(s).lower()


def strip_characters(s: str, characters: str) -> str:
    """Remove every occurrence of the given characters.

    Examples:
        >>> strip_characters("Korea (Republic of)", "()[],")
        'Korea Republic of'
    """
    if not characters:
        return s
    return re.sub(f"[{re.escape(characters)}]", "", s)


def humanize_label(s: str) -> str:
    """Turn a snake_case label into a display label.

    Only the first character is upper-cased; underscores become spaces.

    Examples:
        >>> humanize_label("autonomous_community")
        'Autonomous community'

        >>> humanize_label("state")
        'State'
    """
    if not s:
        return ""
    return s[0].upper() + s.replace("_", " ")[1:]


__all__ = [
    "remove_diacritics",
    "strip_accents",
    "strip_characters",
    "humanize_label",
]
