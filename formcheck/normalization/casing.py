"""Proper-casing of personal names.

Names are lower-cased and then title-cased word by word. Surnames get one
extra pass for the common prefixes that carry a second capital letter
(McDonald, MacIntyre, O'Brien).
"""

import re

DEFAULT_LOCALE = "en-GB"

# Checked in order; the first match wins
SURNAME_PREFIXES: tuple[str, ...] = ("Mc", "Mac", "O'")

# Languages with a dotted/dotless i distinct from the Latin pair
_TURKIC_LANGUAGES = frozenset({"tr", "az"})

# A letter starts a word unless it follows a letter, digit or apostrophe
_WORD_START = re.compile(r"(?<![\w'’])([^\W\d_])")


def _language(locale: str) -> str:
    return locale.replace("_", "-").split("-", 1)[0].lower()


def lower(value: str, locale: str = DEFAULT_LOCALE) -> str:
    """Lower-case `value` under `locale`."""
    if _language(locale) in _TURKIC_LANGUAGES:
        value = value.replace("I", "ı").replace("İ", "i")
    return value.lower()


def upper(value: str, locale: str = DEFAULT_LOCALE) -> str:
    """Upper-case `value` under `locale`."""
    if _language(locale) in _TURKIC_LANGUAGES:
        value = value.replace("i", "İ").replace("ı", "I")
    return value.upper()


def _capitalize(letter: str, locale: str) -> str:
    # Title-case mapping, so the digraph ǆ becomes ǅ rather than Ǆ
    if _language(locale) in _TURKIC_LANGUAGES:
        return upper(letter, locale)
    return letter.title()


def title(value: str, locale: str = DEFAULT_LOCALE) -> str:
    """Lower-case `value` then capitalise the first letter of each word.

    Whitespace, hyphens and other punctuation separate words; apostrophes
    do not, so "o'brien" becomes "O'brien" here and the surname pass
    supplies the second capital.
    """
    return _WORD_START.sub(lambda m: _capitalize(m.group(1), locale), lower(value, locale))


def to_proper_case(value: str, is_surname: bool, locale: str = DEFAULT_LOCALE) -> str:
    """Convert a name to proper case.

    Args:
        value: The name to convert
        is_surname: Apply the surname prefix rules
        locale: Locale tag (e.g. "en-GB") governing case conversion

    Returns:
        The proper-cased name
    """
    value = title(value, locale)

    if is_surname:
        for prefix in SURNAME_PREFIXES:
            if value[: len(prefix)].lower() == prefix.lower() and len(value) > len(prefix):
                rest = value[len(prefix):]
                value = value[: len(prefix)] + _capitalize(rest[0], locale) + rest[1:]
                break

    return value
