"""
Name normalization helpers.

Step keys in legacy exports come in every shape ("new_contact", "NewContact",
"new-contact", "newContact2"). Generated file names, variable names and
package names are derived from them with the same word-splitting rules the
platform's JavaScript tooling (lodash) applies, so the converted app lines up
with apps scaffolded by that tooling.
"""

import re
import unicodedata

# Matched against a per-character class string: "U" upper-case letter, "l"
# any other letter (lower-case or caseless, e.g. CJK), "d" digit, " " anything
# else. Lower runs optionally led by one capital, capital runs that do not
# start a capitalized word, and digit runs.
_WORD_RE = re.compile(r"U?l+|U+(?!l)|d+")

# Letters whose accents lodash strips (Latin-1 Supplement, Latin Extended-A)
_LATIN_RE = re.compile("[\xc0-\xd6\xd8-\xf6\xf8-\xff%s-%s]" % (chr(0x100), chr(0x17F)))
_COMBINING_MARK_RE = re.compile(
    "[%s-%s%s-%s%s-%s]" % tuple(map(chr, (0x300, 0x36F, 0xFE20, 0xFE2F, 0x20D0, 0x20FF)))
)

# Latin letters with no canonical decomposition
_LATIN_LETTERS = {
    "Æ": "Ae",
    "æ": "ae",
    "Ð": "D",
    "ð": "d",
    "Ø": "O",
    "ø": "o",
    "Þ": "Th",
    "þ": "th",
    "ß": "ss",
    "Đ": "D",
    "đ": "d",
    "Ħ": "H",
    "ħ": "h",
    "ı": "i",
    "Ŀ": "L",
    "ŀ": "l",
    "Ł": "L",
    "ł": "l",
    "ŉ": "n",
    "Ŋ": "N",
    "ŋ": "n",
    "Œ": "Oe",
    "œ": "oe",
    "Ŧ": "T",
    "ŧ": "t",
    "ſ": "s",
}


def _deburr_letter(match: re.Match) -> str:
    letter = match.group(0)
    if letter in _LATIN_LETTERS:
        return _LATIN_LETTERS[letter]
    decomposed = unicodedata.normalize("NFKD", letter)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def deburr(value: str) -> str:
    """Strip accents from Latin letters ("Café" -> "Cafe"); other scripts are kept."""
    return _COMBINING_MARK_RE.sub("", _LATIN_RE.sub(_deburr_letter, value))


def _char_class(ch: str) -> str:
    if ch.isupper():
        return "U"
    if ch.isalpha():
        return "l"
    if ch.isdigit():
        return "d"
    return " "


def split_words(value: str) -> list[str]:
    """
    Split an identifier or phrase into words.

    Args:
        value: Any string, e.g. "newContact", "New Contact", "über_item", "日本"

    Returns:
        List of words with accents stripped, e.g. ["new", "Contact"]
    """
    if value is None:
        return []
    value = deburr(str(value).replace("'", ""))
    classes = "".join(_char_class(ch) for ch in value)
    return [value[m.start() : m.end()] for m in _WORD_RE.finditer(classes)]


def capitalize(value: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    value = str(value)
    return value[:1].upper() + value[1:].lower()


def camel_case(value: str) -> str:
    """Convert to camelCase ("new_contact" -> "newContact")."""
    words = [word.lower() for word in split_words(value)]
    if not words:
        return ""
    return words[0] + "".join(capitalize(word) for word in words[1:])


def snake_case(value: str) -> str:
    """Convert to snake_case ("NewContact" -> "new_contact")."""
    return "_".join(word.lower() for word in split_words(value))


def kebab_case(value: str) -> str:
    """Convert to kebab-case ("My Great App" -> "my-great-app")."""
    return "-".join(word.lower() for word in split_words(value))
