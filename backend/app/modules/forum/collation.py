"""
Turkish collation for forum labels.

Python's default string ordering compares code points, which puts "Ç" after
"Z" and "ı" after every ASCII letter. Topic lists are shown to Turkish users,
so labels are ordered by the Turkish alphabet instead:

    a b c ç d e f g ğ h ı i j k l m n o ö p r s ş t u ü v y z

Letters with a diacritic that is not part of the alphabet (â, î, û, é, ...)
sort with their base letter and only differ at the accent level, so "Kâğıt"
sits between "Kağıt" and "Kumaş". Input is NFC-normalized first, so a
decomposed "â" collates exactly like "â".

Other letters (q, w, x) are slotted next to their closest Turkish neighbour;
digits and punctuation come before the alphabet, other scripts after it.
"""

import unicodedata
from typing import Tuple

TURKISH_ALPHABET = "abcçdefgğhıijklmnoöprsştuüvyz"

# Non-Turkish Latin letters sort right after their closest Turkish neighbour
_FOREIGN_LETTERS = {
    "q": ("p", 1),
    "w": ("v", 1),
    "x": ("v", 2),
}

_ALPHABET_BASE = 0x10000


def _build_weights():
    weights = {}
    for index, letter in enumerate(TURKISH_ALPHABET):
        weights[letter] = _ALPHABET_BASE + index * 4
    for letter, (after, offset) in _FOREIGN_LETTERS.items():
        weights[letter] = weights[after] + offset
    return weights


_PRIMARY_WEIGHTS = _build_weights()


def turkish_lower(text: str) -> str:
    """Lowercase using Turkish dotted/dotless I rules (I -> ı, İ -> i)."""
    return text.replace("I", "ı").replace("İ", "i").lower()


def _char_weights(char: str) -> Tuple[int, int]:
    """(primary, accent) weights of one lowercased NFC character"""
    weight = _PRIMARY_WEIGHTS.get(char)
    if weight is not None:
        return weight, 0

    decomposed = unicodedata.normalize("NFD", char)
    base, marks = decomposed[0], decomposed[1:]
    if marks and base in _PRIMARY_WEIGHTS:
        return _PRIMARY_WEIGHTS[base], sum(ord(m) for m in marks)

    # Non-letters before the alphabet, other scripts after it
    code = ord(char)
    if code < 0x80 and not char.isalpha():
        return code, 0
    return _ALPHABET_BASE * 2 + code, 0


def collation_key(
    label: str,
) -> Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...], str]:
    """
    Sort key implementing Turkish alphabetic order.

    Levels:
        1. Turkish letter order, ignoring case and non-Turkish accents
        2. Accents: the plain letter before its accented forms
        3. Case: lowercase before uppercase at the first difference
        4. The NFC label itself, so distinct labels never compare equal
    """
    label = unicodedata.normalize("NFC", label)
    folded = turkish_lower(label)
    weights = [_char_weights(c) for c in folded]
    primary = tuple(p for p, _ in weights)
    accents = tuple(a for _, a in weights)
    case_level = tuple(0 if c == f else 1 for c, f in zip(label, folded))
    return primary, accents, case_level, label
