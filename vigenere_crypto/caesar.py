"""
Single-character Caesar shift over A-Z
======================================
The building block of the Vigenère cipher: every message character is
rotated by the amount named by the key character aligned with it.

    encrypt:  C = (P + K) mod 26
    decrypt:  P = (C - K + 26) mod 26

Characters are classified before shifting. ASCII letters are shifted;
anything else is either passed through unchanged (the default) or forced
into A-Z by the letter-only mapping.
"""

import enum
import string

ALPHA = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHA)

_LETTERS = frozenset(string.ascii_letters)


class CharClass(enum.Enum):
    ALPHA = "alpha"
    OTHER = "other"


def classify(ch: str) -> CharClass:
    """Tag a single character as ALPHA (ASCII letter) or OTHER."""
    return CharClass.ALPHA if ch in _LETTERS else CharClass.OTHER


def normalize_text(text: str) -> str:
    """Uppercase ASCII letters only; every other character is left as is."""
    return "".join(c.upper() if c in _LETTERS else c for c in text)


def shift_amount(key_char: str) -> int:
    """Rotation (0-25) named by a key character. 'A' -> 0, 'Z' -> 25."""
    return (ord(key_char) - ord("A")) % ALPHABET_SIZE


def shift(letter: str, amount: int, decrypt: bool = False,
          preserve_non_alpha: bool = True) -> str:
    """
    Rotate `letter` by `amount` positions, backwards when `decrypt` is set.

    With preserve_non_alpha=False every character goes through the
    letter-only mapping 'A' + newPos, so digits and punctuation come out
    as letters and cannot be recovered.
    """
    if not 0 <= amount < ALPHABET_SIZE:
        raise ValueError(f"Shift amount must be in [0, {ALPHABET_SIZE - 1}], got {amount}.")
    if preserve_non_alpha and classify(letter) is CharClass.OTHER:
        return letter

    ch = letter.upper() if letter in _LETTERS else letter
    pos = ord(ch) - ord("A")
    if decrypt:
        new_pos = (pos - amount + ALPHABET_SIZE) % ALPHABET_SIZE
    else:
        new_pos = (pos + amount) % ALPHABET_SIZE
    return ALPHA[new_pos]
