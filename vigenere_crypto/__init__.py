"""
vigenere_crypto
===============
The classical Vigenère polyalphabetic cipher.

Modules:
    caesar  — single-character Caesar shift and character classification
    keys    — key schedule, key fingerprint, key-stream extension
    cipher  — VigenereCipher: encrypt / decrypt / is_encrypted
    errors  — CipherError, InvalidKeyError

Not secure. Broken by frequency analysis since 1863.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors  import CipherError, InvalidKeyError
from .caesar  import ALPHA, ALPHABET_SIZE, CharClass, classify, normalize_text, shift, shift_amount
from .keys    import KeySchedule, extend_key
from .cipher  import VigenereCipher

__all__ = [
    "VigenereCipher",
    "KeySchedule",
    "extend_key",
    "shift",
    "shift_amount",
    "classify",
    "normalize_text",
    "CharClass",
    "ALPHA",
    "ALPHABET_SIZE",
    "CipherError",
    "InvalidKeyError",
]
