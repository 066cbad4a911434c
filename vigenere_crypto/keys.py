"""
Key schedule and key extension
==============================
The Vigenère key is a keyword, normalized to uppercase. For each message
it is repeated end to end and cut to the message length, giving one key
character (and so one shift amount) per message position:

    key      LEMON
    message  ATTACKATDAWN
    stream   LEMONLEMONLE

Dependencies: cryptography >= 41.0 (key fingerprint only)
"""

import logging

from cryptography.hazmat.primitives import hashes

from .errors import InvalidKeyError

logger = logging.getLogger(__name__)


def extend_key(key: str, target_length: int) -> str:
    """
    Repeat `key` until it covers `target_length` characters, then truncate.
    An empty key can never cover a message, so it is rejected outright.
    """
    if not key:
        raise InvalidKeyError("Vigenère key must not be empty.")
    if target_length < 0:
        raise ValueError(f"Key stream length must be >= 0, got {target_length}.")
    extended = key
    while len(extended) < target_length:
        extended += key
    return extended[:target_length]


class KeySchedule:
    """Holds the normalized key for one cipher instance."""

    FINGERPRINT_BYTES = 8

    def __init__(self, key: str):
        self._key = ""
        self.set_key(key)

    def set_key(self, new_key: str) -> None:
        """Replace the key. Characters are uppercased; nothing else is checked."""
        if not new_key:
            raise InvalidKeyError("Vigenère key must not be empty.")
        self._key = new_key.upper()
        logger.debug(f"Key set: len={len(self._key)} fp={self.fingerprint}")

    @property
    def key(self) -> str:
        return self._key

    @property
    def fingerprint(self) -> str:
        """Truncated SHA-256 of the key, safe to log."""
        digest = hashes.Hash(hashes.SHA256())
        digest.update(self._key.encode("utf-8"))
        return digest.finalize()[:self.FINGERPRINT_BYTES].hex()

    def extend(self, length: int) -> str:
        return extend_key(self._key, length)

    def __len__(self):
        return len(self._key)

    def __repr__(self):
        return f"KeySchedule(len={len(self._key)}, fp={self.fingerprint})"
