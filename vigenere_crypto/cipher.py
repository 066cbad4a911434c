"""
Vigenère Polyalphabetic Cipher
==============================
Each message character is Caesar-shifted by the alphabetic position of
the key character aligned with it. The key is repeated to the message
length, so the cipher is periodic with period len(key).

Historical note: Giovan Battista Bellaso, 1553, later misattributed to
Blaise de Vigenère. Called "le chiffre indéchiffrable" for 300 years.
Broken by Kasiski (1863) and by plain frequency analysis once the
period is known. Not secure: use it for teaching and puzzles only.

Non-letter characters pass through unchanged by default and still take
up a key position, so the key stream stays aligned with the message.
Pass preserve_non_alpha=False for the strict letter-only behaviour.

One instance owns one key. Calls on a shared instance from several
threads must be serialized by the caller.
"""

import logging

from .keys import KeySchedule
from .caesar import normalize_text, shift, shift_amount

logger = logging.getLogger(__name__)


class VigenereCipher:
    """Vigenère cipher with a repeating keyword."""

    def __init__(self, key: str, preserve_non_alpha: bool = True):
        self._schedule = KeySchedule(key)
        self._preserve = preserve_non_alpha
        logger.info(f"VigenereCipher ready | key_len={len(self._schedule)} "
                    f"fp={self._schedule.fingerprint} preserve_non_alpha={preserve_non_alpha}")

    @property
    def key(self) -> str:
        return self._schedule.key

    @property
    def fingerprint(self) -> str:
        return self._schedule.fingerprint

    @property
    def preserve_non_alpha(self) -> bool:
        return self._preserve

    def set_key(self, key: str) -> None:
        """Replace the key. Raises InvalidKeyError if empty; the old key is kept."""
        self._schedule.set_key(key)
        logger.info(f"Key replaced | key_len={len(self._schedule)} fp={self._schedule.fingerprint}")

    def keystream(self, length: int) -> str:
        """The key repeated and cut to `length` characters."""
        return self._schedule.extend(length)

    def _apply(self, text: str, decrypt: bool) -> str:
        stream = self._schedule.extend(len(text))
        return "".join(
            shift(ch, shift_amount(k), decrypt=decrypt, preserve_non_alpha=self._preserve)
            for ch, k in zip(text, stream)
        )

    def encrypt(self, message: str) -> str:
        """Encrypt message. Letters come back uppercase; length is unchanged."""
        logger.debug(f"Encrypt: {len(message)} chars")
        return self._apply(message, decrypt=False)

    def decrypt(self, message: str) -> str:
        """Decrypt message."""
        logger.debug(f"Decrypt: {len(message)} chars")
        return self._apply(message, decrypt=True)

    def is_encrypted(self, ciphertext: str, plaintext: str) -> bool:
        """
        True when decrypting `ciphertext` under the current key gives
        `plaintext` (letters compared case-insensitively).
        """
        return self.decrypt(ciphertext) == normalize_text(plaintext)

    def __repr__(self):
        return (f"VigenereCipher(key_len={len(self._schedule)}, "
                f"fp={self._schedule.fingerprint}, preserve_non_alpha={self._preserve})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    v = VigenereCipher("LEMON")
    ct = v.encrypt("ATTACKATDAWN")
    print(f"\n{'═'*60}")
    print("Vigenère known vector  (key=LEMON)")
    print(f"{'═'*60}")
    print(f"Plaintext : ATTACKATDAWN")
    print(f"Keystream : {v.keystream(12)}")
    print(f"Ciphertext: {ct}")
    assert ct == "LXFOPVEFRNHR"
    assert v.decrypt(ct) == "ATTACKATDAWN"
    assert v.is_encrypted(ct, "attackatdawn")
    print("Round-trip + verify: PASSED")
    print(f"{'═'*60}\n")
