"""
Exceptions raised by vigenere_crypto.
"""


class CipherError(Exception):
    """Base class for every error raised by this package."""


class InvalidKeyError(CipherError, ValueError):
    """
    Raised when an operation needs a non-empty key and doesn't get one:
    construction, set_key(), key extension, or encrypt/decrypt while the
    key is empty.
    """
