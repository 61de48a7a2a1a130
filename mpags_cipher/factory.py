"""
Cipher factory
==============
Turns a (cipher kind, raw key text) pair into a ready-to-use cipher.

Key grammar per kind:
    caesar    optionally signed integer, reduced modulo 26
    vigenere  one or more letters, upper-cased, repeats kept
    playfair  one or more letters, upper-cased (J folds to I in the square)

Anything else raises KeyValidationError; there is no identity fallback.
"""

import enum
import logging
import re

from .ciphers import Cipher, CaesarCipher, PlayfairCipher, VigenereCipher
from .exceptions import KeyValidationError

logger = logging.getLogger(__name__)

_INT_KEY = re.compile(r"[+-]?[0-9]+")


class CipherKind(enum.Enum):
    """The supported cipher families."""

    CAESAR   = "caesar"
    VIGENERE = "vigenere"
    PLAYFAIR = "playfair"


def _caesar(raw: str) -> Cipher:
    key = raw.strip()
    if not _INT_KEY.fullmatch(key):
        raise KeyValidationError("caesar", raw, "shift must be an integer")
    return CaesarCipher(int(key) % 26)


_BUILDERS = {
    CipherKind.CAESAR:   _caesar,
    CipherKind.VIGENERE: VigenereCipher,
    CipherKind.PLAYFAIR: PlayfairCipher,
}


def create_cipher(kind, raw_key: str) -> Cipher:
    """
    Validate `raw_key` for `kind` and build the cipher.

    `kind` may be a CipherKind or its lower-case name ("caesar", ...).
    Raises KeyValidationError on a bad key or unknown kind.
    """
    if not isinstance(kind, CipherKind):
        try:
            kind = CipherKind(str(kind).lower())
        except ValueError:
            raise KeyValidationError(str(kind), raw_key, "unknown cipher kind") from None
    if raw_key is None:
        raise KeyValidationError(kind.value, "", "no key supplied")
    cipher = _BUILDERS[kind](raw_key)
    logger.info(f"Built {cipher!r}")
    return cipher
