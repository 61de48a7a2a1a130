"""
Caesar shift cipher
===================
Every letter moves a fixed number of places along the alphabet:
encrypt adds the key, decrypt subtracts it, both modulo 26.

The key is an integer already normalised to 0-25 by the factory.
There is no positional state, so `start_offset` is ignored and the text
can be split anywhere.
"""

from ..exceptions import KeyValidationError
from .base import Cipher, CipherMode


class CaesarCipher(Cipher):
    """Fixed-shift substitution."""

    def __init__(self, key: int):
        if isinstance(key, bool) or not isinstance(key, int):
            raise KeyValidationError("caesar", repr(key), "shift must be an integer")
        self._key = key % 26

    @property
    def key(self) -> int:
        return self._key

    def apply(self, text: str, mode: CipherMode, start_offset: int = 0) -> str:
        shift = self._key if mode is CipherMode.ENCRYPT else -self._key
        return "".join(
            self._shift(ch, shift, start_offset + i) for i, ch in enumerate(text)
        )

    def __repr__(self):
        return f"CaesarCipher(key={self._key})"
