"""
Vigenère polyalphabetic cipher
==============================
Blaise de Vigenère, 1553. Each letter is shifted by the alphabet position
of the key letter aligned with it; the key repeats for the whole message.

The alignment is absolute: the character at offset n of the full text
always uses key[n % len(key)]. A segment that starts at offset s therefore
begins its key phase at s % len(key), which is what keeps a chunked run
identical to a single pass over the whole text.
"""

from typing import Tuple

from .base import Cipher, CipherMode


class VigenereCipher(Cipher):
    """Repeating-keyword Vigenère cipher."""

    def __init__(self, key: str):
        key = self._alpha_key("vigenere", key)
        self._key = key
        self._shifts: Tuple[int, ...] = tuple(self.ALPHA.index(c) for c in key)

    @property
    def key(self) -> str:
        return self._key

    def apply(self, text: str, mode: CipherMode, start_offset: int = 0) -> str:
        """Transform `text`, taking its first character to sit at `start_offset`."""
        sign = 1 if mode is CipherMode.ENCRYPT else -1
        period = len(self._shifts)
        result = []
        for i, ch in enumerate(text):
            pos = start_offset + i
            result.append(self._shift(ch, sign * self._shifts[pos % period], pos))
        return "".join(result)

    def __repr__(self):
        return f"VigenereCipher(key={self._key!r})"
