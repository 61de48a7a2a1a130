"""
Playfair digraph cipher
=======================
Charles Wheatstone, 1854. Letters are enciphered in pairs using a 5x5
square built from a keyword (duplicates dropped, then the rest of the
alphabet, I and J sharing a cell).

For each digraph (a, b) located in the square:
  same row     replace each letter with the one to its right (wrapping)
  same column  replace each letter with the one below it (wrapping)
  otherwise    each letter takes the column of the other one
Decryption uses left / up for the first two rules; the rectangle rule is
its own inverse.

Digraph formation is a property of the whole message, not of a slice:
a filler is inserted between two identical letters that would share a
digraph and appended when the length comes out odd. prepare() performs
that pass once, before the text is partitioned. It is idempotent, so
calling apply() on a segment of already-prepared text substitutes without
changing any pairing.
"""

from typing import Dict, Tuple

from ..exceptions import SegmentAlignmentError
from .base import Cipher, CipherMode


class PlayfairCipher(Cipher):
    """Five-by-five keyword square digraph substitution."""

    SIZE = 5
    FILLER = "X"
    ALT_FILLER = "Q"   # used when the letter needing a partner is itself X

    block_size = 2

    def __init__(self, key: str):
        key = self._alpha_key("playfair", key)
        self._key = key
        self._square = self._build_square(key)
        self._positions: Dict[str, Tuple[int, int]] = {
            ch: (row, col)
            for row, line in enumerate(self._square)
            for col, ch in enumerate(line)
        }

    @classmethod
    def _build_square(cls, key: str) -> Tuple[str, ...]:
        seen = []
        for ch in (key + cls.ALPHA).replace("J", "I"):
            if ch not in seen:
                seen.append(ch)
        return tuple(
            "".join(seen[row * cls.SIZE:(row + 1) * cls.SIZE])
            for row in range(cls.SIZE)
        )

    @property
    def key(self) -> str:
        return self._key

    @property
    def square(self) -> Tuple[str, ...]:
        """The five rows of the key square."""
        return self._square

    def _filler_for(self, ch: str) -> str:
        return self.ALT_FILLER if ch == self.FILLER else self.FILLER

    def prepare(self, text: str, mode: CipherMode) -> str:
        """Fold J into I, split doubled letters (encrypt only), pad to even length."""
        folded = []
        for pos, ch in enumerate(text):
            ch = ch.upper()
            self._index(ch, pos)
            folded.append("I" if ch == "J" else ch)
        letters = "".join(folded)
        if mode is CipherMode.DECRYPT:
            if len(letters) % 2:
                letters += self._filler_for(letters[-1])
            return letters

        out = []
        i = 0
        while i < len(letters):
            first = letters[i]
            second = letters[i + 1] if i + 1 < len(letters) else None
            if second is None or second == first:
                out.append(first + self._filler_for(first))
                i += 1
            else:
                out.append(first + second)
                i += 2
        return "".join(out)

    def apply(self, text: str, mode: CipherMode, start_offset: int = 0) -> str:
        if start_offset % 2:
            raise SegmentAlignmentError(
                f"Playfair segment starts at odd offset {start_offset}",
                {"start_offset": start_offset},
            )
        text = self.prepare(text, mode)
        step = 1 if mode is CipherMode.ENCRYPT else -1
        size = self.SIZE
        out = []
        for i in range(0, len(text), 2):
            row_a, col_a = self._positions[text[i]]
            row_b, col_b = self._positions[text[i + 1]]
            if row_a == row_b:
                col_a, col_b = (col_a + step) % size, (col_b + step) % size
            elif col_a == col_b:
                row_a, row_b = (row_a + step) % size, (row_b + step) % size
            else:
                col_a, col_b = col_b, col_a
            out.append(self._square[row_a][col_a] + self._square[row_b][col_b])
        return "".join(out)

    def __repr__(self):
        return f"PlayfairCipher(key={self._key!r})"
