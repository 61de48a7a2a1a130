"""
Cipher base
===========
Common surface shared by every cipher family in this package.

A cipher owns its validated key and nothing else. Instances are never
mutated after construction, so the parallel engine hands one instance to
every worker (threads share it, processes receive a pickled copy).

    apply(text, mode, start_offset=0)   transform one contiguous slice
    prepare(text, mode)                 whole-text pass done before slicing
    block_size                          characters per indivisible unit
"""

import enum

from ..exceptions import KeyValidationError, UnsupportedCharacterError


class CipherMode(enum.Enum):
    """Direction of a transform."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class Cipher:
    """Abstract classical cipher."""

    ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    #: Partition boundaries must fall on multiples of this.
    block_size = 1

    @staticmethod
    def _alpha_key(kind: str, raw) -> str:
        """Strip and upper-case a keyword, rejecting anything but A-Z."""
        if not isinstance(raw, str):
            raise KeyValidationError(kind, repr(raw), "key must be a string")
        key = raw.strip()
        if not key:
            raise KeyValidationError(kind, raw, "key must not be empty")
        if not (key.isascii() and key.isalpha()):
            raise KeyValidationError(kind, raw, "key must contain only letters A-Z")
        return key.upper()

    def prepare(self, text: str, mode: CipherMode) -> str:
        """Whole-text preprocessing; must be idempotent. Identity by default."""
        return text

    def apply(self, text: str, mode: CipherMode, start_offset: int = 0) -> str:
        raise NotImplementedError

    @classmethod
    def _index(cls, ch: str, position: int) -> int:
        """Alphabet position of an upper-case letter, else raise."""
        idx = cls.ALPHA.find(ch)
        if idx < 0 or len(ch) != 1:
            raise UnsupportedCharacterError(ch, position)
        return idx

    @classmethod
    def _shift(cls, ch: str, shift: int, position: int) -> str:
        """Shift one letter by `shift` places, keeping its case."""
        if ch.islower():
            return cls._shift(ch.upper(), shift, position).lower()
        return cls.ALPHA[(cls._index(ch, position) + shift) % 26]

    def __repr__(self):
        return f"{type(self).__name__}()"
