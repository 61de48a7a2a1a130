"""
Error taxonomy
==============
Every failure the cipher core can report derives from CipherError.

    KeyValidationError         key does not fit the grammar of its cipher
    PartitionError             worker count cannot be honoured
    WorkerFailure              one or more segment tasks raised
    UnsupportedCharacterError  character outside A-Z reached a cipher
    SegmentAlignmentError      Playfair segment does not start on a digraph

The last two are raised inside Cipher.apply(); the parallel engine
collects them and reports a single WorkerFailure.
"""

from typing import Any, Dict, List, Optional, Tuple


class CipherError(Exception):
    """Base class for all mpags_cipher errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __reduce__(self):
        # Subclass constructors differ, so pickle from state (process pool).
        return (_rebuild, (type(self), self.message, self.details))


def _rebuild(cls, message, details):
    err = cls.__new__(cls)
    CipherError.__init__(err, message, details)
    return err


class KeyValidationError(CipherError, ValueError):
    """Raised by the factory when a raw key is unusable for its cipher."""

    def __init__(self, kind: str, key: str, reason: str):
        super().__init__(
            f"Invalid {kind} key {key!r}: {reason}",
            {"kind": kind, "key": key},
        )


class PartitionError(CipherError, ValueError):
    """Raised when the text cannot be split as requested."""


class UnsupportedCharacterError(CipherError, ValueError):
    """Raised when a cipher meets a character it has no mapping for."""

    def __init__(self, char: str, position: int):
        super().__init__(
            f"Unsupported character {char!r} at offset {position}",
            {"char": char, "position": position},
        )


class SegmentAlignmentError(CipherError, ValueError):
    """Raised when a digraph cipher is handed a segment that splits a pair."""


class WorkerFailure(CipherError, RuntimeError):
    """
    One or more segment tasks failed.

    `errors` holds (segment index, exception) pairs in segment order.
    No partial output is ever attached.
    """

    def __init__(self, errors: List[Tuple[int, BaseException]]):
        self.errors = sorted(errors, key=lambda pair: pair[0])
        summary = "; ".join(f"segment {idx}: {exc}" for idx, exc in self.errors)
        super().__init__(
            f"{len(self.errors)} worker(s) failed -- {summary}",
            {"failed_segments": [idx for idx, _ in self.errors]},
        )

    def __reduce__(self):
        return (type(self), (self.errors,))
