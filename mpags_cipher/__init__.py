"""
mpags_cipher
============
Classical substitution ciphers applied in parallel.
Caesar (c. 50 BC), Vigenère (1553) and Playfair (1854), each split across
a pool of workers and reassembled into exactly the text a single pass
would have produced.

Pieces:
    ciphers      Caesar, Vigenère, Playfair  (one module per family)
    factory      key validation -> immutable cipher instance
    partition    block-aligned segments with absolute start offsets
    engine       one task per segment, wait-all join, ordered reassembly
    transform    raw input -> A-Z
    cli          the mpags-cipher program

These ciphers are teaching material, not security.
"""

__version__  = "0.5.0"

from .ciphers     import (Cipher, CipherMode, CaesarCipher, VigenereCipher,
                          PlayfairCipher)
from .factory     import CipherKind, create_cipher
from .partition   import Segment, partition
from .engine      import ParallelEngine, SegmentResult, reassemble, run_cipher
from .transform   import sanitize, transform_char
from .exceptions  import (CipherError, KeyValidationError, PartitionError,
                          WorkerFailure, UnsupportedCharacterError,
                          SegmentAlignmentError)

__all__ = [
    "Cipher",
    "CipherMode",
    "CaesarCipher",
    "VigenereCipher",
    "PlayfairCipher",
    "CipherKind",
    "create_cipher",
    "Segment",
    "partition",
    "ParallelEngine",
    "SegmentResult",
    "reassemble",
    "run_cipher",
    "sanitize",
    "transform_char",
    "CipherError",
    "KeyValidationError",
    "PartitionError",
    "WorkerFailure",
    "UnsupportedCharacterError",
    "SegmentAlignmentError",
]
