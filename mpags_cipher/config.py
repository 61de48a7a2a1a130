"""
Run configuration
=================
Defaults and the settings object the command line fills in before the
core is invoked.
"""

from dataclasses import dataclass
from typing import Optional

from .ciphers import CipherMode
from .factory import CipherKind

DEFAULT_WORKERS  = 4
DEFAULT_CIPHER   = CipherKind.CAESAR
DEFAULT_MODE     = CipherMode.ENCRYPT
DEFAULT_EXECUTOR = "thread"
EXECUTORS        = ("thread", "process")


@dataclass
class ProgramSettings:
    """Everything one run of the program needs."""

    input_file: Optional[str] = None     # None -> stdin
    output_file: Optional[str] = None    # None -> stdout
    cipher_kind: CipherKind = DEFAULT_CIPHER
    cipher_key: str = ""
    cipher_mode: CipherMode = DEFAULT_MODE
    workers: int = DEFAULT_WORKERS
    executor: str = DEFAULT_EXECUTOR
    verbosity: int = 0
