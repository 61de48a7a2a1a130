"""
mpags-cipher command line
=========================
    mpags-cipher [-h] [--version] [-i FILE] [-o FILE] [-c CIPHER] [-k KEY]
                 [--encrypt | --decrypt] [-j N] [--executor {thread,process}] [-v]

Reads text from FILE or stdin, sanitises it, runs the chosen cipher over
it in parallel and writes the result to FILE or stdout.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .ciphers import CipherMode
from .config import (DEFAULT_CIPHER, DEFAULT_EXECUTOR, DEFAULT_WORKERS,
                     EXECUTORS, ProgramSettings)
from .engine import ParallelEngine
from .exceptions import CipherError
from .factory import CipherKind, create_cipher
from .transform import sanitize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mpags-cipher",
        description="Encrypts/Decrypts input alphanumeric text using classical ciphers",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-i", dest="input_file", metavar="FILE",
                        help="read text to be processed from FILE (default: stdin)")
    parser.add_argument("-o", dest="output_file", metavar="FILE",
                        help="write processed text to FILE (default: stdout)")
    parser.add_argument("-c", dest="cipher", metavar="CIPHER",
                        choices=[k.value for k in CipherKind],
                        default=DEFAULT_CIPHER.value,
                        help="caesar, playfair or vigenere (default: %(default)s)")
    parser.add_argument("-k", dest="key", metavar="KEY", required=True,
                        help="the cipher KEY")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--encrypt", dest="mode", action="store_const",
                      const=CipherMode.ENCRYPT, help="encrypt the input (default)")
    mode.add_argument("--decrypt", dest="mode", action="store_const",
                      const=CipherMode.DECRYPT, help="decrypt the input")
    parser.set_defaults(mode=CipherMode.ENCRYPT)
    parser.add_argument("-j", "--workers", type=int, default=DEFAULT_WORKERS,
                        metavar="N", help="number of parallel workers (default: %(default)s)")
    parser.add_argument("--executor", choices=EXECUTORS, default=DEFAULT_EXECUTOR,
                        help="worker backend (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log progress (-vv for per-worker detail)")
    return parser


def parse_settings(argv: Optional[List[str]] = None) -> ProgramSettings:
    args = build_parser().parse_args(argv)
    return ProgramSettings(
        input_file=args.input_file,
        output_file=args.output_file,
        cipher_kind=CipherKind(args.cipher),
        cipher_key=args.key,
        cipher_mode=args.mode,
        workers=args.workers,
        executor=args.executor,
        verbosity=args.verbose,
    )


def _read_input(settings: ProgramSettings) -> str:
    if settings.input_file:
        with open(settings.input_file, encoding="utf-8") as fh:
            return fh.read()
    return sys.stdin.read()


def _write_output(settings: ProgramSettings, text: str) -> None:
    if settings.output_file:
        with open(settings.output_file, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
    else:
        sys.stdout.write(text + "\n")


def run(settings: ProgramSettings) -> str:
    """Execute one configured run and return the output text."""
    text = sanitize(_read_input(settings))
    cipher = create_cipher(settings.cipher_kind, settings.cipher_key)
    engine = ParallelEngine(settings.workers, settings.executor)
    output = engine.run(cipher, text, settings.cipher_mode)
    _write_output(settings, output)
    return output


def main(argv: Optional[List[str]] = None) -> int:
    settings = parse_settings(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(settings.verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format=' %(message)s')

    try:
        run(settings)
    except CipherError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"[error] {exc.filename or ''}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
