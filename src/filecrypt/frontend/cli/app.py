"""Command-line entry point for filecrypt.

    filecrypt encrypt -i <path> [-o <path>] [-k <path>]
    filecrypt decrypt -i <path> [-o <path>] -k <path>

Start here with `python -m filecrypt` or the installed `filecrypt` script.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from filecrypt import __version__
from filecrypt.config import Settings, load_settings
from filecrypt.core.exceptions import FilecryptError
from filecrypt.core.operations import decrypt_file, encrypt_file
from filecrypt.frontend.cli.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _add_io_arguments(parser: argparse.ArgumentParser, key_help: str) -> None:
    parser.add_argument("-i", "--input", required=True, help="Input file")
    parser.add_argument("-o", "--output", default=None, help="Output file")
    parser.add_argument("-k", "--key", default=None, help=key_help)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filecrypt",
        description="Encrypt and decrypt files using AES-GCM encryption",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show progress logs (-v) or debug logs (-vv)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")

    sub = parser.add_subparsers(dest="command", metavar="{encrypt,decrypt}")
    sub.required = True

    enc = sub.add_parser("encrypt", help="Encrypt a file")
    _add_io_arguments(
        enc,
        key_help="Key file to use (default: generate a new key and save it to the default key path)",
    )
    enc.set_defaults(func=cmd_encrypt)

    dec = sub.add_parser("decrypt", help="Decrypt a file")
    # --key is checked by decrypt_file so a missing key reports MissingKeyPathError
    _add_io_arguments(dec, key_help="Key file used for encryption (required)")
    dec.set_defaults(func=cmd_decrypt)

    return parser


def _log_level(args: argparse.Namespace, settings: Settings) -> int:
    if args.quiet:
        return logging.ERROR
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    return settings.log_level


def cmd_encrypt(args: argparse.Namespace, settings: Settings) -> None:
    result = encrypt_file(
        args.input,
        output_path=args.output,
        key_path=args.key,
        default_key_path=settings.default_key_path,
    )
    if result.generated_key_path is not None:
        print(f"Generated new key and saved to {result.generated_key_path}")
    print(f"File encrypted successfully: {result.output_path}")


def cmd_decrypt(args: argparse.Namespace, settings: Settings) -> None:
    output_path = decrypt_file(args.input, output_path=args.output, key_path=args.key)
    print(f"File decrypted successfully: {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(_log_level(args, settings))

    try:
        args.func(args, settings)
    except FilecryptError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
