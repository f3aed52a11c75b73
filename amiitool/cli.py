"""Main CLI interface for amiitool."""

import argparse
import sys
from typing import BinaryIO

from rich.console import Console

from .core import KeyManager, TagAuthenticator
from .models import BufferTooSmallError, TagInfo, DEFAULT_KEY_FILE
from .ui import DisplayManager
from .utils import merge_trailing, read_dump

# Binary dumps may go to stdout, so all messages go to stderr
console = Console(stderr=True)
display = DisplayManager(console)

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_IO = 3
EXIT_OUTPUT = 4
EXIT_KEYS = 5
EXIT_SIGNATURE = 6


class AmiiboTool:
    """Encrypts and decrypts amiibo dumps with a loaded key set."""

    def __init__(self, authenticator: TagAuthenticator, show_info: bool = False):
        self.authenticator = authenticator
        self.display = display
        self.show_info = show_info

    def encrypt(self, original: bytes) -> bytes:
        """Sign and encrypt an internal-layout dump into the wire layout."""
        if self.show_info:
            self.display.show_tag(TagInfo.from_internal(original), title="Input")
        return self.authenticator.pack_tag(original)

    def decrypt(self, original: bytes, skip_check: bool = False) -> bytes | None:
        """Decrypt a wire-layout dump.

        Returns:
            Internal-layout plaintext, or None if the signature is invalid
            and skip_check is not set
        """
        plain, verified = self.authenticator.unpack(original)

        if self.show_info:
            self.display.show_tag(TagInfo.from_internal(plain, verified), title="Decrypted")

        if not verified:
            console.print("[bold red]!!! WARNING !!!: Tag signature was NOT valid[/bold red]")
            if self.authenticator.is_signed_plaintext(original):
                self.display.warning("Input looks like it is already decrypted")
            if not skip_check:
                return None
        return plain


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="amiitool",
        description="amiitool - Encrypt, decrypt and verify amiibo dumps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -d -k key_retail.bin -i tag.bin -o plain.bin   # Decrypt and verify
  %(prog)s -e -k key_retail.bin -i plain.bin -o tag.bin   # Encrypt and sign
  %(prog)s -d -s -k key_retail.bin < tag.bin > plain.bin  # Ignore bad signatures
        """,
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-e", "--encrypt", action="store_true", help="encrypt and sign amiibo"
    )
    mode.add_argument(
        "-d", "--decrypt", action="store_true", help="decrypt and test amiibo"
    )
    parser.add_argument(
        "-k",
        "--keyfile",
        default=DEFAULT_KEY_FILE,
        help='key set file (default: %(default)s). For retail amiibo, use "retail unfixed" key set',
        metavar="FILE",
    )
    parser.add_argument(
        "-i",
        "--infile",
        help="input file. If not specified, stdin will be used",
        metavar="FILE",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        help="output file. If not specified, stdout will be used",
        metavar="FILE",
    )
    parser.add_argument(
        "-s",
        "--skip",
        action="store_true",
        help="decrypt files with invalid signatures",
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="print a summary of the tag to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="amiitool v1.0.0",
    )
    return parser


def _read_input(path: str | None) -> bytes:
    if path is None:
        return read_dump(sys.stdin.buffer)
    with open(path, "rb") as file:
        return read_dump(file)


def _open_output(path: str | None) -> BinaryIO:
    if path is None:
        return sys.stdout.buffer
    return open(path, "wb")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the amiitool CLI."""
    args = build_parser().parse_args(argv)

    master_keys = KeyManager(args.keyfile).load_keys()
    if master_keys is None:
        display.error(f'Could not load keys from "{args.keyfile}"')
        return EXIT_KEYS

    try:
        original = _read_input(args.infile)
    except OSError as e:
        display.error(f"Could not open input file: {e}")
        return EXIT_IO
    except BufferTooSmallError as e:
        display.error(f"Could not read from input: {e}")
        return EXIT_IO

    tool = AmiiboTool(TagAuthenticator(master_keys), show_info=args.info)
    if args.encrypt:
        modified = tool.encrypt(original)
    else:
        modified = tool.decrypt(original, skip_check=args.skip)
        if modified is None:
            return EXIT_SIGNATURE

    try:
        output = _open_output(args.outfile)
    except OSError as e:
        display.error(f"Could not open output file: {e}")
        return EXIT_OUTPUT

    try:
        output.write(merge_trailing(modified, original))
        output.flush()
    except OSError as e:
        display.error(f"Could not write to output: {e}")
        return EXIT_IO
    finally:
        if output is not sys.stdout.buffer:
            output.close()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
