"""Command line tool that prints SHA-256, SHA-384 and SHA-512 digests of a message."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from shadigest.sha256 import sha256
from shadigest.sha512 import sha384, sha512


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shadigest",
        description="Print the SHA-256, SHA-384 and SHA-512 digests of a message.",
    )
    parser.add_argument("message", help="text to hash")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    message = args.message
    print(f"SHA256:{sha256(message)}")
    print(f"SHA384:{sha384(message)}")
    print(f"SHA512:{sha512(message)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())