"""
Multilingual alt-text client.

Usage:
    alttext-client photo1.jpg photo2.png
    alttext-client --base-url http://localhost:3000 --out exports/ images/*.webp
"""
import argparse
import logging
import sys
from typing import List, Optional

from alttext.client.api_client import DEFAULT_BASE_URL, AltTextApiClient
from alttext.client.session import AltTextSession
from alttext.client.validator import UploadCandidate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate English alt text and translations for images.")
    parser.add_argument("files", nargs="+", help="Image files (JPG, PNG, WEBP; max 5 MB each)")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Relay server URL")
    parser.add_argument("--out", default=".", help="Directory for the exported CSV")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds (default: none)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP activity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    candidates: List[UploadCandidate] = []
    read_errors: List[str] = []
    for name in args.files:
        try:
            candidates.append(UploadCandidate.from_path(name))
        except OSError as exc:
            read_errors.append(f"{name}: {exc.strerror or exc}")

    with AltTextApiClient(args.base_url, timeout=args.timeout) as api:
        session = AltTextSession(api)
        session.errors.extend(read_errors)
        print("Processing… analyzing images and generating translations.", file=sys.stderr)
        session.handle_files(candidates)

    if session.errors:
        print("Errors", file=sys.stderr)
        for err in session.errors:
            print(f"  • {err}", file=sys.stderr)

    print(session.table.render())
    csv_path = session.download(args.out)
    if csv_path:
        print(f"\nCSV written to {csv_path}")

    return 1 if session.errors else 0


if __name__ == "__main__":
    sys.exit(main())
