"""Parse a résumé file into JSON.

Usage
-----

    folio-parse resume.pdf --output data/resume.json --max-pages 10

Without ``--output`` the JSON document is written to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from data_loader import extract_resume_data
from parsing.config import get_settings
from parsing.debug import set_debug


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract structured résumé data from a PDF, DOCX or TXT file.")
    parser.add_argument("path", type=Path, help="Resume file (.pdf, .docx, .txt)")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Destination JSON file (default: stdout)")
    parser.add_argument("--max-pages", type=int, default=None, help="Only read the first N pages of a PDF")
    parser.add_argument("--debug", action="store_true", help="Log each parser step")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = get_settings()

    level = logging.DEBUG if args.debug else logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s %(message)s")
    set_debug(args.debug or settings.debug)

    try:
        record = extract_resume_data(args.path, max_pages=args.max_pages)
    except (FileNotFoundError, ValueError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    payload = json.dumps(record.to_dict(), indent=args.indent, ensure_ascii=False)
    if args.output is None:
        print(payload)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(payload + "\n", encoding="utf-8")
    print(f"Wrote resume JSON to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
