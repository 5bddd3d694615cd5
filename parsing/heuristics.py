"""Positional heuristics: candidate name, headline title and summary."""

from __future__ import annotations

from typing import Sequence

from parsing.debug import _debug
from parsing.sections import locate_section, section_body
from parsing.taxonomy import (
    EMAIL_RE,
    MAX_NAME_WORDS,
    MAX_TITLE_LENGTH,
    NAME_CHARS_RE,
    NAME_SKIP_RE,
    SECTION_BOUNDARY_RE,
    SUMMARY_HEADER_RE,
    TITLE_REJECT_RE,
    URL_RE,
)
from parsing.text import collapse_spaces

NAME_SCAN_LINES = 5
SUMMARY_SECTION_LINES = 3
FALLBACK_WINDOW = 4
FALLBACK_SENTENCES = 2


def _guess_name_from_lines(lines: Sequence[str]) -> str:
    for line in lines[:NAME_SCAN_LINES]:
        if not line or NAME_SKIP_RE.match(line):
            continue
        if len(line.split()) <= MAX_NAME_WORDS and NAME_CHARS_RE.match(line):
            return collapse_spaces(line)
    return ""


def guess_name(lines: Sequence[str]) -> str:
    """First line if it is short enough, otherwise the first name-shaped line."""
    first = lines[0] if lines else ""
    if len(first) > 2 and len(first.split()) <= MAX_NAME_WORDS:
        name = first
    else:
        name = _guess_name_from_lines(lines)
    _debug("guess_name", name or "no match")
    return name


def guess_title(lines: Sequence[str]) -> str:
    if len(lines) < 2:
        return ""
    candidate = lines[1]
    if len(candidate) >= MAX_TITLE_LENGTH:
        return ""
    if TITLE_REJECT_RE.search(candidate) or EMAIL_RE.search(candidate) or URL_RE.search(candidate):
        return ""
    _debug("guess_title", candidate)
    return candidate


def extract_summary(blob: str, name: str = "") -> str:
    """Summary section text, or up to two sentence lines following the name."""
    section = locate_section(blob, SUMMARY_HEADER_RE)
    if section:
        body = section_body(section, SUMMARY_HEADER_RE)
        if body:
            summary = " ".join(body[:SUMMARY_SECTION_LINES])
            _debug("extract_summary", f"section, {len(summary)} chars")
            return summary

    lines = [ln.strip() for ln in (blob or "").split("\n") if ln.strip()]
    start = next((idx for idx, ln in enumerate(lines) if name in ln), 0)
    window = []
    for line in lines[start + 1:start + 1 + FALLBACK_WINDOW]:
        # never borrow lines that already belong to a section
        if SECTION_BOUNDARY_RE.match(line):
            break
        window.append(line)
    sentences = [ln for ln in window if ln.endswith((".", "!"))][:FALLBACK_SENTENCES]
    summary = " ".join(sentences)
    _debug("extract_summary", f"fallback, {len(summary)} chars")
    return summary
