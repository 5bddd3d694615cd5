"""Section locator: bounds a résumé section by its header and the next one."""

from __future__ import annotations

import re
from typing import List, Pattern, Union

from parsing.debug import _debug
from parsing.taxonomy import SECTION_BOUNDARY_RE

HeaderPattern = Union[str, Pattern[str]]


def _compile(header_pattern: HeaderPattern) -> Pattern[str]:
    if isinstance(header_pattern, str):
        return re.compile(header_pattern, re.IGNORECASE)
    return header_pattern


def locate_section(blob: str, header_pattern: HeaderPattern) -> str:
    """Return the text from the first header match up to the next known header.

    The header line itself is part of the returned text. Later occurrences of
    the same header are ignored. Returns ``""`` when no line matches.
    """
    pattern = _compile(header_pattern)
    lines = (blob or "").split("\n")

    start = next((idx for idx, ln in enumerate(lines) if pattern.search(ln.strip())), None)
    if start is None:
        _debug("locate_section", f"{pattern.pattern!r} not found")
        return ""

    end = len(lines)
    for idx in range(start + 1, len(lines)):
        if SECTION_BOUNDARY_RE.match(lines[idx].strip()):
            end = idx
            break

    _debug("locate_section", f"{pattern.pattern!r} lines {start}-{end}")
    return "\n".join(lines[start:end]).strip()


def section_body(section: str, header_pattern: HeaderPattern) -> List[str]:
    """Lines of ``section`` with the header token (and its colon) removed.

    ``"Summary: Backend engineer"`` keeps ``"Backend engineer"`` as the first
    body line; a header that stands alone on its line is dropped.
    """
    pattern = _compile(header_pattern)
    lines = [ln.strip() for ln in section.split("\n") if ln.strip()]
    if not lines:
        return []
    match = pattern.match(lines[0])
    if match:
        rest = lines[0][match.end():].strip().lstrip(":").strip()
        lines = ([rest] if rest else []) + lines[1:]
    return lines
