"""Line normalization and small string helpers used by every extractor."""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Sequence, Tuple

from parsing.taxonomy import ITEM_SPLIT_RE, LEADING_MARKER_RE


def coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="ignore")
    if isinstance(value, str):
        return value
    return str(value)


def normalize_lines(text: Any) -> Tuple[str, ...]:
    """Split ``text`` into stripped, non-empty lines in their original order."""
    return tuple(ln.strip() for ln in coerce_text(text).splitlines() if ln.strip())


def to_blob(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def normalize_text(text: Any) -> Tuple[Tuple[str, ...], str]:
    lines = normalize_lines(text)
    return lines, to_blob(lines)


def strip_marker(line: str) -> str:
    """Drop one leading bullet or dash marker."""
    return LEADING_MARKER_RE.sub("", line, count=1).strip()


def title_case(token: str) -> str:
    # "JavaScript" -> "Javascript", "node.js" -> "Node.js"
    return " ".join(word[:1].upper() + word[1:].lower() for word in token.split())


def split_items(text: str) -> List[str]:
    return [piece.strip() for piece in ITEM_SPLIT_RE.split(text) if piece.strip()]


def unique(values: Iterable[str]) -> Tuple[str, ...]:
    """Exact-match dedupe that keeps first-seen order and drops empties."""
    seen = set()
    out: List[str] = []
    for value in values:
        if not value or value in seen:
            continue
        seen.add(value)
        out.append(value)
    return tuple(out)


def join_nonempty(parts: Sequence[str], sep: str = " ") -> str:
    return sep.join(part for part in parts if part)


def collapse_spaces(text: str) -> str:
    return re.sub(r"\s{2,}", " ", text).strip()
