"""Skills section classifier."""

from __future__ import annotations

from typing import List, Tuple

from parsing.debug import _debug
from parsing.sections import locate_section
from parsing.taxonomy import BARE_SKILLS_HEADER_RE, LIST_SPLIT_RE, SKILLS_HEADER_RE
from parsing.text import split_items, strip_marker, title_case, unique


def _expand_token(token: str) -> List[str]:
    # "Languages: Go, Rust" -> ["Go", "Rust"]; the label is discarded
    if ":" in token:
        return split_items(token.split(":", 1)[1])
    return split_items(token)


def extract_skills(blob: str) -> Tuple[str, ...]:
    section = locate_section(blob, SKILLS_HEADER_RE)
    if not section:
        return ()

    tokens = [tok.strip() for tok in LIST_SPLIT_RE.split(section)]
    tokens = [tok for tok in tokens if tok and not BARE_SKILLS_HEADER_RE.match(tok)]

    expanded: List[str] = []
    for token in tokens:
        for item in _expand_token(token):
            item = strip_marker(item)
            if item:
                expanded.append(title_case(item))

    skills = unique(expanded)
    _debug("extract_skills", f"found {len(skills)}")
    return skills
