"""Experience section classifier."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from parsing.debug import _debug
from parsing.sections import locate_section, section_body
from parsing.taxonomy import (
    CONNECTOR_RE,
    DASH_RE,
    ENTRY_SPLIT_RE,
    EXPERIENCE_HEADER_RE,
    EXPERIENCE_PERIOD_RE,
    ROLE_KEYWORD_RE,
    ROLE_PICK_RE,
)
from parsing.text import strip_marker
from services.resume_schema import ExperienceEntry

Draft = Dict[str, Any]


def _new_draft() -> Draft:
    return {"company": "", "role": "", "period": "", "bullets": []}


def _is_entry_header(body: str) -> bool:
    if ROLE_KEYWORD_RE.search(body):
        return True
    # must run before the dash/connector test: "Jan 2020 - Present" is a period
    # line for _step below, not "<role> - <company>"
    if EXPERIENCE_PERIOD_RE.search(body):
        return False
    return bool(DASH_RE.search(body) and CONNECTOR_RE.search(body))


def split_role_company(line: str) -> Tuple[str, str]:
    """Split ``"Role at Company"`` / ``"Company – Role"`` into ``(role, company)``."""
    parts = [part.strip() for part in ENTRY_SPLIT_RE.split(line) if part and part.strip()]
    if len(parts) < 2:
        return line.strip(), ""
    role_idx = next((idx for idx, part in enumerate(parts) if ROLE_PICK_RE.search(part)), 0)
    company = " - ".join(part for idx, part in enumerate(parts) if idx != role_idx)
    return parts[role_idx], company


def _step(done: List[Draft], draft: Optional[Draft], line: str) -> Tuple[List[Draft], Optional[Draft]]:
    body = strip_marker(line)
    if not body:
        return done, draft
    if _is_entry_header(body):
        if draft is not None:
            done = done + [draft]
        role, company = split_role_company(body)
        fresh = _new_draft()
        fresh["role"], fresh["company"] = role, company
        return done, fresh

    draft = _new_draft() if draft is None else {**draft, "bullets": list(draft["bullets"])}
    if EXPERIENCE_PERIOD_RE.search(body):
        draft["period"] = body
    else:
        draft["bullets"].append(body)
    return done, draft


def _finalize(draft: Draft) -> ExperienceEntry:
    return ExperienceEntry(
        company=draft["company"],
        role=draft["role"],
        period=draft["period"],
        bullets=tuple(draft["bullets"]),
    )


def extract_experience(blob: str) -> Tuple[ExperienceEntry, ...]:
    section = locate_section(blob, EXPERIENCE_HEADER_RE)
    if not section:
        return ()

    done: List[Draft] = []
    draft: Optional[Draft] = None
    for line in section_body(section, EXPERIENCE_HEADER_RE):
        done, draft = _step(done, draft, line)
    if draft is not None:
        done.append(draft)

    entries = tuple(_finalize(item) for item in done)
    _debug("extract_experience", f"found {len(entries)}")
    return entries
