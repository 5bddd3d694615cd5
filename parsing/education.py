"""Education section classifier.

Body lines are folded into entries with a single open draft. A degree line
always closes the draft and opens a new one; institution, period and free-text
lines fill the open draft (opening one if needed).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from parsing.debug import _debug
from parsing.sections import locate_section, section_body
from parsing.taxonomy import DEGREE_RE, EDUCATION_HEADER_RE, EDUCATION_PERIOD_RE, INSTITUTION_RE
from parsing.text import join_nonempty
from services.resume_schema import EducationEntry

Draft = Dict[str, str]


def _new_draft(degree: str = "") -> Draft:
    return {"degree": degree, "institution": "", "period": "", "details": ""}


def _step(done: List[Draft], draft: Optional[Draft], line: str) -> Tuple[List[Draft], Draft]:
    if DEGREE_RE.search(line):
        if draft is not None:
            done = done + [draft]
        return done, _new_draft(degree=line)

    draft = dict(draft) if draft is not None else _new_draft()
    if INSTITUTION_RE.search(line):
        draft["institution"] = join_nonempty([draft["institution"], line])
    elif EDUCATION_PERIOD_RE.search(line):
        draft["period"] = line
    else:
        draft["details"] = join_nonempty([draft["details"], line])
    return done, draft


def _finalize(draft: Draft) -> EducationEntry:
    return EducationEntry(
        degree=draft["degree"] or draft["details"],
        institution=draft["institution"],
        period=draft["period"],
        details=draft["details"],
    )


def extract_education(blob: str) -> Tuple[EducationEntry, ...]:
    section = locate_section(blob, EDUCATION_HEADER_RE)
    if not section:
        return ()

    done: List[Draft] = []
    draft: Optional[Draft] = None
    for line in section_body(section, EDUCATION_HEADER_RE):
        done, draft = _step(done, draft, line)
    if draft is not None:
        done.append(draft)

    entries = tuple(_finalize(item) for item in done)
    _debug("extract_education", f"found {len(entries)}")
    return entries
