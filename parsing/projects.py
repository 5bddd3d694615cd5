"""Projects section classifier."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from parsing.debug import _debug
from parsing.sections import locate_section, section_body
from parsing.taxonomy import (
    LEADING_MARKER_RE,
    LINK_HINT_RE,
    PROJECT_TITLE_RE,
    PROJECTS_HEADER_RE,
    TECH_HINT_RE,
    TECH_LABEL_SPLIT_RE,
    URL_RE,
)
from parsing.text import join_nonempty, split_items, strip_marker, title_case, unique
from services.resume_schema import ProjectEntry

Draft = Dict[str, Any]


def _new_draft(name: str = "") -> Draft:
    return {"name": name, "description": "", "tech": (), "link": ""}


def _is_project_title(line: str) -> bool:
    return bool(LEADING_MARKER_RE.match(line) or PROJECT_TITLE_RE.match(line))


def parse_tech_line(line: str) -> List[str]:
    """``"Tech Stack: React, node.js"`` -> ``["React", "Node.js"]``."""
    pieces = TECH_LABEL_SPLIT_RE.split(line, maxsplit=1)
    if len(pieces) < 2:
        return []
    return [title_case(item) for item in split_items(pieces[1])]


def _step(done: List[Draft], draft: Optional[Draft], line: str) -> Tuple[List[Draft], Draft]:
    if _is_project_title(line):
        if draft is not None:
            done = done + [draft]
        return done, _new_draft(name=strip_marker(line))

    draft = dict(draft) if draft is not None else _new_draft()
    if TECH_HINT_RE.search(line):
        draft["tech"] = unique(list(draft["tech"]) + parse_tech_line(line))
    elif LINK_HINT_RE.search(line):
        match = URL_RE.search(line)
        draft["link"] = match.group(0) if match else line
    else:
        draft["description"] = join_nonempty([draft["description"], line])
    return done, draft


def _finalize(draft: Draft) -> ProjectEntry:
    return ProjectEntry(
        name=draft["name"],
        description=draft["description"],
        tech=tuple(draft["tech"]),
        link=draft["link"],
    )


def extract_projects(blob: str) -> Tuple[ProjectEntry, ...]:
    section = locate_section(blob, PROJECTS_HEADER_RE)
    if not section:
        return ()

    done: List[Draft] = []
    draft: Optional[Draft] = None
    for line in section_body(section, PROJECTS_HEADER_RE):
        done, draft = _step(done, draft, line)
    if draft is not None:
        done.append(draft)

    entries = tuple(_finalize(item) for item in done)
    _debug("extract_projects", f"found {len(entries)}")
    return entries
