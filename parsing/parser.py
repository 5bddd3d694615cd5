# parser.py
# --- Heuristic résumé text -> ResumeRecord ---

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, TypeVar

from parsing.config import get_settings
from parsing.contact import extract_contact
from parsing.debug import _debug
from parsing.education import extract_education
from parsing.experience import extract_experience
from parsing.heuristics import extract_summary, guess_name, guess_title
from parsing.projects import extract_projects
from parsing.skills import extract_skills
from parsing.text import coerce_text, normalize_text
from services.resume_schema import ContactInfo, ResumeRecord, build_resume_record

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _guarded(step: str, default: T, func: Callable[..., T], *args: Any) -> T:
    """Run one extractor; on any failure log it and fall back to ``default``."""
    try:
        return func(*args)
    except Exception as err:
        logger.warning("[parser] %s failed, using empty default: %s", step, err, exc_info=True)
        return default


def parse_resume(text: Any) -> ResumeRecord:
    """Infer a ``ResumeRecord`` from flat extracted text.

    Never raises: empty, whitespace-only or arbitrary input yields a record
    whose unmatched fields keep their empty defaults.
    """
    _debug("parse", "start")
    lines, blob = _guarded("normalize", ((), ""), normalize_text, text)
    _debug("lines", f"kept {len(lines)} lines")

    name = _guarded("guess_name", "", guess_name, lines)
    title = _guarded("guess_title", "", guess_title, lines)
    contact = _guarded("extract_contact", ContactInfo(), extract_contact, blob)
    skills = _guarded("extract_skills", (), extract_skills, blob)
    education = _guarded("extract_education", (), extract_education, blob)
    experience = _guarded("extract_experience", (), extract_experience, blob)
    projects = _guarded("extract_projects", (), extract_projects, blob)
    summary = _guarded("extract_summary", "", extract_summary, blob, name)

    record = build_resume_record(
        name=name,
        title=title,
        contact=contact,
        summary=summary,
        skills=skills,
        education=education,
        experience=experience,
        projects=projects,
    )
    _debug("parse", "complete")
    return record


def parse_pages(pages: Iterable[Any], max_pages: Optional[int] = None) -> ResumeRecord:
    """Parse page texts in order, keeping at most ``max_pages`` of them.

    A single string (or bytes) is one page, not a sequence of characters.
    """
    if isinstance(pages, (str, bytes)):
        pages = [pages]
    limit = max(1, max_pages if max_pages is not None else get_settings().max_pages)
    kept = []
    for idx, page in enumerate(pages or ()):
        if idx >= limit:
            break
        kept.append(coerce_text(page))
    _debug("parse_pages", f"using {len(kept)} page(s)")
    return parse_resume("\n".join(kept))


__all__ = ["parse_pages", "parse_resume"]
