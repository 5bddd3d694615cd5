"""Immutable résumé records and the helper that builds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _unique_list(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    unique: List[str] = []
    seen = set()
    if not values:
        return ()
    for value in values:
        text = _coerce_text(value)
        if not text or text in seen:
            continue
        seen.add(text)
        unique.append(text)
    return tuple(unique)


@dataclass(frozen=True)
class ContactInfo:
    email: str = ""
    phone: str = ""
    location: str = ""
    links: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "links": list(self.links),
        }


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    institution: str = ""
    period: str = ""
    details: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "degree": self.degree,
            "institution": self.institution,
            "period": self.period,
            "details": self.details,
        }


@dataclass(frozen=True)
class ExperienceEntry:
    company: str = ""
    role: str = ""
    period: str = ""
    bullets: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "role": self.role,
            "period": self.period,
            "bullets": list(self.bullets),
        }


@dataclass(frozen=True)
class ProjectEntry:
    name: str = ""
    description: str = ""
    tech: Tuple[str, ...] = ()
    link: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "tech": list(self.tech),
            "link": self.link,
        }


@dataclass(frozen=True)
class ResumeRecord:
    """Root aggregate handed to the rendering side.

    Every field has an empty default so a record built from nothing is still
    valid. Sequences are tuples and the dataclass is frozen, so callers own an
    immutable value once ``parse_resume`` returns.
    """

    name: str = ""
    title: str = ""
    contact: ContactInfo = field(default_factory=ContactInfo)
    summary: str = ""
    skills: Tuple[str, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "contact": self.contact.to_dict(),
            "summary": self.summary,
            "skills": list(self.skills),
            "education": [entry.to_dict() for entry in self.education],
            "experience": [entry.to_dict() for entry in self.experience],
            "projects": [entry.to_dict() for entry in self.projects],
        }


def build_resume_record(
    *,
    name: Any = "",
    title: Any = "",
    contact: Optional[ContactInfo] = None,
    summary: Any = "",
    skills: Optional[Iterable[str]] = None,
    education: Optional[Iterable[EducationEntry]] = None,
    experience: Optional[Iterable[ExperienceEntry]] = None,
    projects: Optional[Iterable[ProjectEntry]] = None,
) -> ResumeRecord:
    """Return a normalized ``ResumeRecord`` with empty defaults for missing parts."""

    return ResumeRecord(
        name=_coerce_text(name),
        title=_coerce_text(title),
        contact=contact or ContactInfo(),
        summary=_coerce_text(summary),
        skills=_unique_list(skills),
        education=tuple(education or ()),
        experience=tuple(experience or ()),
        projects=tuple(projects or ()),
    )


__all__ = [
    "ContactInfo",
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "ResumeRecord",
    "build_resume_record",
]
