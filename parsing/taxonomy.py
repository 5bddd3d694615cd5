"""Closed keyword taxonomy shared by the section classifiers.

Every header word, degree form and role keyword the parser knows lives here so
the vocabulary can be read and tested in one place. Nothing in this module is
mutated after import.
"""

import re
from typing import Iterable, Pattern


def _alternation(words: Iterable[str]) -> str:
    # longest first so "technical skills" wins over "skills"
    ordered = sorted(set(words), key=len, reverse=True)
    return "|".join(r"\s+".join(re.escape(part) for part in word.split()) for word in ordered)


def header_pattern(words: Iterable[str]) -> Pattern[str]:
    """Pattern for a header line: one of ``words`` at line start, whole word."""
    return re.compile(rf"^\s*(?:{_alternation(words)})\b", re.IGNORECASE)


# ---- Section headers ----

SECTION_HEADERS = (
    "skills",
    "technical skills",
    "experience",
    "work experience",
    "professional experience",
    "education",
    "academics",
    "projects",
    "personal projects",
    "summary",
    "objective",
    "about",
    "certifications",
    "awards",
)
SECTION_BOUNDARY_RE = header_pattern(SECTION_HEADERS)

SKILLS_HEADERS = ("skills", "technical skills")
EDUCATION_HEADERS = ("education", "academics", "academic background")
EXPERIENCE_HEADERS = ("experience", "work experience", "professional experience")
PROJECT_HEADERS = ("projects", "personal projects")
SUMMARY_HEADERS = ("summary", "objective", "about me", "about")

SKILLS_HEADER_RE = header_pattern(SKILLS_HEADERS)
EDUCATION_HEADER_RE = header_pattern(EDUCATION_HEADERS)
EXPERIENCE_HEADER_RE = header_pattern(EXPERIENCE_HEADERS)
PROJECTS_HEADER_RE = header_pattern(PROJECT_HEADERS)
SUMMARY_HEADER_RE = header_pattern(SUMMARY_HEADERS)

BARE_SKILLS_HEADER_RE = re.compile(rf"^(?:{_alternation(SKILLS_HEADERS)})$", re.IGNORECASE)


# ---- Markers and list separators ----

BULLET_MARKERS = "•·▪●‣"
LEADING_MARKER_RE = re.compile(rf"^[-–—*{BULLET_MARKERS}]\s*")
LIST_SPLIT_RE = re.compile(rf"[\n,;{BULLET_MARKERS}]+")
ITEM_SPLIT_RE = re.compile(rf"[,;{BULLET_MARKERS}]+")


# ---- Contact patterns ----

EMAIL_RE = re.compile(r"(?<![A-Z0-9._%+-])[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
PHONE_RE = re.compile(r"\+?\(?\d[\d \t().-]{7,}\d")
# at most four words per place keeps the scan linear on long capitalized lines
_PLACE = r"[A-Z][a-zA-Z]+(?:[ \t]+[A-Z][a-zA-Z]+){0,3}"
LOCATION_RE = re.compile(rf"\b({_PLACE}(?:,[ \t]*{_PLACE})+)\b")
URL_RE = re.compile(r"https?://[^\s)]+")
LINK_PATTERNS = (
    URL_RE,
    re.compile(r"\bwww\.[^\s)]+"),
    re.compile(r"\bgithub\.com/[^\s)]+", re.IGNORECASE),
    re.compile(r"\blinkedin\.com/[^\s)]+", re.IGNORECASE),
    re.compile(r"\bportfolio\.[^\s)]+", re.IGNORECASE),
)
CONTACT_WORDS = ("email", "phone", "linkedin", "github")


# ---- Education ----

DEGREE_RE = re.compile(
    r"(?<![A-Za-z])(?:"
    r"(?i:b\.?\s?tech|m\.?\s?tech|b\.?\s?sc|m\.?\s?sc|ph\.?\s?d|mba|bca|mca"
    r"|bachelor(?:'s|s)?|master(?:'s|s)?|diploma|doctorate)"
    r"|[BM]\.[ESA]\.?"
    r")(?![A-Za-z])"
)
INSTITUTION_KEYWORDS = ("university", "college", "institute", "school")
INSTITUTION_RE = re.compile(rf"\b(?:{_alternation(INSTITUTION_KEYWORDS)})\b", re.IGNORECASE)
EDUCATION_PERIOD_RE = re.compile(r"\b20\d{2}\b.{0,5}?(?:\b20\d{2}\b|present|current)", re.IGNORECASE)


# ---- Experience ----

ROLE_KEYWORDS = ("intern", "internship", "engineer", "developer", "manager", "lead")
ROLE_PICK_KEYWORDS = ROLE_KEYWORDS + ("analyst", "consultant")
ROLE_KEYWORD_RE = re.compile(rf"\b(?:{_alternation(ROLE_KEYWORDS)})s?\b", re.IGNORECASE)
ROLE_PICK_RE = re.compile(rf"\b(?:{_alternation(ROLE_PICK_KEYWORDS)})s?\b", re.IGNORECASE)
DASH_RE = re.compile(r"[-–—]")
CONNECTOR_RE = re.compile(r"\bat\b|@|\s[-–—]\s|—", re.IGNORECASE)
ENTRY_SPLIT_RE = re.compile(r"\s+-\s+|\s*[–—]\s*|\s+(?:at|@)\s+", re.IGNORECASE)
EXPERIENCE_PERIOD_RE = re.compile(r"\b20\d{2}\b.{0,12}?(?:\b20\d{2}\b|present|current)", re.IGNORECASE)


# ---- Projects ----

PROJECT_TITLE_RE = re.compile(r"^[A-Z][A-Za-z0-9 ._-]{2,59}$")
TECH_HINT_RE = re.compile(r"tech|stack|tools", re.IGNORECASE)
TECH_LABEL_SPLIT_RE = re.compile(r"[:-]")
LINK_HINT_RE = re.compile(r"https?://|github\.com|\bdemo\b|\blive\b", re.IGNORECASE)


# ---- Name / title ----

NAME_SKIP_RE = header_pattern(SECTION_HEADERS + ("email", "contact", "phone"))
NAME_CHARS_RE = re.compile(r"^[A-Za-z .'-]+$")
TITLE_REJECT_RE = re.compile(
    rf"\b(?:{_alternation(SECTION_HEADERS + CONTACT_WORDS)})\b",
    re.IGNORECASE,
)
MAX_NAME_WORDS = 6
MAX_TITLE_LENGTH = 80
