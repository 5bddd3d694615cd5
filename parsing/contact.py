"""Contact extraction: email, phone, location and profile links."""

from __future__ import annotations

from typing import List, Pattern

from parsing.debug import _debug
from parsing.taxonomy import EMAIL_RE, LINK_PATTERNS, LOCATION_RE, PHONE_RE
from parsing.text import unique
from services.resume_schema import ContactInfo

_TRAILING_PUNCT = ".,;:!?'\""


def _first(pattern: Pattern[str], blob: str, group: int = 0) -> str:
    match = pattern.search(blob)
    return match.group(group).strip() if match else ""


def extract_email(blob: str) -> str:
    return _first(EMAIL_RE, blob)


def extract_phone(blob: str) -> str:
    return _first(PHONE_RE, blob)


def extract_location(blob: str) -> str:
    return _first(LOCATION_RE, blob, group=1)


def extract_links(blob: str) -> List[str]:
    found: List[str] = []
    for pattern in LINK_PATTERNS:
        found.extend(match.rstrip(_TRAILING_PUNCT) for match in pattern.findall(blob))
    return list(unique(found))


def extract_contact(blob: str) -> ContactInfo:
    blob = blob or ""
    contact = ContactInfo(
        email=extract_email(blob),
        phone=extract_phone(blob),
        location=extract_location(blob),
        links=tuple(extract_links(blob)),
    )
    _debug(
        "extract_contact",
        f"email={bool(contact.email)}, phone={bool(contact.phone)}, "
        f"location={bool(contact.location)}, links={len(contact.links)}",
    )
    return contact
