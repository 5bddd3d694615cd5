import time

import pytest

import parsing.parser as parser_module
from parsing.text import normalize_lines, to_blob
from services.resume_schema import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)

parse_resume = parser_module.parse_resume


SAMPLE_RESUME = """Priya Sharma
Backend Engineer
priya.sharma@example.com | +91 98765 43210
Pune, Maharashtra
github.com/priyasharma
Summary
Backend engineer with five years of experience building payment systems.
Comfortable owning services end to end.
Experience
Senior Software Engineer at Razorpay
Jan 2021 - Present
- Designed the settlement ledger service
- Reduced reconciliation time by 60%
Paytm – Backend Developer
2018 - 2020
- Maintained wallet APIs
Education
B.E. Computer Engineering
Pune Institute of Computer Technology
2014 - 2018
Projects
Ledger Lite
A double-entry bookkeeping library, written in Go.
Tech: Go, PostgreSQL
https://github.com/priyasharma/ledger-lite
Technical Skills
Languages: Go, Python, Java
Databases: PostgreSQL; Redis
Certifications
AWS Solutions Architect
"""


def test_parse_resume_structure_and_content():
    result = parse_resume(SAMPLE_RESUME)

    assert isinstance(result, ResumeRecord)
    assert result.name == "Priya Sharma"
    assert result.title == "Backend Engineer"

    assert result.contact.email == "priya.sharma@example.com"
    assert result.contact.phone == "+91 98765 43210"
    assert result.contact.location == "Pune, Maharashtra"
    assert result.contact.links == (
        "https://github.com/priyasharma/ledger-lite",
        "github.com/priyasharma",
        "github.com/priyasharma/ledger-lite",
    )

    assert result.summary == (
        "Backend engineer with five years of experience building payment systems. "
        "Comfortable owning services end to end."
    )
    assert result.skills == ("Go", "Python", "Java", "Postgresql", "Redis")

    assert result.experience == (
        ExperienceEntry(
            company="Razorpay",
            role="Senior Software Engineer",
            period="Jan 2021 - Present",
            bullets=("Designed the settlement ledger service", "Reduced reconciliation time by 60%"),
        ),
        ExperienceEntry(
            company="Paytm",
            role="Backend Developer",
            period="2018 - 2020",
            bullets=("Maintained wallet APIs",),
        ),
    )
    assert result.education == (
        EducationEntry(
            degree="B.E. Computer Engineering",
            institution="Pune Institute of Computer Technology",
            period="2014 - 2018",
            details="",
        ),
    )
    assert result.projects == (
        ProjectEntry(
            name="Ledger Lite",
            description="A double-entry bookkeeping library, written in Go.",
            tech=("Go", "Postgresql"),
            link="https://github.com/priyasharma/ledger-lite",
        ),
    )


def test_jane_doe_scenario():
    text = (
        "Jane Doe\nSoftware Engineer\njane@x.com\nSkills\nGo, Rust, Python\n"
        "Education\nB.Tech Computer Science\nXYZ University\n2018 - 2022"
    )
    result = parse_resume(text)

    assert result.name == "Jane Doe"
    assert result.title == "Software Engineer"
    assert result.contact.email == "jane@x.com"
    assert result.skills == ("Go", "Rust", "Python")
    assert result.education == (
        EducationEntry(
            degree="B.Tech Computer Science",
            institution="XYZ University",
            period="2018 - 2022",
            details="",
        ),
    )
    assert result.experience == ()
    assert result.projects == ()


def test_no_section_headers_leaves_sections_empty():
    result = parse_resume("Alex Kim\nI build reliable backend systems\nBased in Toronto")

    assert result.skills == ()
    assert result.education == ()
    assert result.experience == ()
    assert result.projects == ()
    assert result.summary == ""
    assert result.name == "Alex Kim"
    assert result.title == "I build reliable backend systems"


def test_skill_labels_are_discarded():
    result = parse_resume("Jane Doe\nSkills\nLanguages: JavaScript, TypeScript")
    assert result.skills == ("Javascript", "Typescript")


def test_empty_input_gives_default_record():
    result = parse_resume("")
    assert result == ResumeRecord()
    assert result.contact == ContactInfo()
    assert result.to_dict() == {
        "name": "",
        "title": "",
        "contact": {"email": "", "phone": "", "location": "", "links": []},
        "summary": "",
        "skills": [],
        "education": [],
        "experience": [],
        "projects": [],
    }


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   \n\t \n",
        "\x00\x01\x02 binary \xff noise \ufffd",
        "word " * 20000,
        "A" * 20000,
        "1" * 5000,
        "x@" * 5000,
        "Skills:\n:\n;;;\n•",
        "Experience\n-\n•\n—\n– at @",
        "Projects\n- \nTech:\nTools -",
        "Education\nB.E.\nB.E.\nUniversity",
        "Summary\nSummary\nSummary",
        "\r\n\r\nSkills\r\nGo\u2028Rust\x0cEducation",
        None,
        12345,
    ],
)
def test_parse_resume_never_raises(text):
    assert isinstance(parse_resume(text), ResumeRecord)


def test_extractor_failure_falls_back_to_default(monkeypatch, caplog):
    def boom(_blob):
        raise RuntimeError("unexpected shape")

    monkeypatch.setattr(parser_module, "extract_skills", boom)
    with caplog.at_level("WARNING", logger="parsing"):
        result = parse_resume("Jane Doe\nSkills\nGo")

    assert result.skills == ()
    assert result.name == "Jane Doe"
    assert any("extract_skills failed" in record.getMessage() for record in caplog.records)


def test_reparsing_normalized_text_is_stable():
    messy = "\n\n   Priya Sharma  \n\t\n" + SAMPLE_RESUME.replace("\n", "\n   \n")
    first = parse_resume(messy)
    canonical = to_blob(normalize_lines(messy))
    second = parse_resume(canonical)

    assert first == second
    assert parse_resume(to_blob(normalize_lines(canonical))) == second


def test_lists_are_deduplicated():
    text = (
        "Sam Lee\nSkills\nGo, Go, go, Rust\n"
        "Projects\nTool Box\nTech: Go, go; Docker\nStack: Docker, Redis\n"
        "https://sam.dev https://sam.dev github.com/sam github.com/sam"
    )
    result = parse_resume(text)

    assert result.skills == ("Go", "Rust")
    assert result.projects[0].tech == ("Go", "Docker", "Redis")
    assert len(result.contact.links) == len(set(result.contact.links))


def test_sections_do_not_leak_into_each_other():
    result = parse_resume(SAMPLE_RESUME)

    education_text = " ".join(
        " ".join([entry.degree, entry.institution, entry.period, entry.details]) for entry in result.education
    )
    experience_text = " ".join(
        " ".join([entry.role, entry.company, entry.period, *entry.bullets]) for entry in result.experience
    )

    assert "Razorpay" not in education_text
    assert "wallet" not in education_text
    assert "Institute" not in experience_text
    assert "Ledger Lite" not in experience_text
    assert not any("Aws" in skill for skill in result.skills)


def test_parse_pages_respects_order_and_cap():
    pages = ["Jane Doe\nSkills", "Go, Rust", "Education\nB.Sc Physics"]

    capped = parser_module.parse_pages(pages, max_pages=2)
    full = parser_module.parse_pages(pages, max_pages=10)

    assert capped.skills == ("Go", "Rust")
    assert capped.education == ()
    assert full.education[0].degree == "B.Sc Physics"


def test_parse_pages_uses_configured_cap(monkeypatch):
    monkeypatch.setenv("FOLIO_MAX_PAGES", "1")
    result = parser_module.parse_pages(["Jane Doe\nSkills", "Go"])
    assert result.skills == ()


def test_parse_pages_accepts_one_concatenated_string():
    text = "Jane Doe\nSoftware Engineer\nSkills\nGo, Rust"
    result = parser_module.parse_pages(text)

    assert result == parse_resume(text)
    assert result.name == "Jane Doe"
    assert result.skills == ("Go", "Rust")
    assert parser_module.parse_pages(text.encode("utf-8")).skills == ("Go", "Rust")


def test_parse_pages_keeps_at_least_one_page():
    result = parser_module.parse_pages(["Jane Doe\nSkills\nGo", "Education\nB.Sc"], max_pages=0)
    assert result.name == "Jane Doe"
    assert result.skills == ("Go",)
    assert result.education == ()


def test_long_capitalized_line_parses_quickly():
    text = "Jane Doe\n" + "Alpha Beta " * 16000

    started = time.perf_counter()
    result = parse_resume(text)
    elapsed = time.perf_counter() - started

    assert result.name == "Jane Doe"
    assert result.contact.location == ""
    assert elapsed < 5.0


def test_location_keeps_multi_word_places():
    result = parse_resume("Jane Doe\nBased in San Francisco, California")
    assert result.contact.location == "San Francisco, California"
