# data_loader.py

from pathlib import Path
from typing import List, Optional, Union

from docx import Document
import fitz  # PyMuPDF

from parsing.config import get_settings
from parsing.parser import parse_pages
from services.resume_schema import ResumeRecord

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt")


class DocumentLoadError(ValueError):
    """The document exists but its text could not be extracted."""


def _read_pdf(path: Union[str, Path], max_pages: int) -> List[str]:
    pages = []
    try:
        with fitz.open(str(path)) as pdf:
            for page_num, page in enumerate(pdf):
                if page_num >= max_pages:
                    break
                pages.append(page.get_text("text"))
    except (RuntimeError, ValueError) as err:
        raise DocumentLoadError(f"Could not read PDF {path}: {err}") from err
    return pages


def _read_docx(path: Union[str, Path]) -> List[str]:
    try:
        doc = Document(str(path))
    except Exception as err:
        raise DocumentLoadError(f"Could not read DOCX {path}: {err}") from err
    return ["\n".join(p.text for p in doc.paragraphs)]


def _read_txt(path: Union[str, Path]) -> List[str]:
    return [Path(path).read_text(encoding="utf-8", errors="ignore")]


def load_resume_pages(file_path: Union[str, Path], max_pages: Optional[int] = None) -> List[str]:
    """
    Return the text of each page of a resume file (.pdf, .docx, .txt), in order.
    PDFs are capped at ``max_pages`` pages (configured default: 10); DOCX and
    TXT files come back as a single page.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    ext = path.suffix.lower()
    if ext not in SUPPORTED_SUFFIXES:
        raise ValueError("Unsupported file type. Use PDF, DOCX, or TXT.")

    if ext == ".pdf":
        limit = max(1, max_pages if max_pages is not None else get_settings().max_pages)
        return _read_pdf(path, limit)
    if ext == ".docx":
        return _read_docx(path)
    return _read_txt(path)


def load_resume(file_path: Union[str, Path], max_pages: Optional[int] = None) -> str:
    """
    Load and return raw text from a resume file (.pdf, .docx, .txt).
    """
    return "\n".join(load_resume_pages(file_path, max_pages=max_pages)).strip()


def extract_resume_data(file_path: Union[str, Path], max_pages: Optional[int] = None) -> ResumeRecord:
    """Load a resume file and parse it. Load failures propagate to the caller."""
    pages = load_resume_pages(file_path, max_pages=max_pages)
    return parse_pages(pages, max_pages=max_pages)
