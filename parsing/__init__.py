"""Heuristic résumé parser: flat extracted text in, ``ResumeRecord`` out."""

from parsing.debug import set_debug
from parsing.parser import parse_pages, parse_resume

__all__ = ["parse_pages", "parse_resume", "set_debug"]
