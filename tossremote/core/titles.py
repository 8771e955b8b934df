"""
Helpers for recommendation lines of the form "Title (Year) - Director".

Parsing is deliberately forgiving: the chat model does not always follow the
requested format, so every helper returns something usable instead of raising.
"""

import re
from typing import Iterable, List, NamedTuple

_WHITESPACE = re.compile(r"\s+")
_CURLY_QUOTES = re.compile(r"[“”]")
_TITLE_WITH_YEAR = re.compile(r"(.+?)\s*\((\d{4})\)", re.IGNORECASE)
_LEADING_ARTICLE = re.compile(r"^(the|a|an)\s+", re.IGNORECASE)
_SPECIAL_CHARS = re.compile(r"[^\w\s'-]")


class MovieQuery(NamedTuple):
    """Bare title and optional four-digit year extracted from a line."""

    title: str
    year: str = ""


def normalize_line(text: str) -> str:
    """Collapse whitespace and straighten curly double quotes."""
    text = _WHITESPACE.sub(" ", text)
    text = _CURLY_QUOTES.sub('"', text)
    return text.strip()


def parse_movie_line(text: str) -> MovieQuery:
    """
    Extract title and year from a recommendation line.

    Args:
        text: Line such as "Heat (1995) - Michael Mann"

    Returns:
        MovieQuery with the title and the year ("" when no year was found).
        Lines without a parenthesized year fall back to the text before the
        first hyphen.
    """
    normalized = normalize_line(text)

    match = _TITLE_WITH_YEAR.match(normalized)
    if match:
        return MovieQuery(match.group(1).strip(), match.group(2))

    title = normalized.split("-")[0].strip()
    return MovieQuery(title or normalized, "")


def clean_title(title: str) -> str:
    """Strip a leading article and punctuation to broaden a search query."""
    cleaned = _LEADING_ARTICLE.sub("", title)
    cleaned = _SPECIAL_CHARS.sub(" ", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


def title_key(line: str) -> str:
    """Case-insensitive identity of a line: the text before " (" lowered."""
    return line.split(" (")[0].strip().lower()


def split_lines(text: str | None) -> List[str]:
    """Return the non-empty, stripped lines of a recommendation blob."""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def dedupe_lines(lines: Iterable[str]) -> List[str]:
    """Keep the first line for every distinct title key, preserving order."""
    seen = set()
    unique = []
    for line in lines:
        key = title_key(line)
        if key in seen:
            continue
        seen.add(key)
        unique.append(line)
    return unique
