"""Signal checks that decide whether a parsed query is worth a filtered search.

Both predicates are pure and total; the search orchestrator serves fallback
suggestions when a query is gibberish or carries no usable filter.
"""

from __future__ import annotations

import re

from app.services.query_parser import ParsedQuery

MIN_QUERY_LENGTH = 3
MIN_LETTER_RATIO = 0.3

_ASCII_LETTER_RE = re.compile(r"[a-zA-Z]")
_DIGITS_ONLY_RE = re.compile(r"^[0-9]+$")
_WHITESPACE_RE = re.compile(r"\s")


def has_meaningful_info(parsed: ParsedQuery) -> bool:
    """True when the query yielded a specialty, a city, a state or a procedure.

    A bare location keyword ("near", "downtown") does not count.
    """
    location = parsed.location
    return bool(parsed.specialty or location.city or location.state or parsed.procedures)


def is_likely_gibberish(query: str) -> bool:
    trimmed = (query or "").strip()
    if len(trimmed) < MIN_QUERY_LENGTH:
        return True

    letter_ratio = len(_ASCII_LETTER_RE.findall(trimmed)) / len(trimmed)
    if letter_ratio < MIN_LETTER_RATIO:
        return True

    return bool(_DIGITS_ONLY_RE.match(_WHITESPACE_RE.sub("", trimmed)))
