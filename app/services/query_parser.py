"""Deterministic natural-language query parser for doctor search.

Extracts a specialty, a location (city/state) and procedure keywords from a
free-text request such as "cardiologist in Chicago who does ultrasounds".

Matching is plain substring containment on the lower-cased query, scanning the
lexicon tables in declaration order and keeping the first hit.  Short keys can
therefore match inside unrelated words ("gi" in "giving"); this is an accepted
limitation of the keyword approach.

The parser is side-effect free and never raises.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from app.data.lexicon import (
    LOCATION_KEYWORDS,
    MAJOR_CITIES,
    PROCEDURE_KEYWORDS,
    SPECIALTY_SYNONYMS,
    US_STATES,
)

_CITY_TRAILING_PUNCTUATION = ".,!?"


@dataclass(frozen=True)
class Location:
    city: Optional[str] = None
    state: Optional[str] = None
    keyword: Optional[str] = None


@dataclass(frozen=True)
class ParsedQuery:
    specialty: Optional[str] = None
    location: Location = field(default_factory=Location)
    procedures: tuple[str, ...] = ()
    original_query: str = ""

    def to_dict(self) -> dict:
        """Public ``parsed`` block echoed in search responses."""
        return {
            "specialty": self.specialty,
            "location": {
                "city": self.location.city,
                "state": self.location.state,
                "keyword": self.location.keyword,
            },
            "procedures": list(self.procedures),
        }


def _first_pair_match(text: str, pairs: tuple[tuple[str, str], ...]) -> Optional[str]:
    for key, value in pairs:
        if key in text:
            return value
    return None


def _first_keyword_match(text: str, keywords: tuple[str, ...]) -> Optional[str]:
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


def _title_city(city: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in city.split(" "))


def _extract_city(query: str, lowered: str) -> Optional[str]:
    known_city = _first_keyword_match(lowered, MAJOR_CITIES)
    if known_city:
        return _title_city(known_city)

    # Positional guess: a capitalized word right after a location keyword.
    words = query.split()
    for current, following in zip(words, words[1:]):
        current_l = current.lower()
        if not any(keyword in current_l for keyword in LOCATION_KEYWORDS):
            continue
        if following[:1].isupper():
            return following.rstrip(_CITY_TRAILING_PUNCTUATION)
    return None


def parse_query(query: Optional[str]) -> ParsedQuery:
    """Parse a free-text doctor request into structured search hints."""
    original_query = (query or "").strip()
    lowered = original_query.lower()

    specialty = _first_pair_match(lowered, SPECIALTY_SYNONYMS)
    procedures = tuple(keyword for keyword in PROCEDURE_KEYWORDS if keyword in lowered)
    state = _first_pair_match(lowered, US_STATES)
    keyword = _first_keyword_match(lowered, LOCATION_KEYWORDS)
    city = _extract_city(original_query, lowered)

    return ParsedQuery(
        specialty=specialty,
        location=Location(city=city, state=state, keyword=keyword),
        procedures=procedures,
        original_query=original_query,
    )
