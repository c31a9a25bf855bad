from __future__ import annotations

import math
import re
from typing import Any, Optional

from app.core.search_config import SearchTuning, search_tuning
from app.repositories.provider_repository import ProviderFilters, ProviderRecord, ProviderRepository

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class InvalidArgumentError(ValueError):
    pass


def parse_int(value: Any) -> Optional[int]:
    """Lenient integer parsing for client-supplied limits.

    Ints pass through, floats are truncated, strings contribute their leading
    integer ("25 rows" -> 25).  Anything else, booleans included, is ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else None
    return None


def sanitize_limit(value: Any, *, default: int, ceiling: int) -> int:
    """Clamp a client limit to ``[1, ceiling]``; zero or unparseable means ``default``."""
    return max(1, min(ceiling, parse_int(value) or default))


class ProviderService:
    def __init__(self, repository: ProviderRepository, tuning: SearchTuning = search_tuning) -> None:
        self.repository = repository
        self.tuning = tuning

    def search_providers(self, filters: ProviderFilters, limit: Any) -> list[ProviderRecord]:
        """Return raw matches, over-fetched up to three times the requested limit.

        Callers slice the result down to the limit they expose.
        """
        sanitized_limit = sanitize_limit(
            limit,
            default=self.tuning.default_limit,
            ceiling=self.tuning.provider_max_limit,
        )
        query_limit = min(sanitized_limit * self.tuning.overfetch_multiplier, self.tuning.provider_max_limit)
        return self.repository.find_by_filters(filters, limit=query_limit)

    def get_fallback_providers(self, specialties: Any) -> list[ProviderRecord]:
        if not isinstance(specialties, (list, tuple)) or not specialties:
            raise InvalidArgumentError("Specialties must be a non-empty list")

        valid_specialties = [s for s in specialties if isinstance(s, str) and s.strip()]
        if not valid_specialties:
            raise InvalidArgumentError("All specialties must be non-empty strings")

        return self.repository.find_by_specialties(valid_specialties, limit=self.tuning.fallback_limit)
