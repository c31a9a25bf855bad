"""Doctor search orchestrator.

Pipeline for one ``POST /api/search`` request:

1. **Validate** the query and sanitize the public limit.
2. **Parse** the free text into specialty / location / procedure hints.
3. **Classify** the query: gibberish or signal-free queries get fallback
   suggestions from a fixed list of popular specialties.
4. **Search** the providers table with the extracted filters otherwise.

Fallback results are advisory, so a failing fallback query degrades to an
empty suggestion list.  Failures on the filtered search propagate to the
caller.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Optional

from app.core.search_config import FallbackConfig, SearchTuning, fallback_config, search_tuning
from app.repositories.provider_repository import ProviderFilters, ProviderRecord
from app.services.provider_service import InvalidArgumentError, ProviderService, sanitize_limit
from app.services.query_heuristics import has_meaningful_info, is_likely_gibberish
from app.services.query_parser import ParsedQuery, parse_query

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "We couldn't find any doctors matching your input. Try a specialty (like cardiology) or city."
)
NO_RESULTS_MESSAGE = (
    "No doctors found matching your criteria. "
    "Try adjusting your search - maybe try a different city or a broader specialty."
)


@dataclass
class SearchOutcome:
    results: list[ProviderRecord]
    parsed: ParsedQuery
    message: Optional[str] = None
    is_fallback: Optional[bool] = None


@dataclass
class _Classification:
    is_gibberish: bool
    has_info: bool
    reasons: list[str] = field(default_factory=list)

    @property
    def use_fallback(self) -> bool:
        return self.is_gibberish or not self.has_info


class DoctorSearchService:
    def __init__(
        self,
        provider_service: ProviderService,
        *,
        rng: Optional[random.Random] = None,
        tuning: SearchTuning = search_tuning,
        fallback: FallbackConfig = fallback_config,
    ) -> None:
        self.provider_service = provider_service
        self.rng = rng or random.Random()
        self.tuning = tuning
        self.fallback = fallback

    def search(self, query: Any, limit: Any = None) -> SearchOutcome:
        if not isinstance(query, str) or not query.strip():
            raise InvalidArgumentError("Query is required")

        sanitized_limit = sanitize_limit(
            limit,
            default=self.tuning.default_limit,
            ceiling=self.tuning.max_limit,
        )

        trimmed = query.strip()
        parsed = parse_query(trimmed)
        logger.info("Parsed query: %s", parsed)

        classification = self._classify(trimmed, parsed)
        if classification.use_fallback:
            logger.info("Serving fallback suggestions (%s)", ", ".join(classification.reasons))
            return SearchOutcome(
                results=self._fallback_results(),
                parsed=parsed,
                message=FALLBACK_MESSAGE,
                is_fallback=True,
            )

        filters = ProviderFilters(
            specialty=parsed.specialty,
            city=parsed.location.city,
            state=parsed.location.state,
        )
        rows = self.provider_service.search_providers(filters, sanitized_limit)
        results = rows[:sanitized_limit]

        if not results:
            return SearchOutcome(
                results=[],
                parsed=parsed,
                message=NO_RESULTS_MESSAGE,
                is_fallback=False,
            )

        return SearchOutcome(results=results, parsed=parsed)

    @staticmethod
    def _classify(query: str, parsed: ParsedQuery) -> _Classification:
        classification = _Classification(
            is_gibberish=is_likely_gibberish(query),
            has_info=has_meaningful_info(parsed),
        )
        if classification.is_gibberish:
            classification.reasons.append("gibberish")
        if not classification.has_info:
            classification.reasons.append("no usable filters")
        return classification

    def _fallback_results(self) -> list[ProviderRecord]:
        try:
            rows = list(self.provider_service.get_fallback_providers(list(self.fallback.specialties)))
        except Exception:
            logger.exception("Error fetching fallback results")
            return []

        self.rng.shuffle(rows)
        return rows
