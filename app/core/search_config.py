"""Search configuration for Doctor Finder.

Centralizes result limits and the fallback specialty list used by the doctor
search pipeline.  All values are loaded from environment variables with
sensible defaults so the system works out-of-the-box.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _env_csv(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    values = tuple(part.strip() for part in raw.split(",") if part.strip())
    return values or default


# ---------------------------------------------------------------------------
# Search tuning
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SearchTuning:
    """Operational limits for the public search API and the provider queries."""

    # Used whenever the caller's limit is missing or unparseable.
    default_limit: int = field(
        default_factory=lambda: _env_int("SEARCH_DEFAULT_LIMIT", 12),
    )
    # Public cap on results returned to clients.
    max_limit: int = field(
        default_factory=lambda: _env_int("SEARCH_MAX_LIMIT", 100),
    )
    # Hard ceiling for any single provider query.
    provider_max_limit: int = field(
        default_factory=lambda: _env_int("PROVIDER_MAX_LIMIT", 500),
    )
    overfetch_multiplier: int = field(
        default_factory=lambda: _env_int("PROVIDER_OVERFETCH_MULTIPLIER", 3),
    )
    # Total rows returned by the fallback query, across all specialties.
    fallback_limit: int = field(
        default_factory=lambda: _env_int("FALLBACK_LIMIT", 6),
    )


# ---------------------------------------------------------------------------
# Fallback suggestions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FallbackConfig:
    """Popular specialties sampled when a query carries too little signal."""

    specialties: tuple[str, ...] = field(default_factory=lambda: _env_csv(
        "FALLBACK_SPECIALTIES",
        (
            "Cardiology",
            "Dermatology",
            "Pediatrics",
            "Orthopedic Surgery",
            "Ophthalmology",
        ),
    ))


# ---------------------------------------------------------------------------
# Singleton instances (importable)
# ---------------------------------------------------------------------------

search_tuning = SearchTuning()
fallback_config = FallbackConfig()
