from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.provider import Provider


@dataclass
class ProviderRecord:
    npi: str
    first_name: Optional[str]
    last_name: Optional[str]
    specialty: Optional[str]
    city: Optional[str]
    state: Optional[str]
    zip: Optional[str]


@dataclass(frozen=True)
class ProviderFilters:
    specialty: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None


def _is_filled(value: object) -> bool:
    return isinstance(value, str) and value != ""


class ProviderRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    @staticmethod
    def _base_select():
        return select(
            Provider.npi,
            Provider.first_name,
            Provider.last_name,
            Provider.specialty,
            Provider.city,
            Provider.state,
            Provider.zip,
        ).distinct()

    @staticmethod
    def _to_records(rows) -> list[ProviderRecord]:
        return [
            ProviderRecord(
                npi=r.npi,
                first_name=r.first_name,
                last_name=r.last_name,
                specialty=r.specialty,
                city=r.city,
                state=r.state,
                zip=r.zip,
            )
            for r in rows
        ]

    def find_by_filters(self, filters: ProviderFilters, *, limit: int) -> list[ProviderRecord]:
        """Conjunctive filter search; filters that are not non-empty strings are skipped."""
        conditions = []
        if _is_filled(filters.specialty):
            conditions.append(Provider.specialty == filters.specialty)
        if _is_filled(filters.city):
            conditions.append(func.lower(Provider.city).like(f"%{filters.city.lower()}%"))
        if _is_filled(filters.state):
            conditions.append(Provider.state == filters.state)

        stmt = self._base_select()
        if conditions:
            stmt = stmt.where(*conditions)
        stmt = stmt.order_by(Provider.specialty.asc(), Provider.city.asc()).limit(limit)

        rows = self.db.execute(stmt).all()
        return self._to_records(rows)

    def find_by_specialties(self, specialties: Sequence[str], *, limit: int) -> list[ProviderRecord]:
        if not specialties:
            return []

        stmt = (
            self._base_select()
            .where(Provider.specialty.in_(list(specialties)))
            .order_by(Provider.npi.asc())
            .limit(limit)
        )

        rows = self.db.execute(stmt).all()
        return self._to_records(rows)

    def count(self) -> int:
        return int(self.db.execute(select(func.count()).select_from(Provider)).scalar_one() or 0)
