"""SQLAlchemy model for the providers table.

The table is populated externally from the CMS "Medicare Physician & Other
Practitioners - by Provider" dataset, so the physical column names follow that
dataset while the mapped attributes use the names exposed by the API.
Doctor Finder never writes to this table at request time.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Provider(Base):
    __tablename__ = "providers"

    npi: Mapped[str] = mapped_column("rndrng_npi", String(10), primary_key=True)
    first_name: Mapped[str | None] = mapped_column("rndrng_prvdr_first_name", String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column("rndrng_prvdr_last_org_name", String(200), nullable=True)
    specialty: Mapped[str | None] = mapped_column("rndrng_prvdr_type", String(100), nullable=True, index=True)
    city: Mapped[str | None] = mapped_column("rndrng_prvdr_city", String(100), nullable=True, index=True)
    state: Mapped[str | None] = mapped_column("rndrng_prvdr_state_abrvtn", String(2), nullable=True, index=True)
    zip: Mapped[str | None] = mapped_column("rndrng_prvdr_zip5", String(5), nullable=True)
