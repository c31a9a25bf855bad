from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class DoctorSearchRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Left untyped so a missing, blank or non-string query is answered with the
    # API's own 400 payload instead of a validation error.
    query: Any = Field(default=None, description="Free-text doctor request")
    limit: Any = Field(default=None, description="Maximum number of results (1-100, default 12)")


class ProviderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    npi: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    specialty: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
