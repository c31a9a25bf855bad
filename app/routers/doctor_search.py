"""Doctor search router.

POST /api/search accepts ``{"query": str, "limit": int?}`` and answers with the
matching providers plus the filters extracted from the query.  Errors use an
``{"error": ...}`` body so the web client can show the message as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.repositories.provider_repository import ProviderRepository
from app.schemas.doctor_search import DoctorSearchRequest, ProviderOut
from app.services.provider_service import InvalidArgumentError, ProviderService
from app.services.search_service import DoctorSearchService, SearchOutcome

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["doctor-search"])


def get_doctor_search_service(db: Session = Depends(get_db)) -> DoctorSearchService:
    return DoctorSearchService(ProviderService(ProviderRepository(db)))


def _serialize(outcome: SearchOutcome) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "results": [ProviderOut.model_validate(r).model_dump() for r in outcome.results],
        "parsed": outcome.parsed.to_dict(),
    }
    if outcome.message is not None:
        body["message"] = outcome.message
    if outcome.is_fallback is not None:
        body["isFallback"] = outcome.is_fallback
    return body


@router.post("/search", response_model=None)
def search_doctors(
    payload: Optional[DoctorSearchRequest] = None,
    service: DoctorSearchService = Depends(get_doctor_search_service),
) -> Dict[str, Any] | JSONResponse:
    payload = payload or DoctorSearchRequest()
    try:
        outcome = service.search(payload.query, payload.limit)
    except InvalidArgumentError as exc:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})
    except Exception as exc:
        logger.exception("Search error")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})

    return _serialize(outcome)
