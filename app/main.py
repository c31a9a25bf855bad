"""Doctor Finder FastAPI application.

A natural-language doctor lookup: free-text requests such as
"cardiologist in Chicago who does ultrasounds" are turned into structured
filters (specialty, city, state) and matched against the providers table.
Queries that carry too little signal are answered with suggestions from
popular specialties instead.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.routers import doctor_search, health


def _configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title="Doctor Finder",
        version="0.1.0",
        description="Natural-language doctor search over the providers table.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(doctor_search.router)

    return app


app = create_app()
