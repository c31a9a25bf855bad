from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.models.provider import Provider

logger = logging.getLogger(__name__)

# CMS export header (lower-cased) -> Provider attribute
CSV_COLUMNS = {
    "rndrng_npi": "npi",
    "rndrng_prvdr_first_name": "first_name",
    "rndrng_prvdr_last_org_name": "last_name",
    "rndrng_prvdr_type": "specialty",
    "rndrng_prvdr_city": "city",
    "rndrng_prvdr_state_abrvtn": "state",
    "rndrng_prvdr_zip5": "zip",
}


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _default_csv_path() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / "providers.csv"


def row_to_provider(row: dict[str, str]) -> Provider | None:
    values = {}
    for column, value in row.items():
        attr = CSV_COLUMNS.get((column or "").strip().lower())
        if attr:
            values[attr] = (value or "").strip() or None

    if not values.get("npi"):
        return None
    return Provider(**values)


def load_providers(csv_path: str | None = None, batch_size: int = 5000) -> int:
    """Bulk-load providers from a CMS CSV export; returns the inserted row count."""
    _configure_logging()

    path = Path(csv_path) if csv_path else _default_csv_path()
    if not path.exists():
        raise FileNotFoundError(f"Providers CSV file not found: {path}")

    db: Session = SessionLocal()
    try:
        # Idempotent: only load if table is empty.
        if db.query(Provider).first():
            logger.info("Providers already loaded")
            return 0

        logger.info("Starting providers load from %s", path.as_posix())

        inserted_total = 0
        seen: set[str] = set()
        batch: list[Provider] = []

        with open(path, encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                provider = row_to_provider(row)
                if provider is None or provider.npi in seen:
                    continue
                seen.add(provider.npi)
                batch.append(provider)

                if len(batch) >= batch_size:
                    try:
                        db.add_all(batch)
                        db.commit()
                        inserted_total += len(batch)
                        logger.info("Inserted %s provider rows", inserted_total)
                        batch.clear()
                    except SQLAlchemyError:
                        db.rollback()
                        logger.exception("Failed inserting providers batch")
                        return inserted_total

        if batch:
            try:
                db.add_all(batch)
                db.commit()
                inserted_total += len(batch)
            except SQLAlchemyError:
                db.rollback()
                logger.exception("Failed inserting final providers batch")
                return inserted_total

        logger.info("Providers loaded successfully. Inserted rows=%s", inserted_total)
        return inserted_total

    except Exception:
        db.rollback()
        logger.exception("Providers load failed")
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Load CMS provider records into the providers table")
    parser.add_argument(
        "--csv",
        default=None,
        help="Path to the CMS providers CSV (defaults to app/data/providers.csv)",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=5000,
        help="Batch size for bulk inserts",
    )
    args = parser.parse_args()

    load_providers(csv_path=args.csv, batch_size=args.batch_size)


if __name__ == "__main__":
    main()
