"""Career catalog loading.

The catalog is a JSON array of career records. It is read and validated once
per process and shared read-only by every request.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from config import settings
from models.schemas.career_record import CareerRecord

logger = logging.getLogger(__name__)

_catalog: tuple[CareerRecord, ...] | None = None


class CatalogError(ValueError):
    """The catalog file is missing or holds invalid career records."""


def load_catalog(path: Path) -> tuple[CareerRecord, ...]:
    """Read and validate a catalog file, preserving its record order."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        logger.error("Career catalog not found: %s", path)
        raise CatalogError(f"Career catalog not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error("Career catalog %s is not valid JSON: %s", path, e)
        raise CatalogError(f"Career catalog {path} is not valid JSON") from e

    if not isinstance(raw, list):
        raise CatalogError(f"Career catalog {path} must be a JSON array")

    records: list[CareerRecord] = []
    seen_ids: set[str] = set()
    for i, entry in enumerate(raw):
        try:
            record = CareerRecord.model_validate(entry)
        except ValidationError as e:
            logger.error("Invalid career record #%d in %s: %s", i, path, e)
            raise CatalogError(f"Invalid career record #{i} in {path}") from e
        if record.id in seen_ids:
            raise CatalogError(f"Duplicate career id {record.id!r} in {path}")
        seen_ids.add(record.id)
        records.append(record)

    logger.info("Loaded %d careers from %s", len(records), path)
    return tuple(records)


def get_catalog() -> tuple[CareerRecord, ...]:
    """Return the process-wide catalog, loading it on first use."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(settings.catalog_path)
    return _catalog


def clear() -> None:
    """Drop the cached catalog. Useful for testing."""
    global _catalog
    _catalog = None
