"""Offer catalog: built-in sample quotes and JSON catalog loading."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from wego_planner.log import get_logger
from wego_planner.schemas import Offer

logger = get_logger(__name__)

_OFFER_LIST = TypeAdapter(List[Offer])


class CatalogError(RuntimeError):
    """Raised when an offer catalog cannot be read or fails validation."""


DEFAULT_CATALOG: Tuple[Offer, ...] = (
    Offer(id="q1", destination="Goa, India", price=27999, nights=4, rating=4.7,
          tags=("Beaches", "Food", "Adventure")),
    Offer(id="q2", destination="Jaipur, India", price=18999, nights=3, rating=4.5,
          tags=("Culture", "City", "Food")),
    Offer(id="q3", destination="Bali, Indonesia", price=74999, nights=6, rating=4.8,
          tags=("Beaches", "Adventure", "Culture")),
    Offer(id="q4", destination="Dubai, UAE", price=89999, nights=5, rating=4.6,
          tags=("City", "Food", "Adventure")),
    Offer(id="q5", destination="Manali, India", price=22999, nights=4, rating=4.4,
          tags=("Mountains", "Adventure", "Culture")),
    Offer(id="q6", destination="Paris, France", price=159999, nights=6, rating=4.9,
          tags=("City", "Culture", "Food")),
)


def parse_catalog(records: object) -> Tuple[Offer, ...]:
    """Validate a decoded list of offer records."""
    try:
        offers = _OFFER_LIST.validate_python(records)
    except ValidationError as exc:
        raise CatalogError(f"Invalid offer catalog: {exc.error_count()} error(s)") from exc

    seen = set()
    for offer in offers:
        if offer.id in seen:
            raise CatalogError(f"Duplicate offer id in catalog: {offer.id}")
        seen.add(offer.id)
    return tuple(offers)


def load_catalog(path: str | Path) -> Tuple[Offer, ...]:
    """Read a JSON array of offers from ``path``."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Unable to read offer catalog at {path}: {exc}") from exc

    offers = parse_catalog(raw)
    logger.info("Loaded %d offer(s) from %s", len(offers), path)
    return offers


def resolve_catalog(path: Optional[str]) -> Tuple[Offer, ...]:
    if not path:
        return DEFAULT_CATALOG
    return load_catalog(path)
