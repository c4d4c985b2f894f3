"""Offer matching against validated trip criteria."""
from __future__ import annotations

from typing import Callable, Iterable, List

from wego_planner.log import get_logger
from wego_planner.schemas import Criteria, Offer

logger = get_logger(__name__)

BUDGET_HEADROOM = 1.15
HOME_MARKET = "india"

DomesticPredicate = Callable[[Offer], bool]


def market_predicate(token: str) -> DomesticPredicate:
    """Classify offers as domestic when their destination mentions ``token``."""
    needle = token.strip().lower()

    def _is_domestic(offer: Offer) -> bool:
        return needle in offer.destination.lower()

    return _is_domestic


is_domestic_offer: DomesticPredicate = market_predicate(HOME_MARKET)


def match(
    criteria: Criteria,
    catalog: Iterable[Offer],
    is_domestic: DomesticPredicate = is_domestic_offer,
) -> List[Offer]:
    """Return the catalog offers compatible with ``criteria`` in catalog order.

    An offer qualifies when it fits the budget plus a fixed 15% headroom, sits
    on the requested side of the domestic/international split and shares at
    least one tag with the selected interests. No ranking happens here.
    """
    ceiling = criteria.budget * BUDGET_HEADROOM
    wants_domestic = criteria.trip_type == "Domestic"
    interests = set(criteria.interests)

    matched: List[Offer] = []
    for offer in catalog:
        if offer.price > ceiling:
            continue
        if is_domestic(offer) != wants_domestic:
            continue
        if interests.isdisjoint(offer.tags):
            continue
        matched.append(offer)

    logger.debug(
        "Matched %d offer(s) for %s trip under %.2f", len(matched), criteria.trip_type, ceiling
    )
    return matched
