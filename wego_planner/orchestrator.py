# wego_planner/orchestrator.py
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from wego_planner.agents.matcher import DomesticPredicate, is_domestic_offer, match
from wego_planner.agents.selector import rotate, select
from wego_planner.agents.validator import validate
from wego_planner.log import get_logger
from wego_planner.schemas import Criteria, Offer, PlanResult, ValidationFailure

logger = get_logger(__name__)

RECOMMENDATION_COUNT = 3
# Post-plan picks use a seed offset so they visibly differ from the rotated list.
RECOMMENDATION_SEED_OFFSET = 10


def plan(
    raw_input: Any,
    catalog: Sequence[Offer],
    rotation_seed: int,
    *,
    is_domestic: DomesticPredicate = is_domestic_offer,
    default_offers: Optional[Sequence[Offer]] = None,
) -> PlanResult | ValidationFailure:
    """Validate planner input and compose a plan with recommended offers.

    Returns the ``ValidationFailure`` untouched when any field is rejected; no
    partial plan is ever built. When no offer matches, the currently displayed
    default list is recommended instead so the panel is never empty.
    ``default_offers`` is that list when the caller already holds it; otherwise
    it is re-derived from ``rotation_seed``.
    """
    outcome = validate(raw_input)
    if isinstance(outcome, ValidationFailure):
        logger.info("Plan rejected: %d invalid field(s)", len(outcome.errors))
        return outcome

    criteria = outcome
    snapshot = tuple(catalog)
    matched = match(criteria, snapshot, is_domestic=is_domestic)

    if matched:
        recommended = select(matched, RECOMMENDATION_COUNT, rotation_seed + RECOMMENDATION_SEED_OFFSET)
    else:
        if default_offers is not None:
            recommended = list(default_offers)[:RECOMMENDATION_COUNT]
        else:
            recommended = rotate(snapshot, rotation_seed)
        logger.info("No offers matched %s; falling back to %d displayed offer(s)", criteria.destination, len(recommended))

    logger.info(
        "Planning %s trip to %s for %d traveller(s), %d night(s), budget %.2f (%d of %d offer(s) matched)",
        criteria.trip_type,
        criteria.destination,
        criteria.travelers,
        criteria.nights,
        criteria.budget,
        len(matched),
        len(snapshot),
    )

    return PlanResult(
        summary=_summary(criteria),
        tips=_tips(criteria),
        recommended_offers=recommended,
    )


def _summary(criteria: Criteria) -> str:
    return f"Plan ready for {criteria.destination} • {criteria.nights} night(s) • {criteria.trip_type}"


def _tips(criteria: Criteria) -> List[str]:
    return [
        f"Use interests ({', '.join(criteria.interests)}) to refine experiences.",
        "Try shifting dates for better prices and availability.",
        "Save your quote and book later when you're ready.",
    ]
