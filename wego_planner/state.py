"""Planner lifecycle as immutable state values and pure transitions.

The presentation layer owns the planner screen state; these helpers keep its
transitions in one place: a rejected submission shows fresh errors but keeps
the last successful plan on screen, and rotating the default offers only
advances the seed. Callers that show a working indicator call ``begin`` and
later ``finish``; ``submit`` does both in one step.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from wego_planner.agents.matcher import DomesticPredicate, is_domestic_offer
from wego_planner.agents.selector import INITIAL_SEED, rotate
from wego_planner.orchestrator import plan
from wego_planner.schemas import Offer, PlanResult, ValidationFailure


class PlanStatus(str, Enum):
    IDLE = "idle"
    PLANNING = "planning"
    READY = "ready"


class PlannerState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: PlanStatus = PlanStatus.IDLE
    rotation_seed: int = INITIAL_SEED
    default_offers: List[Offer] = Field(default_factory=list)
    errors: Dict[str, str] = Field(default_factory=dict)
    result: Optional[PlanResult] = None

    @classmethod
    def initial(cls, catalog: Sequence[Offer]) -> "PlannerState":
        return cls(rotation_seed=INITIAL_SEED, default_offers=rotate(catalog, INITIAL_SEED))


def begin(state: PlannerState) -> PlannerState:
    """Mark a plan as in flight; a second call while one is running is a no-op."""
    if state.status == PlanStatus.PLANNING:
        return state
    return state.model_copy(update={"status": PlanStatus.PLANNING})


def finish(
    state: PlannerState,
    raw_input: Any,
    catalog: Sequence[Offer],
    is_domestic: DomesticPredicate = is_domestic_offer,
) -> PlannerState:
    """Run the plan for an in-flight state and settle on Idle or Ready."""
    outcome = plan(
        raw_input,
        catalog,
        state.rotation_seed,
        is_domestic=is_domestic,
        default_offers=state.default_offers,
    )
    if isinstance(outcome, ValidationFailure):
        return state.model_copy(update={"status": PlanStatus.IDLE, "errors": dict(outcome.errors)})
    return state.model_copy(update={"status": PlanStatus.READY, "errors": {}, "result": outcome})


def submit(
    state: PlannerState,
    raw_input: Any,
    catalog: Sequence[Offer],
    is_domestic: DomesticPredicate = is_domestic_offer,
) -> PlannerState:
    # one plan in flight at a time
    if state.status == PlanStatus.PLANNING:
        return state
    return finish(begin(state), raw_input, catalog, is_domestic=is_domestic)


def rotate_offers(state: PlannerState, catalog: Sequence[Offer]) -> PlannerState:
    seed = state.rotation_seed + 1
    return state.model_copy(update={"rotation_seed": seed, "default_offers": rotate(catalog, seed)})

