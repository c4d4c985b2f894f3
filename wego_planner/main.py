from __future__ import annotations

from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from wego_planner import config
from wego_planner.agents.selector import DEFAULT_DISPLAY_COUNT, INITIAL_SEED, rotate
from wego_planner.agents.validator import validate_contact
from wego_planner.catalog import resolve_catalog
from wego_planner.formatting import format_inr, planner_defaults
from wego_planner.log import get_logger
from wego_planner.orchestrator import plan
from wego_planner.schemas import INTERESTS, Offer, PlanRequest, ValidationFailure

logger = get_logger(__name__)

app = FastAPI(title="WEGO Trip Planner API")

# Allow the browser front end to reach the API during local development;
# WEGO_ALLOWED_ORIGINS narrows this for deployed environments.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

CATALOG = resolve_catalog(config.catalog_path())


def _offer_payload(offer: Offer) -> Dict[str, Any]:
    data = offer.model_dump(mode="json")
    data["price_display"] = format_inr(offer.price)
    return data


@app.get("/api/offers")
def api_offers(
    seed: int = Query(INITIAL_SEED, ge=0),
    count: int = Query(DEFAULT_DISPLAY_COUNT, ge=0, le=50),
) -> Dict[str, Any]:
    """Rotated default offers shown before a plan is submitted."""
    offers = rotate(CATALOG, seed, count)
    return {"seed": seed, "offers": [_offer_payload(o) for o in offers]}


@app.post("/api/plan")
def api_plan(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Validate planner input and return the plan or the field errors."""
    try:
        request = PlanRequest.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc

    outcome = plan(request, CATALOG, request.rotation_seed)
    if isinstance(outcome, ValidationFailure):
        logger.info("Rejected plan submission for fields: %s", ", ".join(sorted(outcome.errors)))
        raise HTTPException(status_code=422, detail={"errors": outcome.errors})

    result = outcome.model_dump(mode="json")
    result["recommended_offers"] = [_offer_payload(o) for o in outcome.recommended_offers]
    return result


@app.get("/api/interests")
def api_interests() -> List[str]:
    return list(INTERESTS)


@app.get("/api/planner/defaults")
def api_planner_defaults() -> Dict[str, Any]:
    return planner_defaults()


@app.post("/api/contact", status_code=202)
def api_contact(payload: Dict[str, Any] = Body(...)) -> Dict[str, str]:
    outcome = validate_contact(payload)
    if isinstance(outcome, ValidationFailure):
        raise HTTPException(status_code=422, detail={"errors": outcome.errors})
    # Nothing is forwarded yet; the message is acknowledged only.
    logger.info("Contact message received (%d chars)", len(outcome.message))
    return {"status": "received"}
