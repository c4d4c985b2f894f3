from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Literal, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

TripType = Literal["Domestic", "International"]
InterestLabel = Literal["Beaches", "Mountains", "City", "Culture", "Food", "Adventure"]

TRIP_TYPES: Tuple[str, ...] = ("Domestic", "International")
INTERESTS: Tuple[str, ...] = ("Beaches", "Mountains", "City", "Culture", "Food", "Adventure")


# ------- Catalog models -------
class Offer(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = Field(..., min_length=1)
    destination: str
    price: float = Field(..., ge=0)
    nights: int = Field(..., gt=0)
    rating: float = Field(..., ge=0, le=5)
    tags: Tuple[str, ...] = Field(..., min_length=1)

    @field_validator("tags", mode="before")
    @classmethod
    def _dedupe_tags(cls, value: Any) -> Any:
        # tags are a set; keep first-seen order so dumps stay stable
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(dict.fromkeys(value))
        return value


# ------- Request models -------
class PlannerForm(BaseModel):
    """Raw planner input exactly as the form submits it.

    Values stay untyped; numbers often arrive as text and the validator owns
    coercion.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    destination: Any = None
    trip_type: Any = Field(None, validation_alias=AliasChoices("trip_type", "tripType"))
    nights: Any = None
    budget: Any = None
    travelers: Any = None
    start_date: Any = Field(None, validation_alias=AliasChoices("start_date", "startDate"))
    end_date: Any = Field(None, validation_alias=AliasChoices("end_date", "endDate"))
    interests: Any = None


class PlanRequest(PlannerForm):
    rotation_seed: int = Field(1, validation_alias=AliasChoices("rotation_seed", "rotationSeed"))


class Criteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: str = Field(..., min_length=1, max_length=60)
    trip_type: TripType
    nights: int = Field(..., ge=1, le=60)
    budget: float = Field(..., ge=1000)
    travelers: int = Field(..., ge=1, le=12)
    start_date: date
    end_date: date
    interests: Tuple[InterestLabel, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_date_order(self) -> "Criteria":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ContactForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
    message: Any = None


class ContactMessage(BaseModel):
    name: str
    email: str
    message: str


# ------- Response models -------
class ValidationFailure(BaseModel):
    errors: Dict[str, str] = Field(default_factory=dict)


class PlanResult(BaseModel):
    summary: str
    tips: List[str] = Field(default_factory=list)
    recommended_offers: List[Offer] = Field(default_factory=list)
