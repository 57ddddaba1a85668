from __future__ import annotations

from datetime import date
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidDateRangeError

ItemCategory = Literal["transport", "sightseeing", "food", "accommodation", "activity"]


def _clean_tags(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(tag).strip() for tag in value if str(tag).strip()]
    return value


class TravelPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: str = Field(min_length=1)
    startDate: date
    endDate: date
    memberCount: int = Field(default=1, ge=1)
    budget: float = Field(default=0, ge=0)
    interests: List[str] = Field(default_factory=list)
    travelStyle: str = "balanced"
    description: str = ""

    @field_validator("destination")
    @classmethod
    def ensure_destination(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("destination must not be blank")
        return value.strip()

    @field_validator("interests", mode="before")
    @classmethod
    def clean_interests(cls, value: Any) -> Any:
        return _clean_tags(value)

    @field_validator("description", "travelStyle", mode="before")
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_validator(mode="after")
    def check_date_range(self) -> TravelPreferences:
        if self.endDate < self.startDate:
            raise InvalidDateRangeError(
                f"endDate {self.endDate.isoformat()} is before startDate {self.startDate.isoformat()}"
            )
        return self


class RecommendationPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: str = Field(min_length=1)
    region: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    budget: str = ""
    travelStyle: str = ""
    groupSize: int = Field(default=1, ge=1)
    duration: int = Field(default=1, ge=1)
    customNote: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def unwrap_preferences(cls, data: Any) -> Any:
        # older clients post {"preferences": {...}}
        if isinstance(data, dict) and "destination" not in data and isinstance(data.get("preferences"), dict):
            return data["preferences"]
        return data

    @field_validator("destination")
    @classmethod
    def ensure_destination(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("destination must not be blank")
        return value.strip()

    @field_validator("region", "customNote")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("budget", mode="before")
    @classmethod
    def stringify_budget(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("interests", mode="before")
    @classmethod
    def clean_interests(cls, value: Any) -> Any:
        return _clean_tags(value)


class ScheduleItem(BaseModel):
    time: str
    title: str
    location: str = ""
    description: str = ""
    category: ItemCategory


class ScheduleDay(BaseModel):
    date: str
    day: str
    items: List[ScheduleItem]


class Place(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    category: str = ""
    rating: Optional[float] = None
    description: str = ""


class BudgetBreakdown(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    transportation: float = Field(ge=0)
    accommodation: float = Field(ge=0)
    food: float = Field(ge=0)
    activities: float = Field(ge=0)

    def total(self) -> float:
        return self.transportation + self.accommodation + self.food + self.activities


class PlanRecommendations(BaseModel):
    mustVisit: List[str] = Field(default_factory=list)
    localFood: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)


class GeneratedPlan(BaseModel):
    """Schedule, places, budget and tips produced for a single trip."""

    schedule: List[ScheduleDay]
    places: List[Place]
    budget: BudgetBreakdown
    recommendations: PlanRecommendations


class AIRecommendation(BaseModel):
    # keys the model adds beyond these fields are passed through to the client
    model_config = ConfigDict(allow_inf_nan=False, extra="allow")

    name: str = ""
    category: str = ""
    rating: Optional[float] = None
    image: str = ""
    description: str = ""
    aiReason: str = ""
    matchScore: int = 0
    estimatedTime: str = ""
    priceRange: str = ""
    tags: List[str] = Field(default_factory=list)
    isBookmarked: bool = False

    @field_validator(
        "name", "category", "image", "description", "aiReason", "estimatedTime", "priceRange", mode="before"
    )
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("matchScore", mode="before")
    @classmethod
    def clamp_match_score(cls, value: Any) -> Any:
        if value is None:
            return 0
        try:
            score = round(float(value))
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"matchScore must be a number, got {value!r}") from exc
        return min(max(score, 0), 100)

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, value: Any) -> Any:
        return _clean_tags(value)


class PlanResponse(BaseModel):
    success: bool
    plan: GeneratedPlan
    message: Optional[str] = None
    error: Optional[str] = None


class RecommendationResponse(BaseModel):
    success: bool
    recommendations: List[AIRecommendation] = Field(default_factory=list)
    message: Optional[str] = None
    error: Optional[str] = None


class RosterImageRequest(BaseModel):
    image: str = Field(min_length=1, description="Base64 encoded image, optionally as a data URL")


class RosterNamesResponse(BaseModel):
    names: List[str] = Field(default_factory=list)
