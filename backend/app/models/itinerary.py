"""Itinerary models - the validated plan returned by the LLM.

JSON field names are camelCase (the wire contract requested from the model);
Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class Activity(BaseModel):
    """Single activity within a day's plan."""

    model_config = _WIRE_CONFIG

    name: str
    description: str
    opening_hours: str = Field(..., description="e.g. '09:00 - 17:00' or '24 Hours'")
    estimated_cost: str = Field(..., description="Display string, e.g. 'Free' or '¥2000'")
    # None is tolerated and treated as free when seeding costs
    price: float | None = Field(None, ge=0, description="Numeric cost in the requested currency")
    category: str
    image_prompt: str = Field(..., min_length=1, description="English photo search phrase")


class DayPlan(BaseModel):
    """Plan for a single day."""

    model_config = _WIRE_CONFIG

    day_number: int = Field(..., ge=1)
    theme: str
    activities: list[Activity] = Field(default_factory=list)


class ItineraryResponse(BaseModel):
    """Complete itinerary for one trip request."""

    model_config = _WIRE_CONFIG

    trip_title: str
    currency_code: str
    daily_plans: list[DayPlan]

    @property
    def total_price(self) -> float:
        """Sum of the model's own price estimates."""
        return sum(
            activity.price or 0 for day in self.daily_plans for activity in day.activities
        )
