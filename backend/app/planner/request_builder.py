"""Itinerary request builder - prompt and output schema for the LLM call.

Pure transformation: the same TripInput always yields the same request.
"""

from dataclasses import dataclass
from typing import Any

from backend.app.config import get_settings
from backend.app.models.trip import TripInput

SCHEMA_NAME = "itinerary_response"

ACTIVITY_REQUIRED_FIELDS = [
    "name",
    "description",
    "openingHours",
    "estimatedCost",
    "price",
    "category",
    "imagePrompt",
]
DAY_REQUIRED_FIELDS = ["dayNumber", "theme", "activities"]
ITINERARY_REQUIRED_FIELDS = ["tripTitle", "currencyCode", "dailyPlans"]

ACTIVITY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "openingHours": {
            "type": "string",
            "description": "Opening and closing time (e.g. 09:00 - 17:00)",
        },
        "estimatedCost": {
            "type": "string",
            "description": "Cost estimate string for display (e.g. '¥2000' or 'Free').",
        },
        "price": {
            "type": "number",
            "description": "Numeric value of the cost in the requested currency. Use 0 if Free.",
        },
        "category": {
            "type": "string",
            "description": "Category like Food, History, Nature, Shopping.",
        },
        "imagePrompt": {
            "type": "string",
            "description": (
                "A short, descriptive English search term to find a photo of this place "
                "(e.g., 'Eiffel Tower Paris sunny' or 'Sushi platter')."
            ),
        },
    },
    "required": ACTIVITY_REQUIRED_FIELDS,
    "additionalProperties": False,
}

DAY_PLAN_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "dayNumber": {"type": "integer"},
        "theme": {"type": "string", "description": "Main theme or focus of the day."},
        "activities": {"type": "array", "items": ACTIVITY_SCHEMA},
    },
    "required": DAY_REQUIRED_FIELDS,
    "additionalProperties": False,
}

ITINERARY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "tripTitle": {"type": "string", "description": "A catchy title for the trip."},
        "currencyCode": {
            "type": "string",
            "description": "The currency code requested by the user (e.g., JPY, USD, IDR).",
        },
        "dailyPlans": {"type": "array", "items": DAY_PLAN_SCHEMA},
    },
    "required": ITINERARY_REQUIRED_FIELDS,
    "additionalProperties": False,
}


@dataclass(frozen=True)
class ItineraryRequest:
    """Provider-agnostic payload for one itinerary generation call."""

    trip: TripInput
    prompt: str
    response_schema: dict[str, Any]
    temperature: float
    schema_name: str = SCHEMA_NAME


def format_budget(amount: float) -> str:
    """Render a budget without a trailing '.0' for whole amounts."""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


def build_prompt(trip: TripInput) -> str:
    """Build the natural-language instruction for the trip."""
    currency = trip.currency.value
    budget = format_budget(trip.budget)

    return f"""Create a detailed travel itinerary for {trip.destination}.
The trip lasts {trip.duration} days.
Main interests: {trip.interests}.

USER BUDGET: {budget} {currency} for the entire trip.

IMPORTANT INSTRUCTIONS:
1. Tailor the recommended activities, local transport and places to eat so that the
   TOTAL estimated cost is close to or below the user's budget.
2. VERY IMPORTANT: Use the currency '{currency}' for every price estimate (price and
   estimatedCost). Do not use the destination's local currency if it differs from
   '{currency}'. (Example: if the user picks IDR for a trip to Japan, prices are in IDR.)
3. If an activity is free, set price to 0.
4. For 'imagePrompt', give specific English keywords that visualize the place.

Return valid JSON that follows the requested schema.
Make sure that:
1. The 'price' field is a bare number in {currency}.
2. Opening and closing hours are accurate or a reasonable estimate.
3. Place names are specific.
4. Descriptions are short but engaging.
5. There are exactly {trip.duration} entries in dailyPlans, numbered from dayNumber 1."""


def build_itinerary_request(trip: TripInput, temperature: float | None = None) -> ItineraryRequest:
    """Compose the prompt and strict output schema for a trip.

    Args:
        trip: Validated trip input
        temperature: Decoding temperature override (default from settings)

    Returns:
        ItineraryRequest ready for any ItineraryGateway
    """
    if temperature is None:
        temperature = get_settings().llm_temperature

    return ItineraryRequest(
        trip=trip,
        prompt=build_prompt(trip),
        response_schema=ITINERARY_SCHEMA,
        temperature=temperature,
    )
