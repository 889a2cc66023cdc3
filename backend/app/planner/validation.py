"""Deserialize-and-validate step for raw LLM output."""

import json
import logging
from typing import Any

from pydantic import ValidationError

from backend.app.llm.errors import GatewayError, GatewayErrorKind
from backend.app.models.itinerary import ItineraryResponse
from backend.app.models.trip import TripInput

logger = logging.getLogger(__name__)


def parse_itinerary(raw_text: str | None, trip: TripInput | None = None) -> ItineraryResponse:
    """Turn the model's raw text into a validated ItineraryResponse.

    Days are never reordered and prices are never clamped. A currency code
    that does not echo the requested one, or day numbers that do not match
    their positions, are logged and accepted.

    Args:
        raw_text: Response body from the provider
        trip: Trip the itinerary was requested for (enables echo checks)

    Returns:
        Validated ItineraryResponse

    Raises:
        GatewayError: EMPTY_RESPONSE, INVALID_JSON or SCHEMA_VIOLATION
    """
    if raw_text is None or not raw_text.strip():
        raise GatewayError(GatewayErrorKind.EMPTY_RESPONSE, "no response received from model")

    try:
        payload: Any = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise GatewayError(GatewayErrorKind.INVALID_JSON, str(e)) from e

    try:
        itinerary = ItineraryResponse.model_validate(payload)
    except ValidationError as e:
        raise GatewayError(
            GatewayErrorKind.SCHEMA_VIOLATION, f"{e.error_count()} validation error(s): {e}"
        ) from e

    if trip is not None:
        _warn_on_drift(itinerary, trip)

    return itinerary


def _warn_on_drift(itinerary: ItineraryResponse, trip: TripInput) -> None:
    requested = trip.currency.value
    if itinerary.currency_code.upper() != requested:
        logger.warning(
            f"Model returned currency {itinerary.currency_code!r}, requested {requested!r}"
        )

    if len(itinerary.daily_plans) != trip.duration:
        logger.warning(
            f"Model returned {len(itinerary.daily_plans)} day(s), requested {trip.duration}"
        )

    for position, day in enumerate(itinerary.daily_plans, start=1):
        if day.day_number != position:
            logger.warning(f"Day at position {position} reports dayNumber={day.day_number}")
