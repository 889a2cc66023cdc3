"""Itinerary endpoints - POST /itinerary, GET /currencies."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status

from backend.app.llm.client import (
    ItineraryGateway,
    ItinerarySuccess,
    generate_itinerary,
    get_llm_client,
)
from backend.app.llm.errors import FALLBACK_ERROR_MESSAGE
from backend.app.models.itinerary import ItineraryResponse
from backend.app.models.trip import DEFAULT_CURRENCY, Currency, TripInput, get_slider_config

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/currencies")
async def list_currencies() -> dict[str, Any]:
    """List supported currencies with their budget slider ranges."""
    return {
        "default": DEFAULT_CURRENCY.value,
        "currencies": [
            {"code": currency.value, **get_slider_config(currency).model_dump()}
            for currency in Currency
        ],
    }


@router.post("/itinerary", response_model=ItineraryResponse, status_code=status.HTTP_200_OK)
async def create_itinerary(
    trip: TripInput,
    gateway: Annotated[ItineraryGateway, Depends(get_llm_client)],
) -> ItineraryResponse:
    """Generate an itinerary for a trip.

    Performs exactly one LLM call. Failures are logged with detail and
    reported to the client with the fixed fallback message.

    Args:
        trip: Trip input (destination, duration, interests, budget, currency)
        gateway: LLM gateway (OpenAI or deterministic stub)

    Returns:
        ItineraryResponse (camelCase JSON)

    Raises:
        HTTPException: 502 if generation fails
    """
    logger.info(
        f"[POST /itinerary] destination={trip.destination}, duration={trip.duration}, "
        f"currency={trip.currency.value}"
    )

    result = await generate_itinerary(trip, gateway)

    if isinstance(result, ItinerarySuccess):
        return result.itinerary

    logger.error(f"[POST /itinerary] failed: {result.kind.value} {result.detail}")
    raise HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={"message": FALLBACK_ERROR_MESSAGE, "kind": result.kind.value},
    )
