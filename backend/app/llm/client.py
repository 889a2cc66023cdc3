"""LLM gateway for itinerary generation with OpenAI integration.

Security: Reads API key from environment only, never hardcoded.
Without a key every generation fails with a provider error unless the
deterministic stub is explicitly enabled.
"""

import logging
import time
from dataclasses import dataclass
from typing import Protocol

import openai
from openai import AsyncOpenAI

from backend.app.config import get_settings
from backend.app.llm.errors import GatewayError, GatewayErrorKind
from backend.app.models.itinerary import Activity, DayPlan, ItineraryResponse
from backend.app.models.trip import TripInput
from backend.app.planner.request_builder import ItineraryRequest, build_itinerary_request
from backend.app.planner.validation import parse_itinerary
from backend.app.utils.logging import generation_logger

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a meticulous travel planner. You answer only with JSON that matches "
    "the provided schema, and every monetary value uses the currency the user asked for."
)


class ItineraryGateway(Protocol):
    """Protocol for itinerary generation backends."""

    source: str

    async def generate(self, request: ItineraryRequest) -> ItineraryResponse:
        """Perform exactly one generation call.

        Args:
            request: Prompt, output schema and temperature

        Returns:
            Validated itinerary

        Raises:
            GatewayError: On any failure; no retries are attempted
        """
        ...


class UnconfiguredClient:
    """Gateway used when no API key is configured. Every call fails."""

    source = "unconfigured"

    async def generate(self, request: ItineraryRequest) -> ItineraryResponse:
        raise GatewayError(GatewayErrorKind.PROVIDER, "no API key configured")


class DeterministicStubClient:
    """Deterministic placeholder client for tests and explicit local development."""

    source = "stub"

    async def generate(self, request: ItineraryRequest) -> ItineraryResponse:
        """Generate a placeholder itinerary sized to the trip."""
        trip = request.trip
        currency = trip.currency.value
        # Spend roughly 80% of the budget, split evenly across days
        daily_price = int(trip.budget * 0.8 / trip.duration)

        days = [
            DayPlan(
                day_number=day,
                theme=f"Exploring {trip.destination} - day {day}",
                activities=[
                    Activity(
                        name=f"{trip.destination} old town walk",
                        description=f"A self-guided walk focused on {trip.interests}.",
                        opening_hours="24 Hours",
                        estimated_cost="Free",
                        price=0,
                        category="Sightseeing",
                        image_prompt=f"{trip.destination} old town street",
                    ),
                    Activity(
                        name=f"{trip.destination} local highlight {day}",
                        description="Placeholder activity generated without an LLM.",
                        opening_hours="09:00 - 17:00",
                        estimated_cost=f"{daily_price:,} {currency}",
                        price=daily_price,
                        category="Culture",
                        image_prompt=f"{trip.destination} landmark",
                    ),
                ],
            )
            for day in range(1, trip.duration + 1)
        ]

        return ItineraryResponse(
            trip_title=f"{trip.duration} Days in {trip.destination}",
            currency_code=currency,
            daily_plans=days,
        )


class OpenAIItineraryClient:
    """OpenAI-backed itinerary gateway using strict structured output."""

    source = "openai"

    def __init__(self, api_key: str, model: str = "gpt-4o-mini"):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key (read from environment)
            model: Model name to use (default: gpt-4o-mini for cost efficiency)
        """
        # Single attempt per submission: SDK retries disabled
        self.client = AsyncOpenAI(api_key=api_key, max_retries=0)
        self.model = model

    async def generate(self, request: ItineraryRequest) -> ItineraryResponse:
        """Generate an itinerary using the OpenAI API."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": request.prompt},
                ],
                temperature=request.temperature,
                response_format=self._build_response_format(request),
            )
        except openai.APIConnectionError as e:
            raise GatewayError(GatewayErrorKind.NETWORK, str(e)) from e
        except openai.APIStatusError as e:
            raise GatewayError(GatewayErrorKind.PROVIDER, f"HTTP {e.status_code}: {e.message}") from e
        except openai.OpenAIError as e:
            raise GatewayError(GatewayErrorKind.PROVIDER, str(e)) from e

        if not response.choices:
            raise GatewayError(GatewayErrorKind.EMPTY_RESPONSE, "response has no choices")

        message = response.choices[0].message
        if getattr(message, "refusal", None):
            raise GatewayError(GatewayErrorKind.PROVIDER, f"model refused: {message.refusal}")

        return parse_itinerary(message.content, request.trip)

    def _build_response_format(self, request: ItineraryRequest) -> dict[str, object]:
        """Wrap the output schema in OpenAI's strict json_schema format."""
        return {
            "type": "json_schema",
            "json_schema": {
                "name": request.schema_name,
                "schema": request.response_schema,
                "strict": True,
            },
        }


def get_llm_client() -> ItineraryGateway:
    """Factory function to get appropriate gateway based on config.

    Returns:
        OpenAIItineraryClient if API key is configured, DeterministicStubClient
        if use_stub_llm is set, UnconfiguredClient otherwise
    """
    settings = get_settings()
    api_key = settings.openai_api_key

    if api_key and api_key.get_secret_value():
        logger.info("Using OpenAI client for itinerary generation")
        return OpenAIItineraryClient(
            api_key=api_key.get_secret_value(),
            model=settings.openai_model,
        )
    elif settings.use_stub_llm:
        logger.warning("USE_STUB_LLM is set, serving placeholder itineraries")
        return DeterministicStubClient()
    else:
        logger.error("No OpenAI API key configured, itinerary generation will fail")
        return UnconfiguredClient()


@dataclass(frozen=True)
class ItinerarySuccess:
    """Generation succeeded."""

    itinerary: ItineraryResponse


@dataclass(frozen=True)
class ItineraryFailure:
    """Generation failed. Detail is diagnostic only."""

    kind: GatewayErrorKind
    detail: str = ""


ItineraryResult = ItinerarySuccess | ItineraryFailure


async def generate_itinerary(
    trip: TripInput,
    gateway: ItineraryGateway | None = None,
) -> ItineraryResult:
    """Main entry point for itinerary generation.

    Builds the request, performs exactly one gateway call and converts any
    GatewayError into an ItineraryFailure. Unexpected exceptions are logged
    with their traceback and reported as PROVIDER failures.

    Args:
        trip: Validated trip input
        gateway: Gateway to use (default: from config)

    Returns:
        ItinerarySuccess or ItineraryFailure
    """
    if gateway is None:
        gateway = get_llm_client()

    request = build_itinerary_request(trip)
    started = time.perf_counter()

    try:
        itinerary = await gateway.generate(request)
    except GatewayError as e:
        generation_logger.log_attempt(
            source=gateway.source,
            destination=trip.destination,
            outcome="failure",
            latency_ms=(time.perf_counter() - started) * 1000,
            error_kind=e.kind.value,
            error_detail=e.detail,
        )
        return ItineraryFailure(kind=e.kind, detail=e.detail)
    except Exception as e:
        logger.exception(f"Unexpected error from {gateway.source} gateway")
        detail = f"{type(e).__name__}: {e}"
        generation_logger.log_attempt(
            source=gateway.source,
            destination=trip.destination,
            outcome="failure",
            latency_ms=(time.perf_counter() - started) * 1000,
            error_kind=GatewayErrorKind.PROVIDER.value,
            error_detail=detail,
        )
        return ItineraryFailure(kind=GatewayErrorKind.PROVIDER, detail=detail)

    generation_logger.log_attempt(
        source=gateway.source,
        destination=trip.destination,
        outcome="success",
        latency_ms=(time.perf_counter() - started) * 1000,
    )
    return ItinerarySuccess(itinerary=itinerary)
