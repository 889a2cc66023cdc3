"""Shared pytest fixtures for all test suites."""

from collections.abc import Callable

import pytest

from backend.app.models.itinerary import Activity, DayPlan, ItineraryResponse
from backend.app.models.trip import Currency, TripInput


def make_activity(name: str, price: float | None, estimated_cost: str | None = None) -> Activity:
    """Helper to create a test activity."""
    return Activity(
        name=name,
        description=f"{name} description",
        opening_hours="09:00 - 17:00",
        estimated_cost=estimated_cost if estimated_cost is not None else f"{price}",
        price=price,
        category="Sightseeing",
        image_prompt=f"{name} photo",
    )


@pytest.fixture
def kyoto_trip() -> TripInput:
    """Kyoto trip used across tests."""
    return TripInput(
        destination="Kyoto, Japan",
        duration=3,
        interests="Food",
        budget=5_000_000,
        currency=Currency.IDR,
    )


@pytest.fixture
def kyoto_itinerary() -> ItineraryResponse:
    """Three-day itinerary totalling 3,250,000 IDR."""
    return ItineraryResponse(
        trip_title="Kyoto Food Trail",
        currency_code="IDR",
        daily_plans=[
            DayPlan(
                day_number=1,
                theme="Temples and tofu",
                activities=[
                    make_activity("Fushimi Inari Taisha", 0, "Free"),
                    make_activity("Nishiki Market", 750_000),
                ],
            ),
            DayPlan(
                day_number=2,
                theme="Arashiyama",
                activities=[
                    make_activity("Bamboo Grove", 0, "Free"),
                    make_activity("Kaiseki dinner", 1_500_000),
                ],
            ),
            DayPlan(
                day_number=3,
                theme="Gion evening",
                activities=[make_activity("Tea ceremony", 1_000_000)],
            ),
        ],
    )


@pytest.fixture
def itinerary_json(kyoto_itinerary: ItineraryResponse) -> Callable[[], str]:
    """Serialize the Kyoto itinerary the way the model returns it."""
    return lambda: kyoto_itinerary.model_dump_json(by_alias=True)


@pytest.fixture
def activity_factory() -> Callable[..., Activity]:
    """Expose make_activity to tests."""
    return make_activity
