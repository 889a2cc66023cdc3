"""Unit tests for UI helper functions."""

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from backend.app.llm.errors import GatewayError, GatewayErrorKind
from backend.app.models.itinerary import Activity, ItineraryResponse
from backend.app.models.trip import TripInput
from backend.app.planner.budget import BudgetTotals
from backend.app.planner.request_builder import build_itinerary_request
from ui.helpers import (
    BackendItineraryClient,
    budget_for_currency_change,
    build_activity_view,
    build_budget_view,
    can_submit,
    currency_options,
    format_cost_input,
    format_money,
    verify_info_url,
)


def test_verify_info_url_encodes_name_and_suffix() -> None:
    """Test the external verification search link."""
    url = verify_info_url("Kinkaku-ji & Garden")

    assert url == (
        "https://www.google.com/search?q=Kinkaku-ji%20%26%20Garden%20ticket%20price%20cost"
    )


def test_format_money_groups_digits() -> None:
    """Test digit grouping and currency suffix."""
    assert format_money(5_000_000, "IDR") == "5,000,000 IDR"
    assert format_money(1234.5, "usd") == "1,234.50 USD"
    assert format_money(1000, "USD") == "1,000 USD"
    assert format_money(-250_000, "IDR") == "-250,000 IDR"


def test_format_money_rounds_zero_decimal_currencies() -> None:
    """Test that JPY never shows minor units."""
    assert format_money(1999.6, "JPY") == "2,000 JPY"


def test_format_cost_input() -> None:
    """Test plain editable cost text."""
    assert format_cost_input(5_000_000.0) == "5000000"
    assert format_cost_input(12.5) == "12.50"


def test_currency_switch_resets_budget_to_new_default() -> None:
    """Scenario: switching IDR -> USD resets to USD's default, not IDR's."""
    assert budget_for_currency_change("IDR", "USD", 5_000_000) == 1_000


def test_same_currency_keeps_budget() -> None:
    """Test that re-selecting the same currency keeps the user's budget."""
    assert budget_for_currency_change("IDR", "IDR", 7_500_000) == 7_500_000
    assert budget_for_currency_change(None, "IDR", 7_500_000) == 7_500_000


@pytest.mark.parametrize(
    ("destination", "duration", "interests", "loading", "expected"),
    [
        ("Kyoto", 3, "Food", False, True),
        ("Kyoto", 3, "Food", True, False),
        ("", 3, "Food", False, False),
        ("Kyoto", 0, "Food", False, False),
        ("Kyoto", 3, "   ", False, False),
    ],
)
def test_can_submit(
    destination: str, duration: int, interests: str, loading: bool, expected: bool
) -> None:
    """Test submit gating on required fields and loading status."""
    assert can_submit(destination, duration, interests, loading) is expected


def test_build_budget_view_over_budget() -> None:
    """Test the budget panel when spending exceeds the ceiling."""
    totals = BudgetTotals(
        total_cost=1_500,
        remaining_budget=-500,
        is_over_budget=True,
        progress_percent=100,
        budget=1_000,
    )

    view = build_budget_view(totals, "USD")

    assert view["remaining_label"] == "Budget deficit"
    assert view["remaining"] == "-500 USD"
    assert view["total"] == "1,500 USD"
    assert view["budget"] == "1,000 USD"
    assert view["progress_label"] == "100%"


def test_build_budget_view_within_budget() -> None:
    """Test the budget panel under the ceiling."""
    totals = BudgetTotals(
        total_cost=250,
        remaining_budget=750,
        is_over_budget=False,
        progress_percent=25,
        budget=1_000,
    )

    view = build_budget_view(totals, "EUR")

    assert view["remaining_label"] == "Remaining budget"
    assert view["progress_label"] == "25%"
    assert view["is_over_budget"] is False


def test_build_activity_view(activity_factory: Callable[..., Activity]) -> None:
    """Test activity card fields."""
    view = build_activity_view(activity_factory("Nishiki Market", 750_000, "750,000 IDR"), "IDR")

    assert view["name"] == "Nishiki Market"
    assert view["category"] == "SIGHTSEEING"
    assert view["ai_estimate"] == "AI estimate: 750,000 IDR"
    assert view["verify_url"].endswith("Nishiki%20Market%20ticket%20price%20cost")


def test_currency_options() -> None:
    """Test the selector options."""
    assert currency_options() == ["IDR", "USD", "EUR", "JPY", "SGD", "MYR", "THB"]


# BackendItineraryClient


def make_async_client(response: httpx.Response | None = None, error: Exception | None = None):
    """Helper to patch httpx.AsyncClient as an async context manager."""
    client = MagicMock()
    client.post = AsyncMock(return_value=response, side_effect=error)
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=client)
    context.__aexit__ = AsyncMock(return_value=False)
    return context, client


@pytest.mark.asyncio
async def test_backend_client_posts_trip(
    kyoto_trip: TripInput, kyoto_itinerary: ItineraryResponse
) -> None:
    """Test that the trip is posted and the body validated."""
    request = httpx.Request("POST", "http://backend/itinerary")
    response = httpx.Response(
        200, json=kyoto_itinerary.model_dump(mode="json", by_alias=True), request=request
    )
    context, client = make_async_client(response=response)

    with patch("ui.helpers.httpx.AsyncClient", return_value=context):
        itinerary = await BackendItineraryClient("http://backend/").generate(
            build_itinerary_request(kyoto_trip)
        )

    client.post.assert_awaited_once()
    assert client.post.call_args.args[0] == "http://backend/itinerary"
    assert client.post.call_args.kwargs["json"]["currency"] == "IDR"
    assert itinerary == kyoto_itinerary


@pytest.mark.asyncio
async def test_backend_client_maps_connect_error(kyoto_trip: TripInput) -> None:
    """Test that transport failures become NETWORK errors."""
    context, _ = make_async_client(error=httpx.ConnectError("refused"))

    with patch("ui.helpers.httpx.AsyncClient", return_value=context):
        with pytest.raises(GatewayError) as exc_info:
            await BackendItineraryClient("http://backend").generate(
                build_itinerary_request(kyoto_trip)
            )

    assert exc_info.value.kind is GatewayErrorKind.NETWORK


@pytest.mark.asyncio
async def test_backend_client_maps_bad_gateway(kyoto_trip: TripInput) -> None:
    """Test that a 502 from the backend becomes a PROVIDER error."""
    request = httpx.Request("POST", "http://backend/itinerary")
    response = httpx.Response(502, json={"detail": {"kind": "network"}}, request=request)
    context, _ = make_async_client(response=response)

    with patch("ui.helpers.httpx.AsyncClient", return_value=context):
        with pytest.raises(GatewayError) as exc_info:
            await BackendItineraryClient("http://backend").generate(
                build_itinerary_request(kyoto_trip)
            )

    assert exc_info.value.kind is GatewayErrorKind.PROVIDER
    assert "502" in exc_info.value.detail


@pytest.mark.asyncio
async def test_backend_client_rejects_unexpected_body(kyoto_trip: TripInput) -> None:
    """Test that a malformed body becomes a SCHEMA_VIOLATION."""
    request = httpx.Request("POST", "http://backend/itinerary")
    response = httpx.Response(200, json={"unexpected": True}, request=request)
    context, _ = make_async_client(response=response)

    with patch("ui.helpers.httpx.AsyncClient", return_value=context):
        with pytest.raises(GatewayError) as exc_info:
            await BackendItineraryClient("http://backend").generate(
                build_itinerary_request(kyoto_trip)
            )

    assert exc_info.value.kind is GatewayErrorKind.SCHEMA_VIOLATION


@pytest.mark.asyncio
async def test_backend_client_maps_invalid_url(kyoto_trip: TripInput) -> None:
    """Test that a malformed backend URL becomes a NETWORK error."""
    context, _ = make_async_client(error=httpx.InvalidURL("Invalid port: ':1'"))

    with patch("ui.helpers.httpx.AsyncClient", return_value=context):
        with pytest.raises(GatewayError) as exc_info:
            await BackendItineraryClient("http://[::1").generate(
                build_itinerary_request(kyoto_trip)
            )

    assert exc_info.value.kind is GatewayErrorKind.NETWORK
    assert "InvalidURL" in exc_info.value.detail
