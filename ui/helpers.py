"""Helper functions for UI - /itinerary client and display formatting."""

from typing import Any
from urllib.parse import quote

import httpx

from backend.app.llm.errors import GatewayError, GatewayErrorKind
from backend.app.models.itinerary import Activity, ItineraryResponse
from backend.app.models.trip import Currency, get_slider_config
from backend.app.planner.budget import BudgetTotals
from backend.app.planner.request_builder import ItineraryRequest

VERIFY_SEARCH_URL = "https://www.google.com/search?q="
VERIFY_SEARCH_SUFFIX = " ticket price cost"

# Currencies conventionally shown without minor units
ZERO_DECIMAL_CURRENCIES = {"IDR", "JPY"}


class BackendItineraryClient:
    """Itinerary gateway that calls the backend's POST /itinerary."""

    source = "backend"

    def __init__(self, backend_url: str, timeout: float = 120.0):
        self.backend_url = backend_url.rstrip("/")
        self.timeout = timeout

    async def generate(self, request: ItineraryRequest) -> ItineraryResponse:
        """Send the trip to the backend and validate its answer.

        Raises:
            GatewayError: NETWORK for transport failures or a malformed URL,
                PROVIDER for non-2xx, SCHEMA_VIOLATION for an unexpected body
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.backend_url}/itinerary",
                    json=request.trip.model_dump(mode="json"),
                )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GatewayError(
                GatewayErrorKind.PROVIDER,
                f"backend returned {e.response.status_code}: {e.response.text[:500]}",
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise GatewayError(GatewayErrorKind.NETWORK, f"{type(e).__name__}: {e}") from e

        try:
            return ItineraryResponse.model_validate(response.json())
        except ValueError as e:
            raise GatewayError(GatewayErrorKind.SCHEMA_VIOLATION, str(e)) from e


def verify_info_url(activity_name: str) -> str:
    """Build the external search link used to verify an activity's details."""
    return VERIFY_SEARCH_URL + quote(activity_name + VERIFY_SEARCH_SUFFIX, safe="")


def format_money(amount: float, currency: str) -> str:
    """Format an amount with digit grouping, e.g. '5,000,000 IDR'.

    Grouping always uses the en convention (comma thousands, dot decimals)
    whatever the currency. Zero-decimal currencies are rounded to whole
    units; others keep cents only when the amount has them.
    """
    code = currency.upper()
    if code in ZERO_DECIMAL_CURRENCIES or float(amount).is_integer():
        return f"{amount:,.0f} {code}"
    return f"{amount:,.2f} {code}"


def budget_for_currency_change(previous: str | None, current: str, budget: float) -> float:
    """Budget to show after the currency selector settles on `current`.

    Switching currency resets the budget to the new currency's default;
    otherwise the user's budget is kept.
    """
    if previous is not None and previous != current:
        return float(get_slider_config(current).default)
    return budget


def can_submit(destination: str, duration: int | None, interests: str, is_loading: bool) -> bool:
    """Whether the submit control should be enabled."""
    if is_loading:
        return False
    return bool(destination.strip()) and bool(duration) and bool(interests.strip())


def build_budget_view(totals: BudgetTotals, currency: str) -> dict[str, Any]:
    """Build the budget summary panel from computed totals.

    Returns:
        Dict with formatted strings and the raw progress value
    """
    remaining_label = "Budget deficit" if totals.is_over_budget else "Remaining budget"
    return {
        "progress_percent": totals.progress_percent,
        "progress_label": f"{totals.progress_percent:.0f}%",
        "total": format_money(totals.total_cost, currency),
        "remaining_label": remaining_label,
        "remaining": format_money(totals.remaining_budget, currency),
        "budget": format_money(totals.budget, currency),
        "is_over_budget": totals.is_over_budget,
    }


def build_activity_view(activity: Activity, currency: str) -> dict[str, str]:
    """Build display fields for one activity card."""
    return {
        "name": activity.name,
        "category": activity.category.upper(),
        "description": activity.description,
        "opening_hours": activity.opening_hours,
        "verify_url": verify_info_url(activity.name),
        "ai_estimate": f"AI estimate: {activity.estimated_cost}",
        "currency": currency,
    }


def format_cost_input(cost: float) -> str:
    """Plain text for an editable cost field (no grouping, no exponent)."""
    if float(cost).is_integer():
        return str(int(cost))
    return f"{cost:.2f}"


def currency_options() -> list[str]:
    return [c.value for c in Currency]
