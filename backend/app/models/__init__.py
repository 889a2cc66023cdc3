"""Models package - re-exports for convenience."""

from backend.app.models.itinerary import Activity, DayPlan, ItineraryResponse
from backend.app.models.trip import (
    BUDGET_SLIDER_CONFIGS,
    DEFAULT_CURRENCY,
    BudgetSliderConfig,
    Currency,
    TripInput,
    get_slider_config,
)

__all__ = [
    # Trip input
    "TripInput",
    "Currency",
    "DEFAULT_CURRENCY",
    "BudgetSliderConfig",
    "BUDGET_SLIDER_CONFIGS",
    "get_slider_config",
    # Itinerary
    "ItineraryResponse",
    "DayPlan",
    "Activity",
]
