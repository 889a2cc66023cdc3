"""Planner application state and its transition function.

The whole UI-facing state is one record; every change goes through
reduce(state, event).

    idle --submit--> loading --succeeded--> success --submit--> loading
                        |
                        +-----failed----> error --dismissed--> idle
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from backend.app.models.itinerary import ItineraryResponse
from backend.app.models.trip import TripInput
from backend.app.planner.budget import BudgetTotals, CostOverrideStore, compute_totals

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    """Four-state load indicator."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SubmitRequested:
    trip: TripInput


@dataclass(frozen=True)
class GenerationSucceeded:
    itinerary: ItineraryResponse


@dataclass(frozen=True)
class GenerationFailed:
    message: str


@dataclass(frozen=True)
class CostEdited:
    day_index: int
    activity_index: int
    value: object


@dataclass(frozen=True)
class ErrorDismissed:
    pass


PlannerEvent = SubmitRequested | GenerationSucceeded | GenerationFailed | CostEdited | ErrorDismissed


@dataclass(frozen=True)
class AppState:
    """Everything the planner UI renders from."""

    status: LoadStatus = LoadStatus.IDLE
    trip: TripInput | None = None
    itinerary: ItineraryResponse | None = None
    costs: CostOverrideStore = field(default_factory=CostOverrideStore)
    error_message: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def user_budget(self) -> float:
        """Budget ceiling captured at submit time (0 before any submit)."""
        return self.trip.budget if self.trip else 0.0

    def totals(self) -> BudgetTotals:
        return compute_totals(self.costs, self.user_budget)


def reduce(state: AppState, event: PlannerEvent) -> AppState:
    """Apply one event and return the next state.

    Events that are not valid in the current status return the state
    unchanged. The input state is never mutated.
    """
    if isinstance(event, SubmitRequested):
        if state.is_loading:
            logger.warning("Submit ignored: a generation is already in flight")
            return state
        return AppState(status=LoadStatus.LOADING, trip=event.trip)

    if isinstance(event, GenerationSucceeded):
        if not state.is_loading:
            logger.warning(f"Discarding result received in status={state.status.value}")
            return state
        costs = CostOverrideStore()
        costs.seed(event.itinerary)
        return replace(state, status=LoadStatus.SUCCESS, itinerary=event.itinerary, costs=costs)

    if isinstance(event, GenerationFailed):
        if not state.is_loading:
            logger.warning(f"Discarding failure received in status={state.status.value}")
            return state
        return replace(
            state,
            status=LoadStatus.ERROR,
            itinerary=None,
            costs=CostOverrideStore(),
            error_message=event.message,
        )

    if isinstance(event, CostEdited):
        if state.status is not LoadStatus.SUCCESS:
            return state
        costs = state.costs.copy()
        costs.set_cost(event.day_index, event.activity_index, event.value)
        return replace(state, costs=costs)

    if isinstance(event, ErrorDismissed):
        if state.status is not LoadStatus.ERROR:
            return state
        return replace(state, status=LoadStatus.IDLE, error_message=None)

    raise TypeError(f"Unknown planner event: {event!r}")
