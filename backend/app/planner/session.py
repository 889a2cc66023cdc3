"""Planner session - drives AppState through one submission at a time."""

import logging

from backend.app.llm.client import ItineraryGateway, ItinerarySuccess, generate_itinerary
from backend.app.llm.errors import FALLBACK_ERROR_MESSAGE
from backend.app.models.trip import TripInput
from backend.app.planner.budget import BudgetTotals
from backend.app.planner.state import (
    AppState,
    CostEdited,
    ErrorDismissed,
    GenerationFailed,
    GenerationSucceeded,
    PlannerEvent,
    SubmitRequested,
    reduce,
)

logger = logging.getLogger(__name__)


class PlannerSession:
    """Holds the current AppState and the gateway used for submissions."""

    def __init__(self, gateway: ItineraryGateway, state: AppState | None = None):
        self.gateway = gateway
        self.state = state or AppState()

    def dispatch(self, event: PlannerEvent) -> AppState:
        self.state = reduce(self.state, event)
        return self.state

    async def submit(self, trip: TripInput) -> bool:
        """Generate an itinerary for the trip.

        Returns False, without calling the gateway, when a submission is
        already in flight. Gateway failures end in the error state carrying
        FALLBACK_ERROR_MESSAGE; they are never raised.
        """
        if self.state.is_loading:
            logger.warning("Submission ignored while loading")
            return False

        self.dispatch(SubmitRequested(trip=trip))
        result = await generate_itinerary(trip, self.gateway)

        if isinstance(result, ItinerarySuccess):
            self.dispatch(GenerationSucceeded(itinerary=result.itinerary))
        else:
            logger.error(
                f"Itinerary generation failed for {trip.destination!r}: "
                f"{result.kind.value} {result.detail}"
            )
            self.dispatch(GenerationFailed(message=FALLBACK_ERROR_MESSAGE))
        return True

    def edit_cost(self, day_index: int, activity_index: int, value: object) -> None:
        self.dispatch(CostEdited(day_index, activity_index, value))

    def dismiss_error(self) -> None:
        self.dispatch(ErrorDismissed())

    def totals(self) -> BudgetTotals:
        return self.state.totals()
