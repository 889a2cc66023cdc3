"""Cost override store and budget aggregation."""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from backend.app.models.itinerary import ItineraryResponse

CostKey = tuple[int, int]


def coerce_cost(value: object) -> float:
    """Coerce a user-entered cost to a number.

    Numbers and numeric strings pass through; anything else, including
    empty input, NaN and infinities, becomes 0. No bounds are enforced.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(",", ""))
        except ValueError:
            return 0.0
    else:
        return 0.0

    if not math.isfinite(number):
        return 0.0
    return number


class CostOverrideStore:
    """User-editable costs keyed by (day_index, activity_index)."""

    def __init__(self, costs: dict[CostKey, float] | None = None):
        self._costs: dict[CostKey, float] = dict(costs or {})

    def seed(self, itinerary: ItineraryResponse) -> None:
        """Replace every entry with the itinerary's own price estimates."""
        self._costs = {
            (day_index, activity_index): float(activity.price or 0)
            for day_index, day in enumerate(itinerary.daily_plans)
            for activity_index, activity in enumerate(day.activities)
        }

    def set_cost(self, day_index: int, activity_index: int, value: object) -> float:
        """Upsert one cell and return the stored number."""
        cost = coerce_cost(value)
        self._costs[(day_index, activity_index)] = cost
        return cost

    def cost_for(self, day_index: int, activity_index: int, default: float = 0.0) -> float:
        """Stored cost of one cell, or `default` when the cell was never set."""
        return self._costs.get((day_index, activity_index), default)

    def day_total(self, day_index: int) -> float:
        """Sum of all cells belonging to one day."""
        return sum(cost for (day, _), cost in self._costs.items() if day == day_index)

    def clear(self) -> None:
        """Drop every entry."""
        self._costs = {}

    def copy(self) -> "CostOverrideStore":
        """Independent copy; edits to it leave this store unchanged."""
        return CostOverrideStore(self._costs)

    def as_dict(self) -> dict[CostKey, float]:
        """Snapshot of the cells keyed by (day_index, activity_index)."""
        return dict(self._costs)

    def __iter__(self) -> Iterator[CostKey]:
        return iter(self._costs)

    def __len__(self) -> int:
        return len(self._costs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostOverrideStore):
            return NotImplemented
        return self._costs == other._costs

    def __repr__(self) -> str:
        return f"CostOverrideStore({self._costs!r})"

    @property
    def total(self) -> float:
        """Sum of every cell."""
        return sum(self._costs.values())


@dataclass(frozen=True)
class BudgetTotals:
    """Budget figures derived from the store and the user's ceiling."""

    total_cost: float
    remaining_budget: float
    is_over_budget: bool
    progress_percent: float
    budget: float


def compute_totals(store: CostOverrideStore, budget: float) -> BudgetTotals:
    """Compute spend against the budget ceiling. Never mutates the store.

    progress_percent is clamped to [0, 100] for display; is_over_budget is
    independent of that cap.
    """
    total_cost = store.total
    remaining = budget - total_cost

    if budget > 0:
        progress = min(max(total_cost / budget * 100, 0.0), 100.0)
    else:
        progress = 0.0

    return BudgetTotals(
        total_cost=total_cost,
        remaining_budget=remaining,
        is_over_budget=remaining < 0,
        progress_percent=progress,
        budget=budget,
    )
