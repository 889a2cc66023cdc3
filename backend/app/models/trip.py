"""Trip input models - what the user submits from the planning form."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Currency(str, Enum):
    """Currencies offered on the planning form."""

    IDR = "IDR"
    USD = "USD"
    EUR = "EUR"
    JPY = "JPY"
    SGD = "SGD"
    MYR = "MYR"
    THB = "THB"


DEFAULT_CURRENCY = Currency.IDR

MIN_DURATION_DAYS = 1
MAX_DURATION_DAYS = 30


class BudgetSliderConfig(BaseModel):
    """Budget slider range for one currency. The slider always starts at 0."""

    model_config = ConfigDict(frozen=True)

    max: int
    step: int
    default: int


BUDGET_SLIDER_CONFIGS: dict[Currency, BudgetSliderConfig] = {
    Currency.IDR: BudgetSliderConfig(max=50_000_000, step=500_000, default=5_000_000),
    Currency.JPY: BudgetSliderConfig(max=500_000, step=5_000, default=50_000),
    Currency.USD: BudgetSliderConfig(max=5_000, step=50, default=1_000),
    Currency.EUR: BudgetSliderConfig(max=5_000, step=50, default=1_000),
    Currency.SGD: BudgetSliderConfig(max=5_000, step=50, default=1_000),
    Currency.MYR: BudgetSliderConfig(max=10_000, step=100, default=2_000),
    Currency.THB: BudgetSliderConfig(max=100_000, step=1_000, default=20_000),
}

FALLBACK_SLIDER_CONFIG = BudgetSliderConfig(max=10_000, step=100, default=1_000)


def get_slider_config(currency: Currency | str) -> BudgetSliderConfig:
    """Look up the budget slider range for a currency code.

    Unknown codes get the fallback range instead of raising.
    """
    try:
        return BUDGET_SLIDER_CONFIGS[Currency(currency)]
    except ValueError:
        return FALLBACK_SLIDER_CONFIG


class TripInput(BaseModel):
    """A submitted trip request. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    destination: str = Field(..., min_length=1)
    duration: Annotated[int, Field(ge=MIN_DURATION_DAYS, le=MAX_DURATION_DAYS)]
    interests: str = Field(..., min_length=1)
    budget: Annotated[float, Field(ge=0)]
    currency: Currency = DEFAULT_CURRENCY

    @field_validator("destination", "interests")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank text."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v
