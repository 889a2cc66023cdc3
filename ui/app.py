"""Streamlit UI for the AI travel planner.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio  # noqa: E402

import streamlit as st  # noqa: E402
from pydantic import ValidationError  # noqa: E402

from backend.app.config import get_settings  # noqa: E402
from backend.app.models.trip import (  # noqa: E402
    DEFAULT_CURRENCY,
    MAX_DURATION_DAYS,
    MIN_DURATION_DAYS,
    TripInput,
    get_slider_config,
)
from backend.app.planner.session import PlannerSession  # noqa: E402
from backend.app.planner.state import LoadStatus  # noqa: E402
from backend.app.utils.logging import configure_logging  # noqa: E402
from ui.helpers import (  # noqa: E402
    BackendItineraryClient,
    budget_for_currency_change,
    build_activity_view,
    build_budget_view,
    can_submit,
    currency_options,
    format_cost_input,
    format_money,
)

settings = get_settings()
configure_logging(settings.log_level)

# Page config
st.set_page_config(
    page_title="AI Travel Planner",
    page_icon="✈️",
    layout="wide",
)

# Initialize session state
if "planner" not in st.session_state:
    st.session_state.planner = PlannerSession(
        BackendItineraryClient(settings.backend_url, timeout=settings.backend_timeout_s)
    )
if "currency" not in st.session_state:
    st.session_state.currency = DEFAULT_CURRENCY.value
    st.session_state.last_currency = DEFAULT_CURRENCY.value
    st.session_state.budget = get_slider_config(DEFAULT_CURRENCY).default
if "generation" not in st.session_state:
    st.session_state.generation = 0

planner: PlannerSession = st.session_state.planner


def _on_currency_change() -> None:
    # Slider values are ints for every currency
    st.session_state.budget = int(
        budget_for_currency_change(
            st.session_state.last_currency,
            st.session_state.currency,
            st.session_state.budget,
        )
    )
    st.session_state.last_currency = st.session_state.currency


def _on_cost_change(day_index: int, activity_index: int, key: str) -> None:
    planner.edit_cost(day_index, activity_index, st.session_state[key])


# Title
st.title("✈️ AI Travel Planner")
st.markdown("*Design your perfect adventure in seconds with AI.*")
st.divider()

col_form, col_result = st.columns([1, 2])

# =============================================================================
# LEFT COLUMN - TRIP FORM
# =============================================================================
with col_form:
    st.subheader("📋 Plan Your Journey")

    destination = st.text_input("Destination *", placeholder="e.g., Kyoto, Japan")
    duration = st.number_input(
        "Duration (days) *",
        min_value=MIN_DURATION_DAYS,
        max_value=MAX_DURATION_DAYS,
        value=3,
        step=1,
    )
    interests = st.text_input("Interests *", placeholder="Food, nature...")

    currency = st.selectbox(
        "Currency",
        options=currency_options(),
        key="currency",
        on_change=_on_currency_change,
    )
    slider = get_slider_config(currency)
    budget = st.slider(
        "Total budget",
        min_value=0,
        max_value=slider.max,
        step=slider.step,
        key="budget",
    )
    st.markdown(f"**{format_money(budget, currency)}**")

    submit_enabled = can_submit(destination, int(duration), interests, planner.state.is_loading)
    submitted = st.button(
        "🚀 Create Travel Plan",
        type="primary",
        use_container_width=True,
        disabled=not submit_enabled,
    )

    if submitted:
        try:
            trip = TripInput(
                destination=destination,
                duration=int(duration),
                interests=interests,
                budget=budget,
                currency=currency,
            )
        except ValidationError as e:
            st.error(f"❌ {e.errors()[0]['msg']}")
        else:
            st.session_state.generation += 1
            with st.spinner("Designing your dream trip: finding places, estimating costs..."):
                asyncio.run(planner.submit(trip))
            st.rerun()

# =============================================================================
# RIGHT COLUMN - ITINERARY + BUDGET
# =============================================================================
with col_result:
    state = planner.state

    if state.status is LoadStatus.ERROR:
        st.error(f"⚠️ **Something went wrong**\n\n{state.error_message}")
        if st.button("Try again"):
            planner.dismiss_error()
            st.rerun()

    elif state.status is LoadStatus.SUCCESS and state.itinerary:
        itinerary = state.itinerary
        currency_code = itinerary.currency_code
        days = itinerary.daily_plans

        st.caption(f"ITINERARY · {len(days)} day{'s' if len(days) != 1 else ''}")
        title_col, currency_col = st.columns([3, 1])
        title_col.subheader(itinerary.trip_title)
        currency_col.metric("Currency", currency_code)

        for day_index, day in enumerate(days):
            st.markdown(f"### Day {day.day_number}: {day.theme}")

            for activity_index, activity in enumerate(day.activities):
                view = build_activity_view(activity, currency_code)
                key = f"cost_{st.session_state.generation}_{day_index}_{activity_index}"

                with st.container(border=True):
                    info_col, cost_col = st.columns([3, 1])
                    with info_col:
                        st.markdown(f"**{view['name']}** `{view['category']}`")
                        st.write(view["description"])
                        st.caption(f"🕒 {view['opening_hours']}")
                        st.markdown(f"[🌐 Verify info]({view['verify_url']})")
                    with cost_col:
                        cost = state.costs.cost_for(day_index, activity_index, activity.price or 0)
                        st.text_input(
                            f"Cost ({currency_code})",
                            value=format_cost_input(cost),
                            key=key,
                            on_change=_on_cost_change,
                            args=(day_index, activity_index, key),
                        )
                        st.caption(view["ai_estimate"])

            st.caption(
                f"Day subtotal: {format_money(state.costs.day_total(day_index), currency_code)}"
            )

        st.divider()

        # --- BUDGET OVERVIEW ---
        panel = build_budget_view(state.totals(), currency_code)
        st.subheader("💰 Budget Overview")
        st.progress(int(panel["progress_percent"]), text=f"Budget used: {panel['progress_label']}")

        total_col, remaining_col, limit_col = st.columns(3)
        total_col.metric("Total estimate", panel["total"])
        remaining_col.metric(panel["remaining_label"], panel["remaining"])
        limit_col.metric("Your budget limit", panel["budget"])

        if panel["is_over_budget"]:
            st.error("🚨 Estimated costs exceed your budget.")

    else:
        st.info("👈 Fill out the trip form and hit **Create Travel Plan** to see your itinerary here.")
