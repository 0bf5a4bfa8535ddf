"""
Streamlit quote desk for lift passes.

Features:
- Quote a pass for an optional age and visit date, with the resolution trace
- Holiday calendar at a glance
- Base price administration
"""
import streamlit as st
import pandas as pd
from datetime import date

from lift_pass.engine import PricingEngine, PassType, QuoteRequest
from lift_pass.config.settings import get_settings


st.set_page_config(
    page_title="Lift Pass Pricing",
    layout="wide",
    initial_sidebar_state="expanded"
)

PASS_LABELS = {
    PassType.DAY: "Day pass (1jour)",
    PassType.NIGHT: "Night pass",
}


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine()


try:
    engine = get_engine()
    settings = get_settings()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SIDEBAR: Base prices and holidays
# ============================================================================
with st.sidebar:
    st.header("🎿 Base Prices")

    base_prices = engine.prices.as_dict()
    for pass_type in PassType:
        st.metric(PASS_LABELS[pass_type], base_prices.get(pass_type.value, "—"))

    st.divider()

    st.header("📅 Holidays")
    holidays_df = pd.DataFrame(
        [
            {"Date": day.isoformat(), "Weekday": day.strftime("%A"), "Description": engine.holidays.describe(day)}
            for day in engine.holidays.dates()
        ]
    )
    if holidays_df.empty:
        st.caption("No holidays loaded")
    else:
        st.dataframe(holidays_df, hide_index=True)


# ============================================================================
# MAIN CONTENT
# ============================================================================
st.title("Lift Pass Pricing")
st.caption(f"Seed data: {settings.base_prices_csv.name}, {settings.holidays_csv.name}")

tab1, tab2 = st.tabs(["⚡ Quote", "🔧 Base Prices"])


with tab1:
    col1, col2 = st.columns([1.2, 1.8], gap="large")

    with col1:
        pass_type = st.selectbox(
            "Pass",
            list(PassType),
            format_func=lambda p: PASS_LABELS[p],
        )

        age = None
        if st.checkbox("Rider age known", value=True):
            age = int(st.number_input("Age", min_value=0, max_value=120, value=25, step=1))

        visit_date = None
        if st.checkbox("Visit date known"):
            visit_date = st.date_input("Visit date", value=date.today())

    with col2:
        try:
            quote = engine.quote(QuoteRequest(pass_type, age, visit_date))
        except Exception as e:
            st.error(f"Cannot price this pass: {e}")
        else:
            m1, m2, m3 = st.columns(3)
            m1.metric("Cost", quote.cost)
            m2.metric("Bracket", quote.bracket.value.title())
            m3.metric("Reduction", f"{quote.reduction}%")

            if quote.is_holiday:
                st.info("Visit date is a holiday: no day-of-week reduction.")

            with st.expander("🔍 Resolution Details", expanded=True):
                for t in quote.trace:
                    if t.value:
                        st.caption(f"**{t.step}**: {t.description} = `{t.value}`")
                    else:
                        st.caption(f"**{t.step}**: {t.description}")


with tab2:
    st.subheader("Set Base Price")

    with st.form("base_price_form"):
        target = st.selectbox("Pass", list(PassType), format_func=lambda p: PASS_LABELS[p], key="admin_pass")
        current = engine.prices.as_dict().get(target.value, 0)
        new_cost = st.number_input("Base price", min_value=0, value=int(current), step=1)
        submitted = st.form_submit_button("Save")

    if submitted:
        engine.set_base_price(target, int(new_cost))
        st.success(f"{PASS_LABELS[target]} base price set to {int(new_cost)}")
        if not engine.prices.persist:
            st.caption("Persistence is off: the change lasts until the app restarts.")
        st.rerun()
