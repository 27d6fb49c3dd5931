"""
Streamlit UI for the calculators.

Features:
- Bookstore tab: cover price and copies in, cost / profit metrics out
- Bills tab: dollar amount in, bill breakdown table out
- Raw text report for either calculation
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from calc_tool.engine import BillBreakdownEngine, BookstoreCostEngine
from calc_tool.engine.formatting import format_bills_outcome, format_bookstore_outcome, money
from calc_tool.config.settings import get_settings


st.set_page_config(
    page_title="Calc Tool",
    layout="wide",
)


@st.cache_resource
def get_engines():
    """Get cached engine instances."""
    return BookstoreCostEngine(), BillBreakdownEngine()


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


try:
    bookstore_engine, bill_engine = get_engines()
    settings = get_settings_cached()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


st.title("Calc Tool")
tab_bookstore, tab_bills = st.tabs(["📚 Bookstore Profit", "💵 Dollar Bills"])

# ============================================================================
# TAB 1: Bookstore
# ============================================================================
with tab_bookstore:
    col1, col2 = st.columns(2)
    with col1:
        cover_price = st.number_input(
            "Cover Price ($)", value=float(settings.cover_price), step=0.01, format="%.2f"
        )
    with col2:
        copies = st.number_input(
            "Number of Copies", value=settings.number_of_copies, step=1
        )

    outcome = bookstore_engine.compute(cover_price, int(copies))
    if not outcome.ok:
        st.error(outcome.error.message)
    else:
        result = outcome.result
        m1, m2, m3 = st.columns(3)
        m1.metric("Total Wholesale Cost", money(result.total_wholesale_cost))
        m2.metric("Total Revenue", money(result.total_revenue))
        m3.metric("Profit", money(result.profit))

        df = pd.DataFrame([
            {"Item": "Discounted Price per Book", "Amount": float(result.discounted_price)},
            {"Item": "Cost of Books", "Amount": float(result.books_cost)},
            {"Item": "Shipping Cost", "Amount": float(result.shipping_cost)},
            {"Item": "Total Wholesale Cost", "Amount": float(result.total_wholesale_cost)},
        ])
        st.dataframe(
            df,
            hide_index=True,
            use_container_width=True,
            column_config={"Amount": st.column_config.NumberColumn(format="$%.2f")},
        )

        with st.expander("📝 Text Report"):
            st.code("\n".join(format_bookstore_outcome(outcome)), language=None)

# ============================================================================
# TAB 2: Bills
# ============================================================================
with tab_bills:
    amount = st.number_input("Dollar Amount ($)", value=settings.dollar_amount, step=1)

    outcome = bill_engine.compute(int(amount))
    if not outcome.ok:
        st.error(outcome.error.message)
    elif outcome.empty:
        st.info("Amount is $0. No bills needed.")
    else:
        breakdown = outcome.breakdown
        st.metric("Total Bills", breakdown.total_bills)

        df = pd.DataFrame(breakdown.counts(), columns=["Denomination", "Count"])
        df["Subtotal"] = df["Denomination"] * df["Count"]
        df = df[df["Count"] > 0]
        st.dataframe(
            df,
            hide_index=True,
            use_container_width=True,
            column_config={
                "Denomination": st.column_config.NumberColumn(format="$%d"),
                "Subtotal": st.column_config.NumberColumn(format="$%d"),
            },
        )

        with st.expander("📝 Text Report"):
            st.code("\n".join(format_bills_outcome(outcome)), language=None)
