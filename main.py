import logging

import streamlit as st

from amort_table.config import (
    DEFAULT_ANNUAL_RATE,
    DEFAULT_PRINCIPAL,
    DEFAULT_TERM_YEARS,
    MAX_ANNUAL_RATE,
    MAX_PRINCIPAL,
    MAX_TERM_YEARS,
    setup_logging,
)
from amort_table.core.inputs import LoanParameters
from amort_table.core.render import balance_chart, payment_caption, table_frame, table_title
from amort_table.core.schedule import generate_schedule_for

setup_logging()
logger = logging.getLogger("amort_table.app")

st.set_page_config(page_title="Mortgage Amortization Table", layout="wide", initial_sidebar_state="expanded")
st.title("Mortgage Amortization Table")

st.sidebar.header("Loan")
principal = st.sidebar.number_input(
    "Principal (€)",
    min_value=0.01,
    max_value=MAX_PRINCIPAL,
    value=DEFAULT_PRINCIPAL,
    step=1000.0,
    format="%.2f",
)
annual_rate = st.sidebar.number_input(
    "Annual interest rate (%)",
    min_value=0.0,
    max_value=MAX_ANNUAL_RATE,
    value=DEFAULT_ANNUAL_RATE,
    step=0.05,
    format="%.2f",
)
term_years = st.sidebar.number_input(
    "Term (years)",
    min_value=1,
    max_value=MAX_TERM_YEARS,
    value=DEFAULT_TERM_YEARS,
    step=1,
)

try:
    params = LoanParameters.from_form(principal, annual_rate, term_years)
except ValueError as exc:
    logger.warning("Rejected loan inputs: %s", exc)
    st.error(str(exc))
    st.stop()

schedule = generate_schedule_for(params)
logger.info(
    "Rendered schedule: %d periods, payment %.2f",
    params.term_periods, schedule.summary.periodic_payment,
)

st.subheader(table_title(schedule.summary))
st.markdown(f"**{payment_caption(schedule.summary)}**")

st.plotly_chart(balance_chart(schedule), use_container_width=True)

st.download_button(
    label="Download Schedule as CSV",
    data=schedule.to_frame().to_csv(index=False),
    file_name="amortization_schedule.csv",
    mime="text/csv",
)

st.dataframe(table_frame(schedule), use_container_width=True, hide_index=True)
