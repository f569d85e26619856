"""Presentation helpers that turn a ``Schedule`` into display artifacts.

Every function here is a pure transform of a schedule value: calling one
again with a new schedule produces a complete replacement, never a patch.
"""
import pandas as pd
import plotly.graph_objects as go

from .schedule import SCHEDULE_COLUMNS, Schedule, ScheduleSummary
from .utils import currency, percent, whole_years


def table_title(summary: ScheduleSummary) -> str:
    return (
        f"Mortgage Amortization Table for: {currency(summary.principal)} | "
        f"{percent(summary.annual_rate_percent)}% Interest Rate | "
        f"{whole_years(summary.term_years)} Years"
    )


def payment_caption(summary: ScheduleSummary) -> str:
    return f"Monthly Payment: {currency(summary.periodic_payment)}"


def _formatted_row(record):
    return [
        str(record.period_index),
        currency(record.starting_balance),
        currency(record.principal_paid),
        currency(record.cumulative_principal_paid),
        currency(record.interest_paid),
        currency(record.cumulative_interest_paid),
        currency(record.ending_balance),
    ]


def table_frame(schedule: Schedule) -> pd.DataFrame:
    """Formatted table with a year separator row after every twelfth month.

    Separator rows carry the year label in the ``Month`` column and blanks
    elsewhere.
    """
    labels = schedule.markers_by_period()
    blanks = [""] * (len(SCHEDULE_COLUMNS) - 1)
    rows = []
    for record in schedule.records:
        rows.append(_formatted_row(record))
        label = labels.get(record.period_index)
        if label is not None:
            rows.append([label] + blanks)
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def balance_chart(schedule: Schedule) -> go.Figure:
    df = schedule.to_frame()
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df["Month"], y=df["Ending Balance"], name="Ending Balance"))
    fig.add_trace(go.Scatter(x=df["Month"], y=df["Total Principal"], name="Total Principal"))
    fig.add_trace(go.Scatter(x=df["Month"], y=df["Total Interest"], name="Total Interest"))
    fig.update_layout(
        title=table_title(schedule.summary),
        xaxis_title="Month",
        yaxis_title="Amount",
    )
    return fig
