import logging
from dataclasses import dataclass
from typing import Dict, Tuple

import pandas as pd

from amort_table.config import PERIODS_PER_YEAR
from .formulas import period_interest, periodic_payment, remaining_balance
from .inputs import LoanParameters

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = [
    "Month",
    "Starting Balance",
    "Principal",
    "Total Principal",
    "Interest",
    "Total Interest",
    "Ending Balance",
]


@dataclass(frozen=True)
class PeriodRecord:
    period_index: int
    starting_balance: float
    principal_paid: float
    cumulative_principal_paid: float
    interest_paid: float
    cumulative_interest_paid: float
    ending_balance: float


@dataclass(frozen=True)
class YearMarker:
    """Separator emitted after every twelfth period."""

    period_index: int
    year: int
    terminal: bool

    @property
    def label(self) -> str:
        if self.terminal:
            return f"End of Year {self.year}"
        return f"End of Year {self.year} | Start of Year {self.year + 1}"


@dataclass(frozen=True)
class ScheduleSummary:
    periodic_payment: float
    principal: float
    periodic_rate: float
    term_periods: int

    @property
    def annual_rate_percent(self) -> float:
        return self.periodic_rate * PERIODS_PER_YEAR * 100

    @property
    def term_years(self) -> float:
        return self.term_periods / PERIODS_PER_YEAR


@dataclass(frozen=True)
class Schedule:
    records: Tuple[PeriodRecord, ...]
    markers: Tuple[YearMarker, ...]
    summary: ScheduleSummary

    def markers_by_period(self) -> Dict[int, str]:
        return {m.period_index: m.label for m in self.markers}

    def to_frame(self) -> pd.DataFrame:
        """Return the schedule as an unformatted DataFrame, one row per period."""
        rows = [
            [
                r.period_index,
                r.starting_balance,
                r.principal_paid,
                r.cumulative_principal_paid,
                r.interest_paid,
                r.cumulative_interest_paid,
                r.ending_balance,
            ]
            for r in self.records
        ]
        return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def generate_schedule(principal, term_periods, periodic_rate) -> Schedule:
    """Build the full amortization schedule for a fixed-rate loan.

    Inputs are trusted (see ``LoanParameters.from_form`` for validation).
    The last period is not adjusted, so its ending balance is zero only to
    within floating-point tolerance.
    """
    pmt = periodic_payment(principal, term_periods, periodic_rate)

    records = []
    markers = []
    total_principal = 0.0
    total_interest = 0.0

    for period in range(1, term_periods + 1):
        starting = remaining_balance(principal, periodic_rate, pmt, period - 1)
        interest = period_interest(principal, periodic_rate, pmt, period)
        principal_paid = pmt - interest
        total_interest += interest
        total_principal += principal_paid
        ending = remaining_balance(principal, periodic_rate, pmt, period)

        records.append(PeriodRecord(
            period_index=period,
            starting_balance=starting,
            principal_paid=principal_paid,
            cumulative_principal_paid=total_principal,
            interest_paid=interest,
            cumulative_interest_paid=total_interest,
            ending_balance=ending,
        ))

        if period % PERIODS_PER_YEAR == 0:
            markers.append(YearMarker(
                period_index=period,
                year=period // PERIODS_PER_YEAR,
                terminal=period == term_periods,
            ))

    logger.debug(
        "Generated %d periods at rate %.6f, payment %.4f, final balance %.3e",
        len(records), periodic_rate, pmt, records[-1].ending_balance if records else 0.0,
    )

    summary = ScheduleSummary(
        periodic_payment=pmt,
        principal=principal,
        periodic_rate=periodic_rate,
        term_periods=term_periods,
    )
    return Schedule(records=tuple(records), markers=tuple(markers), summary=summary)


def generate_schedule_for(params: LoanParameters) -> Schedule:
    return generate_schedule(params.principal, params.term_periods, params.periodic_rate)
