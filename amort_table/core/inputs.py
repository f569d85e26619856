from dataclasses import dataclass

import numpy as np

from amort_table.config import MAX_ANNUAL_RATE, MAX_PRINCIPAL, MAX_TERM_YEARS, PERIODS_PER_YEAR


@dataclass(frozen=True)
class LoanParameters:
    """Loan terms expressed in periodic units.

    principal      - amount borrowed
    periodic_rate  - decimal rate per period (annual percent / 100 / 12)
    term_periods   - number of monthly payments
    """

    principal: float
    periodic_rate: float
    term_periods: int

    @classmethod
    def from_form(cls, principal, annual_percent, years) -> "LoanParameters":
        """Validate raw form values and convert them to periodic units.

        Values above the configured maximums are rejected as well, since the
        closed-form balance drifts from the schedule invariants past them.
        """
        try:
            principal = float(principal)
            annual_percent = float(annual_percent)
            years = float(years)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Loan inputs must be numeric: {exc}") from exc

        if not np.isfinite(principal) or principal <= 0.0 or principal > MAX_PRINCIPAL:
            raise ValueError(f"Principal must be a positive amount up to {MAX_PRINCIPAL:,.0f}, got {principal}.")
        if not np.isfinite(annual_percent) or annual_percent < 0.0 or annual_percent > MAX_ANNUAL_RATE:
            raise ValueError(f"Interest rate must be between 0 and {MAX_ANNUAL_RATE}%, got {annual_percent}.")
        if not np.isfinite(years) or years <= 0.0 or not years.is_integer() or years > MAX_TERM_YEARS:
            raise ValueError(
                f"Term must be a whole number of years between 1 and {MAX_TERM_YEARS}, got {years}."
            )

        return cls(
            principal=principal,
            periodic_rate=annual_percent / 100 / PERIODS_PER_YEAR,
            term_periods=int(years) * PERIODS_PER_YEAR,
        )
