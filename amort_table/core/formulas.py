"""Closed-form fixed-rate loan formulas.

All functions trust their inputs: principal > 0, periodic_rate >= 0 and a
positive integer term. Anything else is a caller error and the results are
undefined (inf, nan or nonsense). Validation lives in ``inputs``.
"""


def periodic_payment(principal, term_periods, periodic_rate):
    """Constant payment that fully retires ``principal`` over ``term_periods``.

    Uses the annuity formula; at a zero rate it falls back to straight-line
    repayment since the annuity formula divides by zero there.
    """
    if periodic_rate > 0:
        return principal * (periodic_rate / (1 - (1 + periodic_rate) ** (-term_periods)))
    return principal / term_periods


def remaining_balance(principal, periodic_rate, payment, periods_elapsed):
    """Balance outstanding after ``periods_elapsed`` payments.

    The absolute value absorbs the tiny negative residual that rounding
    leaves behind at the final period.
    """
    if periodic_rate > 0:
        growth = (1 + periodic_rate) ** periods_elapsed
        return abs(growth * principal - (growth - 1) / periodic_rate * payment)
    return abs(principal - payment * periods_elapsed)


def period_interest(principal, periodic_rate, payment, period_index):
    # interest accrues on the balance at the start of the period
    return periodic_rate * remaining_balance(principal, periodic_rate, payment, period_index - 1)
