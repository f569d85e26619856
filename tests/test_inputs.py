import math

import pytest

from amort_table.config import MAX_ANNUAL_RATE, MAX_PRINCIPAL, MAX_TERM_YEARS
from amort_table.core.inputs import LoanParameters


class TestFromForm:
    def test_converts_to_monthly_units(self):
        params = LoanParameters.from_form(200000, 6.5, 30)
        assert params.principal == 200000.0
        assert params.periodic_rate == pytest.approx(0.0054166667)
        assert params.term_periods == 360

    def test_accepts_numeric_strings(self):
        params = LoanParameters.from_form("120000", "0", "10")
        assert params.periodic_rate == 0.0
        assert params.term_periods == 120

    def test_accepts_configured_maximums(self):
        params = LoanParameters.from_form(MAX_PRINCIPAL, MAX_ANNUAL_RATE, MAX_TERM_YEARS)
        assert params.principal == MAX_PRINCIPAL
        assert params.periodic_rate == pytest.approx(MAX_ANNUAL_RATE / 100 / 12)
        assert params.term_periods == MAX_TERM_YEARS * 12

    def test_is_immutable(self):
        params = LoanParameters.from_form(1000, 1, 1)
        with pytest.raises(AttributeError):
            params.principal = 2000

    @pytest.mark.parametrize("principal", [0, -5, math.nan, math.inf, MAX_PRINCIPAL * 2])
    def test_rejects_bad_principal(self, principal):
        with pytest.raises(ValueError, match="Principal"):
            LoanParameters.from_form(principal, 5, 30)

    @pytest.mark.parametrize("rate", [-0.01, math.nan, math.inf, MAX_ANNUAL_RATE + 0.01])
    def test_rejects_bad_rate(self, rate):
        with pytest.raises(ValueError, match="Interest rate"):
            LoanParameters.from_form(1000, rate, 30)

    @pytest.mark.parametrize("years", [0, -1, 2.5, MAX_TERM_YEARS + 1])
    def test_rejects_bad_term(self, years):
        with pytest.raises(ValueError, match="Term"):
            LoanParameters.from_form(1000, 5, years)

    def test_rejects_non_numeric(self):
        with pytest.raises(ValueError, match="numeric"):
            LoanParameters.from_form("abc", 5, 30)
