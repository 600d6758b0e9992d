import math

import pytest

from ownership_costs.core.fees import monthly_to_weekly, quarterly_to_monthly


def test_quarterly_bill_spread_over_three_months():
    assert quarterly_to_monthly(900) == 300
    assert quarterly_to_monthly(0) == 0


def test_weekly_equivalent_of_monthly_cost():
    assert math.isclose(monthly_to_weekly(520), 120)


def test_negative_amounts_rejected():
    with pytest.raises(ValueError):
        quarterly_to_monthly(-1)
    with pytest.raises(ValueError):
        monthly_to_weekly(-0.01)
