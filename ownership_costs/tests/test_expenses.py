import math

import pytest

from ownership_costs.core.amortization import InvalidLoanParameters, compute_monthly_payment
from ownership_costs.core.expenses import ExpenseInputs, ExpenseModel


def test_empty_inputs_cost_nothing():
    model = ExpenseModel(ExpenseInputs())
    assert model.loan_amount == 0.0
    assert model.monthly_mortgage == 0.0
    assert model.monthly_total == 0.0
    assert model.weekly_total == 0.0
    assert model.schedule == []
    assert model.schedule_frame().empty
    assert model.metrics.amortizing


def test_loan_amount_and_mortgage():
    model = ExpenseModel(ExpenseInputs(property_price=500_000))
    assert math.isclose(model.loan_amount, 475_000)
    assert math.isclose(model.deposit_amount, 25_000)
    assert model.monthly_mortgage == compute_monthly_payment(model.loan_amount, 5.93, 30)
    assert math.isclose(model.monthly_mortgage, 2824, abs_tol=5)


def test_monthly_and_weekly_totals_include_quarterly_fees():
    inputs = ExpenseInputs(
        property_price=500_000,
        strata_quarterly=900,
        council_quarterly=450,
        water_quarterly=300,
    )
    model = ExpenseModel(inputs)
    assert math.isclose(model.monthly_fees, 550)
    assert math.isclose(model.monthly_total, model.monthly_mortgage + 550)
    assert math.isclose(model.weekly_total, model.monthly_total * 12 / 52)


def test_additional_repayment_shortens_loan():
    model = ExpenseModel(ExpenseInputs(property_price=400_000, interest_rate_pct=6.0, additional_repayment=500))
    assert model.has_additional_repayment
    assert len(model.schedule) == 31
    assert model.metrics.months_saved > 0
    assert model.metrics.interest_saved > 0
    assert len(model.yearly_summary(accelerated=True)) < len(model.yearly_summary())


def test_yearly_summary_covers_the_term():
    model = ExpenseModel(ExpenseInputs(property_price=300_000, loan_years=15))
    yearly = model.yearly_summary()
    assert len(yearly) == 15
    assert math.isclose(yearly["end_balance"].iloc[-1], 0.0, abs_tol=1e-4)


def test_full_deposit_means_no_loan():
    model = ExpenseModel(ExpenseInputs(property_price=300_000, deposit_pct=100, strata_quarterly=300))
    assert model.loan_amount == 0.0
    assert model.monthly_total == 100


@pytest.mark.parametrize(
    "overrides",
    [
        {"property_price": -1},
        {"property_price": math.inf},
        {"deposit_pct": 120},
        {"deposit_pct": -5},
        {"deposit_pct": math.nan},
        {"interest_rate_pct": -1},
        {"loan_years": 0},
        {"additional_repayment": -10},
        {"additional_repayment": math.nan},
        {"water_quarterly": -3},
        {"strata_quarterly": math.nan},
        {"council_quarterly": math.inf},
    ],
)
def test_invalid_inputs_rejected(overrides):
    kwargs = {"property_price": 300_000, **overrides}
    with pytest.raises(InvalidLoanParameters):
        ExpenseModel(ExpenseInputs(**kwargs))
