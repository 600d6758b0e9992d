from ownership_costs.app.defaults import default_inputs
from ownership_costs.core.expenses import ExpenseModel


def test_defaults_come_from_config():
    inputs = default_inputs()
    assert inputs.deposit_pct == 5.0
    assert inputs.interest_rate_pct == 5.93
    assert inputs.loan_years == 30
    assert inputs.property_price == 0.0
    assert inputs.additional_repayment == 0.0


def test_reset_gives_fresh_instances():
    first = default_inputs()
    first.property_price = 650_000
    assert default_inputs().property_price == 0.0


def test_default_inputs_feed_the_model():
    model = ExpenseModel(default_inputs())
    assert model.monthly_total == 0.0
    assert model.schedule == []
