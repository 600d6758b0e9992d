from __future__ import annotations

from ownership_costs.core.expenses import ExpenseInputs
from config import (
    PROPERTY_PRICE,
    DEPOSIT_PCT,
    INTEREST_RATE_PCT,
    LOAN_YEARS,
    ADDITIONAL_REPAYMENT,
    STRATA_QUARTERLY,
    COUNCIL_QUARTERLY,
    WATER_QUARTERLY,
)


def default_inputs() -> ExpenseInputs:
    """Fresh inputs seeded from config.yaml, also used to reset all fields."""
    return ExpenseInputs(
        property_price=PROPERTY_PRICE,
        deposit_pct=DEPOSIT_PCT,
        interest_rate_pct=INTEREST_RATE_PCT,
        loan_years=LOAN_YEARS,
        additional_repayment=ADDITIONAL_REPAYMENT,
        strata_quarterly=STRATA_QUARTERLY,
        council_quarterly=COUNCIL_QUARTERLY,
        water_quarterly=WATER_QUARTERLY,
    )
