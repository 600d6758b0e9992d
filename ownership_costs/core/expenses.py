from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List

import pandas as pd

from .amortization import (
    InvalidLoanParameters,
    LoanMetrics,
    LoanParameters,
    RepaymentPoint,
    aggregate_yearly,
    build_schedule,
    compute_metrics,
    compute_monthly_payment,
    monthly_schedule,
    schedule_frame,
)
from .fees import monthly_to_weekly, quarterly_to_monthly


logger = logging.getLogger(__name__)


@dataclass
class ExpenseInputs:
    # Purchase
    property_price: float = 0.0
    deposit_pct: float = 5.0

    # Loan
    interest_rate_pct: float = 5.93
    loan_years: int = 30
    additional_repayment: float = 0.0  # per month

    # Quarterly fees
    strata_quarterly: float = 0.0
    council_quarterly: float = 0.0
    water_quarterly: float = 0.0


class ExpenseModel:
    """Monthly and weekly ownership costs for one set of inputs.

    Everything is derived on construction; build a new model whenever an
    input changes.
    """

    def __init__(self, inputs: ExpenseInputs):
        self.inputs = inputs
        self._validate()

        self.loan_amount = self._loan_amount()
        self.loan = LoanParameters(
            principal=self.loan_amount,
            annual_rate_pct=self.inputs.interest_rate_pct,
            term_years=self.inputs.loan_years,
        )
        self.monthly_mortgage = compute_monthly_payment(
            self.loan.principal, self.loan.annual_rate_pct, self.loan.term_years
        )

        # Recurring fees
        self.monthly_strata = quarterly_to_monthly(self.inputs.strata_quarterly)
        self.monthly_council = quarterly_to_monthly(self.inputs.council_quarterly)
        self.monthly_water = quarterly_to_monthly(self.inputs.water_quarterly)
        self.monthly_fees = self.monthly_strata + self.monthly_council + self.monthly_water

        self.monthly_total = self.monthly_mortgage + self.monthly_fees
        self.weekly_total = monthly_to_weekly(self.monthly_total)

        self.schedule: List[RepaymentPoint] = build_schedule(
            self.loan.principal,
            self.monthly_mortgage,
            self.loan.annual_rate_pct,
            self.loan.term_years,
            self.inputs.additional_repayment,
        )
        self.metrics: LoanMetrics = compute_metrics(
            self.loan.principal,
            self.monthly_mortgage,
            self.loan.annual_rate_pct,
            self.loan.term_years,
            self.inputs.additional_repayment,
        )
        if not self.metrics.amortizing:
            logger.warning(
                "Loan of %.2f at %.2f%% does not amortize with a payment of %.2f (+ %.2f extra)",
                self.loan_amount,
                self.loan.annual_rate_pct,
                self.monthly_mortgage,
                self.inputs.additional_repayment,
            )
        logger.debug(
            "Recomputed expenses: loan=%.2f mortgage=%.2f monthly_total=%.2f weekly_total=%.2f",
            self.loan_amount,
            self.monthly_mortgage,
            self.monthly_total,
            self.weekly_total,
        )

    def _validate(self) -> None:
        amounts = (
            "property_price",
            "additional_repayment",
            "strata_quarterly",
            "council_quarterly",
            "water_quarterly",
        )
        for name in amounts:
            value = getattr(self.inputs, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidLoanParameters(f"{name} must be a non-negative finite number, got {value!r}")
        # NaN fails the range comparison as well
        if not 0 <= self.inputs.deposit_pct <= 100:
            raise InvalidLoanParameters(f"deposit_pct must be between 0 and 100, got {self.inputs.deposit_pct!r}")

    def _loan_amount(self) -> float:
        return self.inputs.property_price * (1 - self.inputs.deposit_pct / 100.0)

    @property
    def deposit_amount(self) -> float:
        return self.inputs.property_price - self.loan_amount

    @property
    def has_additional_repayment(self) -> bool:
        return self.inputs.additional_repayment > 0

    def schedule_frame(self) -> pd.DataFrame:
        return schedule_frame(self.schedule)

    def yearly_summary(self, accelerated: bool = False) -> pd.DataFrame:
        """Payments, interest and closing balance per loan year for one track."""
        extra = self.inputs.additional_repayment if accelerated else 0.0
        monthly = monthly_schedule(
            self.loan.principal,
            self.monthly_mortgage,
            self.loan.annual_rate_pct,
            self.loan.term_years,
            extra,
        )
        return aggregate_yearly(monthly)
