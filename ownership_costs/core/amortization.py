from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Final, List, Tuple

import pandas as pd


logger = logging.getLogger(__name__)

MONTHS_IN_YEAR: Final[int] = 12

SCHEDULE_COLUMNS: Final[List[str]] = ["year", "standard_balance", "accelerated_balance"]
MONTHLY_COLUMNS: Final[List[str]] = ["month", "payment", "interest", "principal", "extra", "balance"]
YEARLY_COLUMNS: Final[List[str]] = ["year", "payment", "interest", "principal", "extra", "end_balance"]


class InvalidLoanParameters(ValueError):
    """Raised when the engine is handed values outside its input contract."""


def _check_amount(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidLoanParameters(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value) or value < 0:
        raise InvalidLoanParameters(f"{name} must be a non-negative finite number, got {value!r}")
    return value


def _check_term(term_years: int) -> int:
    try:
        value = float(term_years)
    except (TypeError, ValueError):
        value = math.nan
    if isinstance(term_years, bool) or not value.is_integer() or value <= 0:
        raise InvalidLoanParameters(f"term_years must be a positive whole number, got {term_years!r}")
    return int(value)


def _check_payment(monthly_payment: float) -> float:
    # A zero or negative payment is a degenerate input with a defined (empty) result.
    try:
        monthly_payment = float(monthly_payment)
    except (TypeError, ValueError):
        raise InvalidLoanParameters(f"monthly_payment must be a number, got {monthly_payment!r}") from None
    if not math.isfinite(monthly_payment):
        raise InvalidLoanParameters(f"monthly_payment must be finite, got {monthly_payment!r}")
    return monthly_payment


def _monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 100.0 / MONTHS_IN_YEAR


@dataclass(frozen=True)
class LoanParameters:
    """Principal, nominal annual rate (in percent) and term of a loan.

    Construction validates the values, so an instance always satisfies the
    engine's input contract.
    """

    principal: float
    annual_rate_pct: float
    term_years: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "principal", _check_amount("principal", self.principal))
        object.__setattr__(self, "annual_rate_pct", _check_amount("annual_rate_pct", self.annual_rate_pct))
        object.__setattr__(self, "term_years", _check_term(self.term_years))

    @property
    def n_payments(self) -> int:
        return self.term_years * MONTHS_IN_YEAR

    @property
    def monthly_rate(self) -> float:
        return _monthly_rate(self.annual_rate_pct)


@dataclass(frozen=True)
class RepaymentPoint:
    year: int
    standard_balance: int
    accelerated_balance: int


@dataclass(frozen=True)
class LoanMetrics:
    standard_total_paid: float
    standard_total_interest: float
    standard_months: int
    accelerated_total_paid: float
    accelerated_total_interest: float
    accelerated_months: int
    months_saved: int
    interest_saved: float
    standard_amortizing: bool = True
    accelerated_amortizing: bool = True

    @property
    def amortizing(self) -> bool:
        """False when either track cannot pay down its balance."""
        return self.standard_amortizing and self.accelerated_amortizing

    @property
    def time_saved_years(self) -> int:
        return self.months_saved // MONTHS_IN_YEAR

    @property
    def time_saved_months(self) -> int:
        return self.months_saved % MONTHS_IN_YEAR


def compute_monthly_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Compute the level monthly payment for a fully amortizing loan.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    annual_rate_pct : float
        Nominal annual interest rate in percent (e.g., 5.93 for 5.93%).
    term_years : int
        Loan term in whole years.

    Returns
    -------
    float
        The constant monthly payment, ``0.0`` for a zero principal.

    Raises
    ------
    InvalidLoanParameters
        If principal or rate is negative or not finite, or the term is not
        a positive whole number of years.
    """
    loan = LoanParameters(principal, annual_rate_pct, term_years)
    if loan.principal == 0:
        return 0.0
    n_months = loan.n_payments
    monthly_rate = loan.monthly_rate
    if monthly_rate == 0:
        return loan.principal / n_months
    try:
        factor = (1 + monthly_rate) ** n_months
    except OverflowError:
        # factor / (factor - 1) tends to 1: the payment is the interest alone.
        return loan.principal * monthly_rate
    return loan.principal * (monthly_rate * factor) / (factor - 1)


def _round_balance(balance: float) -> int:
    # Half-up rounding to whole currency units, never below zero.
    return max(0, int(math.floor(balance + 0.5)))


def _next_balance(balance: float, payment: float, monthly_rate: float, extra: float) -> float:
    if balance <= 0:
        return 0.0
    interest = balance * monthly_rate
    # An underfunded payment leaves the balance unchanged rather than growing it.
    principal_component = max(0.0, payment - interest + extra)
    return max(0.0, balance - principal_component)


def build_schedule(
    principal: float,
    monthly_payment: float,
    annual_rate_pct: float,
    term_years: int,
    additional_repayment: float = 0.0,
) -> List[RepaymentPoint]:
    """Year-by-year balances under standard and accelerated repayment.

    Returns ``term_years + 1`` points (year 0 through ``term_years``), or an
    empty list when the principal or the payment is not positive.
    """
    loan = LoanParameters(principal, annual_rate_pct, term_years)
    monthly_payment = _check_payment(monthly_payment)
    extra = _check_amount("additional_repayment", additional_repayment)

    if loan.principal <= 0 or monthly_payment <= 0:
        return []

    monthly_rate = loan.monthly_rate
    standard = loan.principal
    accelerated = loan.principal
    points = [RepaymentPoint(0, _round_balance(standard), _round_balance(accelerated))]
    for year in range(1, loan.term_years + 1):
        for _ in range(MONTHS_IN_YEAR):
            standard = _next_balance(standard, monthly_payment, monthly_rate, 0.0)
            accelerated = _next_balance(accelerated, monthly_payment, monthly_rate, extra)
        points.append(RepaymentPoint(year, _round_balance(standard), _round_balance(accelerated)))
    return points


def _simulate_track(
    principal: float,
    payment: float,
    monthly_rate: float,
    max_months: int,
    extra: float,
) -> Tuple[int, float, bool]:
    """Run one track month by month.

    Returns (months elapsed, cumulative interest, amortizing flag). The track
    stops as soon as a month's payment does not exceed its interest.
    """
    balance = principal
    months = 0
    total_interest = 0.0
    while balance > 0 and months < max_months:
        interest = balance * monthly_rate
        principal_component = payment - interest + extra
        if principal_component <= 0:
            logger.debug(
                "Track stops amortizing at month %d: payment %.2f + extra %.2f <= interest %.2f",
                months + 1,
                payment,
                extra,
                interest,
            )
            return months, total_interest, False
        total_interest += interest
        balance = max(0.0, balance - principal_component)
        months += 1
    return months, total_interest, True


def _zero_metrics(amortizing: bool) -> LoanMetrics:
    return LoanMetrics(
        standard_total_paid=0.0,
        standard_total_interest=0.0,
        standard_months=0,
        accelerated_total_paid=0.0,
        accelerated_total_interest=0.0,
        accelerated_months=0,
        months_saved=0,
        interest_saved=0.0,
        standard_amortizing=amortizing,
        accelerated_amortizing=amortizing,
    )


def compute_metrics(
    principal: float,
    monthly_payment: float,
    annual_rate_pct: float,
    term_years: int,
    additional_repayment: float = 0.0,
) -> LoanMetrics:
    """Totals, term reduction and interest saved from a monthly simulation.

    Each track runs until its balance reaches zero or ``term_years * 12``
    months elapse. Without an additional repayment the accelerated track
    mirrors the standard one.
    """
    loan = LoanParameters(principal, annual_rate_pct, term_years)
    monthly_payment = _check_payment(monthly_payment)
    extra = _check_amount("additional_repayment", additional_repayment)

    if loan.principal <= 0:
        return _zero_metrics(amortizing=True)
    if monthly_payment <= 0:
        return _zero_metrics(amortizing=False)

    max_months = loan.n_payments
    std_months, std_interest, std_ok = _simulate_track(
        loan.principal, monthly_payment, loan.monthly_rate, max_months, 0.0
    )
    std_paid = std_months * monthly_payment

    if extra > 0:
        acc_months, acc_interest, acc_ok = _simulate_track(
            loan.principal, monthly_payment, loan.monthly_rate, max_months, extra
        )
        acc_paid = acc_months * (monthly_payment + extra)
    else:
        acc_months, acc_interest, acc_ok = std_months, std_interest, std_ok
        acc_paid = std_paid

    return LoanMetrics(
        standard_total_paid=std_paid,
        standard_total_interest=std_interest,
        standard_months=std_months,
        accelerated_total_paid=acc_paid,
        accelerated_total_interest=acc_interest,
        accelerated_months=acc_months,
        months_saved=max(0, std_months - acc_months),
        interest_saved=max(0.0, std_interest - acc_interest),
        standard_amortizing=std_ok,
        accelerated_amortizing=acc_ok,
    )


def schedule_frame(points: List[RepaymentPoint]) -> pd.DataFrame:
    """Tabular view of a yearly schedule: year, standard_balance, accelerated_balance."""
    if not points:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS, data=[])
    return pd.DataFrame([asdict(p) for p in points], columns=SCHEDULE_COLUMNS)


def monthly_schedule(
    principal: float,
    monthly_payment: float,
    annual_rate_pct: float,
    term_years: int,
    additional_repayment: float = 0.0,
) -> pd.DataFrame:
    """Generate the month-by-month schedule of a single track.

    Columns: month (1..N), payment, interest, principal, extra, balance

    Notes
    -----
    - ``principal`` is the actual reduction of the balance, so the last row
      never overshoots below zero.
    - Rows stop at payoff, at the term cap, or at the first month whose
      payment does not cover the interest.
    """
    loan = LoanParameters(principal, annual_rate_pct, term_years)
    monthly_payment = _check_payment(monthly_payment)
    extra = _check_amount("additional_repayment", additional_repayment)

    if loan.principal <= 0 or monthly_payment <= 0:
        return pd.DataFrame(columns=MONTHLY_COLUMNS, data=[])

    monthly_rate = loan.monthly_rate
    rows = []
    balance = loan.principal
    for m in range(1, loan.n_payments + 1):
        if balance <= 0:
            break
        interest = balance * monthly_rate
        principal_component = monthly_payment - interest + extra
        if principal_component <= 0:
            break
        principal_component = min(principal_component, balance)
        balance = max(0.0, balance - principal_component)
        rows.append(
            {
                "month": m,
                "payment": float(monthly_payment),
                "interest": float(interest),
                "principal": float(principal_component),
                "extra": float(extra),
                "balance": float(balance),
            }
        )

    return pd.DataFrame(rows, columns=MONTHLY_COLUMNS)


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a monthly schedule by loan year.

    Returns a DataFrame with columns: year, payment, interest, principal, extra, end_balance
    """
    if schedule.empty:
        return pd.DataFrame(columns=YEARLY_COLUMNS, data=[])

    schedule = schedule.copy()
    schedule["year"] = (schedule["month"] - 1) // MONTHS_IN_YEAR + 1
    agg = (
        schedule.groupby("year", as_index=False)[["payment", "interest", "principal", "extra"]]
        .sum()
        .sort_values("year")
    )
    end_balances = (
        schedule.groupby("year", as_index=False)["balance"].last().rename(columns={"balance": "end_balance"})
    )
    return agg.merge(end_balances, on="year", how="left")
