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
from .fees import quarterly_to_monthly, monthly_to_weekly
from .expenses import ExpenseInputs, ExpenseModel

__all__ = [
	"InvalidLoanParameters",
	"LoanMetrics",
	"LoanParameters",
	"RepaymentPoint",
	"aggregate_yearly",
	"build_schedule",
	"compute_metrics",
	"compute_monthly_payment",
	"monthly_schedule",
	"schedule_frame",
	"quarterly_to_monthly",
	"monthly_to_weekly",
	"ExpenseInputs",
	"ExpenseModel",
]
