from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final, Optional, Tuple, Union

import pandas as pd

from .errors import PayoffDomainError


logger = logging.getLogger(__name__)

MONTHS_IN_YEAR: Final[int] = 12

# Balances below this many currency units are treated as paid off.
BALANCE_TOLERANCE: Final[float] = 0.01

# How far term_years * 12 may sit from a whole month count.
TERM_MONTHS_TOLERANCE: Final[float] = 1e-9

SCHEDULE_COLUMNS: Final[Tuple[str, ...]] = (
    "month",
    "principal_and_interest",
    "principal_payment",
    "interest_payment",
    "property_tax",
    "insurance",
    "total_payment",
    "remaining_balance",
    "total_interest_paid",
    "total_taxes_paid",
    "total_insurance_paid",
)


@dataclass(frozen=True)
class ScheduleEntry:
    month: int
    principal_and_interest: float
    principal_payment: float
    interest_payment: float
    property_tax: float
    insurance: float
    total_payment: float
    remaining_balance: float
    total_interest_paid: float
    total_taxes_paid: float
    total_insurance_paid: float


@dataclass(frozen=True)
class AmortizationResult:
    schedule: Tuple[ScheduleEntry, ...]
    monthly_payment: float
    monthly_tax: float
    monthly_insurance: float
    total_monthly_payment: float
    total_interest_paid: float
    total_taxes_paid: float
    total_insurance_paid: float
    total_paid: float
    actual_term_months: int

    @property
    def computed(self) -> bool:
        return True


@dataclass(frozen=True)
class EmptyResult:
    """Placeholder returned while the inputs cannot describe a loan yet.

    Exposes the same fields as :class:`AmortizationResult` (all zero) so
    consumers can read it uniformly, but ``computed`` is False.
    """

    reason: str = ""
    schedule: Tuple[ScheduleEntry, ...] = ()
    monthly_payment: float = 0.0
    monthly_tax: float = 0.0
    monthly_insurance: float = 0.0
    total_monthly_payment: float = 0.0
    total_interest_paid: float = 0.0
    total_taxes_paid: float = 0.0
    total_insurance_paid: float = 0.0
    total_paid: float = 0.0
    actual_term_months: int = 0

    @property
    def computed(self) -> bool:
        return False


ScheduleResult = Union[AmortizationResult, EmptyResult]


def compute_monthly_payment(principal: float, annual_rate: float, term_years: float) -> float:
    """Compute the fixed monthly payment for a fully amortizing loan.

    Parameters
    ----------
    principal : float
        Initial loan amount.
    annual_rate : float
        Nominal annual interest rate as a decimal (e.g., 0.065 for 6.5%).
    term_years : float
        Loan term in years.

    Returns
    -------
    float
        The constant principal and interest payment.
    """
    n_months = term_years * MONTHS_IN_YEAR
    monthly_rate = annual_rate / MONTHS_IN_YEAR
    if monthly_rate == 0:
        return principal / n_months
    # P * r / (1 - M^-N), via log1p/expm1 so tiny rates keep their precision
    return principal * monthly_rate / -math.expm1(-n_months * math.log1p(monthly_rate))


def compute_remaining_balance(
    principal: float, annual_rate: float, monthly_payment: float, months_paid: int
) -> float:
    """Closed-form balance after ``months_paid`` payments.

    P_t = P * M^t - Y * (M^t - 1) / (M - 1), with M = 1 + annual_rate / 12.
    """
    monthly_rate = annual_rate / MONTHS_IN_YEAR
    if monthly_rate == 0:
        return principal - monthly_payment * months_paid
    growth_less_one = math.expm1(months_paid * math.log1p(monthly_rate))
    return principal * (1 + growth_less_one) - monthly_payment * growth_less_one / monthly_rate


def _invalid_reason(principal: float, annual_rate: float, term_years: float) -> Optional[str]:
    if not math.isfinite(principal) or principal <= 0:
        return "principal must be positive"
    if not math.isfinite(annual_rate) or annual_rate < 0:
        return "annual rate must be non-negative"
    if not math.isfinite(term_years) or term_years <= 0:
        return "term must be positive"
    n_months = term_years * MONTHS_IN_YEAR
    if n_months < 1:
        return "term must cover at least one month"
    if not math.isclose(n_months, round(n_months), abs_tol=TERM_MONTHS_TOLERANCE):
        return "term must be a whole number of months"
    return None


def _invalid_cost_reason(*costs: Optional[float]) -> Optional[str]:
    for value in costs:
        if value is not None and (not math.isfinite(value) or value < 0):
            return "property tax and insurance inputs must be non-negative"
    return None


def generate_schedule(
    principal: float,
    annual_rate: float,
    term_years: float,
    house_price: Optional[float] = 0.0,
    property_tax_rate: Optional[float] = 0.0,
    annual_insurance: Optional[float] = 0.0,
    *,
    tolerance: float = BALANCE_TOLERANCE,
) -> ScheduleResult:
    """Generate the monthly amortization schedule with taxes and insurance.

    Returns an :class:`EmptyResult` when the loan parameters are not usable
    yet (non-positive principal, a term that is not a positive whole number
    of months, a negative rate or negative tax and insurance inputs).

    Notes
    -----
    - The balance is tracked iteratively; after each payment a balance below
      ``tolerance`` is clamped to exactly zero and the schedule stops there.
    - Missing tax or insurance inputs count as zero.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    reason = _invalid_reason(principal, annual_rate, term_years) or _invalid_cost_reason(
        house_price, property_tax_rate, annual_insurance
    )
    if reason is not None:
        logger.debug(
            "No schedule for principal=%s rate=%s term=%s: %s",
            principal,
            annual_rate,
            term_years,
            reason,
        )
        return EmptyResult(reason=reason)

    monthly_payment = compute_monthly_payment(principal, annual_rate, term_years)
    monthly_tax = (house_price or 0.0) * (property_tax_rate or 0.0) / MONTHS_IN_YEAR
    monthly_insurance = (annual_insurance or 0.0) / MONTHS_IN_YEAR
    total_monthly_payment = monthly_payment + monthly_tax + monthly_insurance

    monthly_rate = annual_rate / MONTHS_IN_YEAR
    n_months = round(term_years * MONTHS_IN_YEAR)

    rows = []
    balance = float(principal)
    total_interest = 0.0
    total_taxes = 0.0
    total_insurance = 0.0
    for month in range(1, n_months + 1):
        interest = balance * monthly_rate
        principal_component = monthly_payment - interest
        balance -= principal_component
        total_interest += interest
        total_taxes += monthly_tax
        total_insurance += monthly_insurance

        # Absorb floating point drift left over from the closed-form payment
        if balance < tolerance:
            balance = 0.0

        rows.append(
            ScheduleEntry(
                month=month,
                principal_and_interest=monthly_payment,
                principal_payment=principal_component,
                interest_payment=interest,
                property_tax=monthly_tax,
                insurance=monthly_insurance,
                total_payment=total_monthly_payment,
                remaining_balance=balance,
                total_interest_paid=total_interest,
                total_taxes_paid=total_taxes,
                total_insurance_paid=total_insurance,
            )
        )
        if balance == 0.0:
            break

    if len(rows) < n_months:
        logger.debug("Balance cleared after %d of %d months", len(rows), n_months)

    return AmortizationResult(
        schedule=tuple(rows),
        monthly_payment=monthly_payment,
        monthly_tax=monthly_tax,
        monthly_insurance=monthly_insurance,
        total_monthly_payment=total_monthly_payment,
        total_interest_paid=total_interest,
        total_taxes_paid=total_taxes,
        total_insurance_paid=total_insurance,
        total_paid=monthly_payment * len(rows) + total_taxes + total_insurance,
        actual_term_months=len(rows),
    )


def compute_payoff_time_months(principal: float, annual_rate: float, monthly_payment: float) -> float:
    """Months needed to retire ``principal`` with a fixed ``monthly_payment``.

    t = -ln(1 - P * r / Y) / ln(1 + r), or P / Y without interest.

    Raises
    ------
    PayoffDomainError
        If the payment does not cover the first month's interest, in which
        case the balance never decreases.
    """
    if not all(math.isfinite(v) for v in (principal, annual_rate, monthly_payment)):
        raise PayoffDomainError("principal, annual rate and monthly payment must be finite")
    if principal < 0 or annual_rate < 0:
        raise PayoffDomainError("principal and annual rate must be non-negative")
    if principal == 0:
        return 0.0
    if monthly_payment <= 0:
        raise PayoffDomainError(f"monthly payment must be positive, got {monthly_payment}")

    monthly_rate = annual_rate / MONTHS_IN_YEAR
    if monthly_rate == 0:
        return principal / monthly_payment

    interest_only = principal * monthly_rate
    if monthly_payment <= interest_only:
        raise PayoffDomainError(
            f"monthly payment {monthly_payment:.2f} does not cover interest of {interest_only:.2f}"
        )
    return -math.log1p(-interest_only / monthly_payment) / math.log1p(monthly_rate)


def schedule_frame(result: ScheduleResult) -> pd.DataFrame:
    """One row per schedule entry; columns follow :data:`SCHEDULE_COLUMNS`."""
    if not result.schedule:
        return pd.DataFrame(columns=list(SCHEDULE_COLUMNS), data=[])
    return pd.DataFrame(
        [[getattr(entry, col) for col in SCHEDULE_COLUMNS] for entry in result.schedule],
        columns=list(SCHEDULE_COLUMNS),
    )


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a monthly schedule frame by year.

    Returns a DataFrame with columns: year, principal_payment, interest_payment,
    property_tax, insurance, total_payment, end_balance
    """
    summed = ["principal_payment", "interest_payment", "property_tax", "insurance", "total_payment"]
    if schedule.empty:
        return pd.DataFrame(columns=["year", *summed, "end_balance"], data=[])

    schedule = schedule.copy()
    schedule["year"] = (schedule["month"] - 1) // MONTHS_IN_YEAR + 1
    agg = schedule.groupby("year", as_index=False)[summed].sum().sort_values("year")
    end_balances = (
        schedule.groupby("year", as_index=False)["remaining_balance"]
        .last()
        .rename(columns={"remaining_balance": "end_balance"})
    )
    return agg.merge(end_balances, on="year", how="left")
