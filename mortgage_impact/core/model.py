from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import pandas as pd

from .amortization import (
    BALANCE_TOLERANCE,
    ScheduleResult,
    aggregate_yearly,
    compute_payoff_time_months,
    generate_schedule,
    schedule_frame,
)
from .charity import DEFAULT_UNIT_COSTS, ImpactSummary, UnitCosts, impact_for


@dataclass(frozen=True)
class MortgageInputs:
    # Purchase
    house_price: float = 400_000.0
    down_payment: float = 80_000.0

    # Loan
    annual_rate: float = 0.065
    term_years: int = 30

    # Recurring costs
    property_tax_rate: float = 0.012
    annual_insurance: float = 1_500.0

    @property
    def principal(self) -> float:
        return max(0.0, self.house_price - self.down_payment)


class MortgageModel:
    def __init__(
        self,
        inputs: MortgageInputs,
        tolerance: float = BALANCE_TOLERANCE,
        unit_costs: UnitCosts = DEFAULT_UNIT_COSTS,
    ):
        self.inputs = inputs
        self.unit_costs = unit_costs
        self.result: ScheduleResult = generate_schedule(
            principal=inputs.principal,
            annual_rate=inputs.annual_rate,
            term_years=inputs.term_years,
            house_price=inputs.house_price,
            property_tax_rate=inputs.property_tax_rate,
            annual_insurance=inputs.annual_insurance,
            tolerance=tolerance,
        )
        self.monthly: pd.DataFrame = schedule_frame(self.result)
        self.yearly: pd.DataFrame = aggregate_yearly(self.monthly)

    @property
    def computed(self) -> bool:
        return self.result.computed

    def impact(self) -> ImpactSummary:
        return impact_for(self.result, unit_costs=self.unit_costs)

    def payoff_with_extra(self, extra_monthly: float) -> float:
        """Months to payoff when ``extra_monthly`` is added to every loan payment.

        Uses the closed-form payoff time, no schedule is generated.
        """
        if extra_monthly < 0:
            raise ValueError(f"extra payment must be non-negative, got {extra_monthly}")
        return compute_payoff_time_months(
            self.inputs.principal,
            self.inputs.annual_rate,
            self.result.monthly_payment + extra_monthly,
        )

    def run(self) -> Dict[str, object]:
        return {
            "result": self.result,
            "monthly": self.monthly,
            "yearly": self.yearly,
            "impact": self.impact(),
        }
