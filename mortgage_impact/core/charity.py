from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .amortization import ScheduleResult


@dataclass(frozen=True)
class UnitCosts:
    """Cost of one unit of each charitable outcome, in currency units."""

    meal: float = 3.0
    school_supplies: float = 50.0  # one child, one school year
    water_well: float = 10_000.0
    microloan: float = 200.0
    vaccination: float = 20.0  # one full vaccination set

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            if value <= 0:
                raise ValueError(f"unit cost '{name}' must be positive, got {value}")


DEFAULT_UNIT_COSTS = UnitCosts()


@dataclass(frozen=True)
class MealsBreakdown:
    interest_meals: int
    tax_meals: int
    insurance_meals: int


@dataclass(frozen=True)
class ImpactSummary:
    total_interest: float
    total_taxes: float
    total_insurance: float
    total_wasted: float
    meals_provided: int
    school_supplies: int
    water_wells: int
    microloans: int
    vaccinations: int
    breakdown: MealsBreakdown


def _units(amount: float, unit_cost: float) -> int:
    # Floor so the counts never overstate what the money buys
    return int(math.floor(amount / unit_cost))


def compute_charity_impact(
    total_interest: Optional[float],
    total_taxes: Optional[float] = 0.0,
    total_insurance: Optional[float] = 0.0,
    *,
    unit_costs: UnitCosts = DEFAULT_UNIT_COSTS,
) -> ImpactSummary:
    """Express interest, taxes and insurance as charitable outcomes.

    Each count is ``floor(amount / unit cost)``. The meals breakdown applies
    the same division to each category on its own.
    """
    interest = total_interest or 0.0
    taxes = total_taxes or 0.0
    insurance = total_insurance or 0.0
    wasted = interest + taxes + insurance
    return ImpactSummary(
        total_interest=interest,
        total_taxes=taxes,
        total_insurance=insurance,
        total_wasted=wasted,
        meals_provided=_units(wasted, unit_costs.meal),
        school_supplies=_units(wasted, unit_costs.school_supplies),
        water_wells=_units(wasted, unit_costs.water_well),
        microloans=_units(wasted, unit_costs.microloan),
        vaccinations=_units(wasted, unit_costs.vaccination),
        breakdown=MealsBreakdown(
            interest_meals=_units(interest, unit_costs.meal),
            tax_meals=_units(taxes, unit_costs.meal),
            insurance_meals=_units(insurance, unit_costs.meal),
        ),
    )


def impact_for(result: ScheduleResult, *, unit_costs: UnitCosts = DEFAULT_UNIT_COSTS) -> ImpactSummary:
    """Convenience wrapper applying :func:`compute_charity_impact` to a schedule."""
    return compute_charity_impact(
        result.total_interest_paid,
        result.total_taxes_paid,
        result.total_insurance_paid,
        unit_costs=unit_costs,
    )
