from __future__ import annotations

from typing import Dict

import config

from .charity import UnitCosts
from .model import MortgageInputs, MortgageModel


def default_inputs() -> MortgageInputs:
    return MortgageInputs(
        house_price=config.HOUSE_PRICE,
        down_payment=config.DOWN_PAYMENT,
        annual_rate=config.LOAN_RATE,
        term_years=config.LOAN_YEARS,
        property_tax_rate=config.PROPERTY_TAX_RATE,
        annual_insurance=config.ANNUAL_INSURANCE,
    )


def build_model(inputs: MortgageInputs) -> MortgageModel:
    return MortgageModel(
        inputs,
        tolerance=config.BALANCE_TOLERANCE,
        unit_costs=UnitCosts(**config.UNIT_COSTS),
    )


def run(inputs: MortgageInputs) -> Dict[str, object]:
    return build_model(inputs).run()


def payoff_with_extra(inputs: MortgageInputs, extra_monthly: float) -> float:
    return build_model(inputs).payoff_with_extra(extra_monthly)
