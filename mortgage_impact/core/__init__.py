from .amortization import (
	AmortizationResult,
	EmptyResult,
	ScheduleEntry,
	aggregate_yearly,
	compute_monthly_payment,
	compute_payoff_time_months,
	compute_remaining_balance,
	generate_schedule,
	schedule_frame,
)
from .charity import ImpactSummary, UnitCosts, compute_charity_impact
from .errors import MortgageImpactError, PayoffDomainError, TaxLookupError
from .model import MortgageInputs, MortgageModel
from .tax_rates import lookup, lookup_property_tax, suggested_rates

__all__ = [
	"AmortizationResult",
	"EmptyResult",
	"ScheduleEntry",
	"aggregate_yearly",
	"compute_monthly_payment",
	"compute_payoff_time_months",
	"compute_remaining_balance",
	"generate_schedule",
	"schedule_frame",
	"ImpactSummary",
	"UnitCosts",
	"compute_charity_impact",
	"MortgageImpactError",
	"PayoffDomainError",
	"TaxLookupError",
	"MortgageInputs",
	"MortgageModel",
	"lookup",
	"lookup_property_tax",
	"suggested_rates",
]
