from __future__ import annotations


class MortgageImpactError(Exception):
    """Base class for errors raised by mortgage_impact."""


class PayoffDomainError(MortgageImpactError, ValueError):
    """The payment never retires the loan (it does not cover the interest)."""


class TaxLookupError(MortgageImpactError, ValueError):
    """A property tax lookup key is malformed."""
