import logging

import pytest

from mortgage_impact.core.errors import TaxLookupError
from mortgage_impact.core.tax_rates import (
    NATIONAL_AVERAGE_RATE,
    SuggestedRate,
    TaxRateInfo,
    lookup,
    lookup_property_tax,
    suggested_rates,
)


def test_known_zip_uses_local_data():
    info = lookup_property_tax("78701")
    assert info.rate == 0.0243
    assert info.city == "Austin"
    assert info.state == "TX"
    assert info.source == "local_data"
    assert info.note is None


def test_unknown_zip_with_state_uses_state_average(caplog):
    with caplog.at_level(logging.INFO, logger="mortgage_impact.core.tax_rates"):
        info = lookup_property_tax("73301", state="tx")
    assert info.rate == 0.0181
    assert info.state == "TX"
    assert info.source == "state_average"
    assert "TX state average" in info.note
    assert "state average" in caplog.text


def test_unknown_zip_without_state_uses_national_average():
    info = lookup_property_tax("12345")
    assert info.rate == NATIONAL_AVERAGE_RATE
    assert info.source == "national_average"
    assert info.zip_code == "12345"


def test_unknown_state_falls_back_to_national_average():
    assert lookup_property_tax("12345", state="ZZ").source == "national_average"


@pytest.mark.parametrize("zip_code", ["", "1234", "123456", "abcde", None])
def test_malformed_zip_rejected(zip_code):
    with pytest.raises(TaxLookupError):
        lookup_property_tax(zip_code)


def test_suggested_rates_are_copies():
    rates = suggested_rates()
    assert len(rates) == 7
    rates.clear()
    assert len(suggested_rates()) == 7


def test_lookup_by_zip_or_label():
    by_zip = lookup("90210")
    assert isinstance(by_zip, TaxRateInfo)
    assert by_zip.city == "Beverly Hills"

    by_label = lookup("new jersey")
    assert isinstance(by_label, SuggestedRate)
    assert by_label.rate == 0.025


def test_lookup_not_found():
    assert lookup("Atlantis") is None
    assert lookup("12345") is None
