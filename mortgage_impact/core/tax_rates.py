from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Final, List, Optional, Union

from .errors import TaxLookupError


logger = logging.getLogger(__name__)

NATIONAL_AVERAGE_RATE: Final[float] = 0.0121


@dataclass(frozen=True)
class TaxRateInfo:
    rate: float
    zip_code: str
    city: str
    state: str
    county: str
    source: str  # local_data | state_average | national_average
    note: Optional[str] = None


@dataclass(frozen=True)
class SuggestedRate:
    label: str
    rate: float
    description: str


# zip -> (annual rate, city, state, county)
ZIP_TAX_RATES: Final[Dict[str, tuple]] = {
    # Texas
    "75001": (0.0235, "Addison", "TX", "Dallas County"),
    "75201": (0.0241, "Dallas", "TX", "Dallas County"),
    "77001": (0.0267, "Houston", "TX", "Harris County"),
    "78701": (0.0243, "Austin", "TX", "Travis County"),
    "78201": (0.0253, "San Antonio", "TX", "Bexar County"),
    # California
    "90210": (0.0075, "Beverly Hills", "CA", "Los Angeles County"),
    "94102": (0.0074, "San Francisco", "CA", "San Francisco County"),
    "94301": (0.0069, "Palo Alto", "CA", "Santa Clara County"),
    "90001": (0.0075, "Los Angeles", "CA", "Los Angeles County"),
    # New York
    "10001": (0.0123, "New York", "NY", "New York County"),
    "11201": (0.0087, "Brooklyn", "NY", "Kings County"),
    "10301": (0.0087, "Staten Island", "NY", "Richmond County"),
    # Florida
    "33101": (0.0127, "Miami", "FL", "Miami-Dade County"),
    "32801": (0.0109, "Orlando", "FL", "Orange County"),
    "33601": (0.0123, "Tampa", "FL", "Hillsborough County"),
    # Illinois
    "60601": (0.0231, "Chicago", "IL", "Cook County"),
    # New Jersey
    "07001": (0.0249, "Avenel", "NJ", "Middlesex County"),
    "07302": (0.0124, "Jersey City", "NJ", "Hudson County"),
    # Others
    "89101": (0.0084, "Las Vegas", "NV", "Clark County"),
    "98101": (0.0092, "Seattle", "WA", "King County"),
    "80201": (0.0055, "Denver", "CO", "Denver County"),
    "85001": (0.0066, "Phoenix", "AZ", "Maricopa County"),
    "02101": (0.0105, "Boston", "MA", "Suffolk County"),
    "30301": (0.0107, "Atlanta", "GA", "Fulton County"),
    "27601": (0.0084, "Raleigh", "NC", "Wake County"),
    "37201": (0.0063, "Nashville", "TN", "Davidson County"),
    "43215": (0.0159, "Columbus", "OH", "Franklin County"),
    "48201": (0.0249, "Detroit", "MI", "Wayne County"),
}

STATE_AVERAGE_RATES: Final[Dict[str, float]] = {
    "AL": 0.0041, "AK": 0.0113, "AZ": 0.0066, "AR": 0.0062, "CA": 0.0075,
    "CO": 0.0051, "CT": 0.0208, "DE": 0.0057, "FL": 0.0083, "GA": 0.0092,
    "HI": 0.0031, "ID": 0.0069, "IL": 0.0218, "IN": 0.0085, "IA": 0.0154,
    "KS": 0.0141, "KY": 0.0086, "LA": 0.0056, "ME": 0.0133, "MD": 0.0109,
    "MA": 0.0121, "MI": 0.0154, "MN": 0.0111, "MS": 0.0059, "MO": 0.0098,
    "MT": 0.0084, "NE": 0.0178, "NV": 0.0084, "NH": 0.0186, "NJ": 0.0249,
    "NM": 0.0080, "NY": 0.0173, "NC": 0.0084, "ND": 0.0098, "OH": 0.0157,
    "OK": 0.0090, "OR": 0.0087, "PA": 0.0135, "RI": 0.0147, "SC": 0.0057,
    "SD": 0.0128, "TN": 0.0067, "TX": 0.0181, "UT": 0.0061, "VT": 0.0190,
    "VA": 0.0083, "WA": 0.0093, "WV": 0.0059, "WI": 0.0169, "WY": 0.0062,
}

SUGGESTED_RATES: Final[List[SuggestedRate]] = [
    SuggestedRate("Texas (Dallas/Houston)", 0.024, "High property taxes, no state income tax"),
    SuggestedRate("California (Bay Area)", 0.007, "Low property tax rate, high home values"),
    SuggestedRate("New Jersey", 0.025, "Highest property taxes in US"),
    SuggestedRate("Florida", 0.010, "No state income tax, moderate property taxes"),
    SuggestedRate("New York (NYC)", 0.012, "High property taxes, expensive real estate"),
    SuggestedRate("Nevada", 0.008, "No state income tax, low property taxes"),
    SuggestedRate("US National Average", 0.012, "Average across all US states"),
]


def _validate_zip(zip_code: str) -> str:
    zip_code = (zip_code or "").strip()
    if len(zip_code) != 5 or not zip_code.isdigit():
        raise TaxLookupError(f"expected a 5-digit zip code, got {zip_code!r}")
    return zip_code


def lookup_property_tax(zip_code: str, state: Optional[str] = None) -> TaxRateInfo:
    """Suggest an annual property tax rate for a zip code.

    Falls back to the average for ``state`` (a two-letter code the caller
    obtained elsewhere, e.g. from a geocoder) and then to the US average.
    """
    zip_code = _validate_zip(zip_code)

    if zip_code in ZIP_TAX_RATES:
        rate, city, zip_state, county = ZIP_TAX_RATES[zip_code]
        return TaxRateInfo(
            rate=rate, zip_code=zip_code, city=city, state=zip_state, county=county, source="local_data"
        )

    state_code = (state or "").strip().upper()
    if state_code in STATE_AVERAGE_RATES:
        logger.info("No local rate for %s, using %s state average", zip_code, state_code)
        return TaxRateInfo(
            rate=STATE_AVERAGE_RATES[state_code],
            zip_code=zip_code,
            city="Unknown",
            state=state_code,
            county=f"{state_code} County",
            source="state_average",
            note=f"Using {state_code} state average. Actual rate may vary by municipality.",
        )

    logger.info("No local or state rate for %s, using national average", zip_code)
    return TaxRateInfo(
        rate=NATIONAL_AVERAGE_RATE,
        zip_code=zip_code,
        city="Unknown",
        state="Unknown",
        county="Unknown",
        source="national_average",
        note="Using US national average. Please verify with local tax assessor.",
    )


def suggested_rates() -> List[SuggestedRate]:
    return list(SUGGESTED_RATES)


def lookup(key: str) -> Optional[Union[TaxRateInfo, SuggestedRate]]:
    """Find a rate by zip code or suggested region label, or None."""
    key = (key or "").strip()
    if key in ZIP_TAX_RATES:
        return lookup_property_tax(key)
    wanted = key.casefold()
    for suggestion in SUGGESTED_RATES:
        if suggestion.label.casefold() == wanted:
            return suggestion
    return None
