from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent

DEFAULTS: Dict[str, Any] = {
    "house_price": 400_000,
    "down_payment": 80_000,
    "loan_rate": 6.5,
    "loan_years": 30,
    "property_tax_rate": 1.2,
    "annual_insurance": 1_500,
    "balance_tolerance": 0.01,
    "unit_costs": {
        "meal": 3,
        "school_supplies": 50,
        "water_well": 10_000,
        "microloan": 200,
        "vaccination": 20,
    },
}


def config_path() -> Path:
    override = os.environ.get("MORTGAGE_IMPACT_CONFIG")
    return Path(override) if override else BASE_DIR / "config.yaml"


def _load_yaml(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or config_path()
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Merge the YAML file over DEFAULTS (one level deep for unit_costs)."""
    data = _load_yaml(path)
    unit_costs = data.get("unit_costs") or {}
    unknown = sorted(set(unit_costs) - set(DEFAULTS["unit_costs"]))
    if unknown:
        raise ValueError(
            f"unknown unit_costs keys {unknown}; expected {sorted(DEFAULTS['unit_costs'])}"
        )
    cfg = {**DEFAULTS, **data}
    cfg["unit_costs"] = {**DEFAULTS["unit_costs"], **unit_costs}
    return cfg


CFG = load_config()

# Purchase
HOUSE_PRICE: float = float(CFG["house_price"])
DOWN_PAYMENT: float = float(CFG["down_payment"])

# Loan
LOAN_RATE: float = float(CFG["loan_rate"]) / 100.0
LOAN_YEARS: int = int(CFG["loan_years"])

# Recurring costs
PROPERTY_TAX_RATE: float = float(CFG["property_tax_rate"]) / 100.0
ANNUAL_INSURANCE: float = float(CFG["annual_insurance"])

# Engine
BALANCE_TOLERANCE: float = float(CFG["balance_tolerance"])

# Charity unit costs (currency units per outcome)
UNIT_COSTS: Dict[str, float] = {k: float(v) for k, v in CFG["unit_costs"].items()}
