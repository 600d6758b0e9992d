from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent


def _load_yaml() -> Dict[str, Any]:
    with open(BASE_DIR / "config.yaml", "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


CFG = _load_yaml()

# Purchase
PROPERTY_PRICE: float = float(CFG["property_price"])
DEPOSIT_PCT: float = float(CFG["deposit_pct"])  # percent of price, 0..100

# Loan
INTEREST_RATE_PCT: float = float(CFG["interest_rate_pct"])  # nominal annual, percent
LOAN_YEARS: int = int(CFG["loan_years"])
ADDITIONAL_REPAYMENT: float = float(CFG["additional_repayment"])  # per month

# Quarterly fees
STRATA_QUARTERLY: float = float(CFG["strata_quarterly"])
COUNCIL_QUARTERLY: float = float(CFG["council_quarterly"])
WATER_QUARTERLY: float = float(CFG["water_quarterly"])
