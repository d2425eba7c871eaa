"""
Calculator registry: maps treatment categories to calculator classes.

Anything whose category mentions "blind" is costed by area; every other
treatment (curtains, sheers, pelmets...) uses linear fabric usage.
"""

import re

from .base import BaseCalculator
from .blind_usage import BlindUsageCalculator
from .fabric_usage import FabricUsageCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "curtains": FabricUsageCalculator,
    "blinds": BlindUsageCalculator,
}

_BLIND_PATTERN = re.compile(r"blind", re.IGNORECASE)


def is_blind(treatment_category) -> bool:
    return bool(treatment_category) and bool(_BLIND_PATTERN.search(str(treatment_category)))


def get_calculator(treatment_category=None) -> BaseCalculator:
    """Returns a calculator instance for a treatment category. Unknown categories get curtains."""
    if is_blind(treatment_category):
        return CALCULATOR_REGISTRY["blinds"]()
    return CALCULATOR_REGISTRY["curtains"]()


def has_calculator(treatment_category: str) -> bool:
    """Check if a calculator is registered under this exact key."""
    return treatment_category in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered treatment categories."""
    return list(CALCULATOR_REGISTRY.keys())
