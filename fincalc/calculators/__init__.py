"""
Calculator descriptors.

Each calculator pairs a set of validated input fields with one of the
pure calculation functions in fincalc.calculations.
"""

from fincalc.calculators.base import Calculator, CalculatorRun, FAQItem, InputField, ResultItem
from fincalc.calculators.registry import CALCULATORS, get_calculator, list_calculators

__all__ = [
    "Calculator",
    "CalculatorRun",
    "FAQItem",
    "InputField",
    "ResultItem",
    "CALCULATORS",
    "get_calculator",
    "list_calculators",
]
