"""
Financial Calculation Engine

Closed-form personal-finance formulas. Every function here is pure and
expects inputs that have already passed validation.
"""

from fincalc.calculations import amortization, growth, salary, validation

__all__ = ["amortization", "growth", "salary", "validation"]
