"""
Salary Conversion

Straight-line conversion of an annual salary into hourly, weekly and
monthly pay. Monthly pay is always annual / 12, regardless of weeks worked.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PayBreakdown:
    hourly: float = 0.0
    weekly: float = 0.0
    monthly: float = 0.0


def calculate_pay_breakdown(
    annual_salary: float, hours_per_week: float, weeks_per_year: float
) -> PayBreakdown:
    """Convert gross annual salary to hourly, weekly and monthly pay."""
    return PayBreakdown(
        hourly=annual_salary / (hours_per_week * weeks_per_year),
        weekly=annual_salary / weeks_per_year,
        monthly=annual_salary / 12,
    )
