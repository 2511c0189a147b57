"""
Investment Growth Calculations

Future value of a balance with regular contributions. Compound interest
compounds and contributes monthly; the fee impact comparison compounds and
contributes yearly. The two periods are intentionally left as they are.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CompoundInterestResult:
    """Projected growth of savings with monthly compounding."""

    future_value: float = 0.0
    total_contributions: float = 0.0
    interest_earned: float = 0.0


@dataclass(frozen=True)
class FeeImpactResult:
    """Ending balances with and without an annual fee."""

    no_fee: float = 0.0
    with_fee: float = 0.0
    lost_to_fees: float = 0.0
    fee_rate: float = 0.0


def calculate_compound_interest(
    principal: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    years: float,
) -> CompoundInterestResult:
    """
    Calculate future value with monthly compounding and contributions.

    Args:
        principal: Starting balance
        monthly_contribution: Amount added at the end of each month
        annual_rate_percent: Annual interest rate in percent (e.g., 6 for 6%)
        years: Years to grow, must be greater than 0

    Returns:
        CompoundInterestResult with future value, contributions and interest
    """
    months = years * 12
    monthly_rate = annual_rate_percent / 100 / 12
    total_contributions = principal + monthly_contribution * months

    if annual_rate_percent == 0:
        future_value = total_contributions
    else:
        growth = math.pow(1 + monthly_rate, months)
        future_value = principal * growth + monthly_contribution * (
            (growth - 1) / monthly_rate
        )

    return CompoundInterestResult(
        future_value=future_value,
        total_contributions=total_contributions,
        interest_earned=future_value - total_contributions,
    )


def calculate_growth(
    starting_balance: float, annual_contribution: float, rate: float, years: float
) -> float:
    """
    Grow a balance with yearly compounding and yearly contributions.

    Args:
        starting_balance: Amount already invested
        annual_contribution: Amount added at the end of each year
        rate: Annual rate as decimal; may be negative
        years: Years invested

    Returns:
        Ending balance

    Raises:
        OverflowError: The growth factor is too large for a float
        ValueError: The rate is below -100% and years is fractional
    """
    if rate == 0:
        return starting_balance + annual_contribution * years

    factor = math.pow(1 + rate, years)
    return starting_balance * factor + annual_contribution * ((factor - 1) / rate)


def calculate_fee_impact(
    starting_balance: float,
    annual_contribution: float,
    annual_return_percent: float,
    years: float,
    annual_fee_percent: float,
) -> FeeImpactResult:
    """
    Compare growth at the gross return against growth net of an annual fee.

    A fee larger than the return gives a negative net rate, which shrinks
    the balance rather than being rejected.
    """
    gross_rate = annual_return_percent / 100
    net_rate = gross_rate - annual_fee_percent / 100

    no_fee = calculate_growth(starting_balance, annual_contribution, gross_rate, years)
    with_fee = calculate_growth(starting_balance, annual_contribution, net_rate, years)

    return FeeImpactResult(
        no_fee=no_fee,
        with_fee=with_fee,
        lost_to_fees=no_fee - with_fee,
        fee_rate=annual_fee_percent,
    )
