"""
Loan Amortization Calculations

Fixed-rate loan payment, mortgage payment breakdown, and the inverse
problem of how long a fixed payment takes to clear a balance.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LoanPaymentResult:
    """Monthly payment and lifetime cost of a fixed-rate loan."""

    payment: float = 0.0
    total_interest: float = 0.0
    total_cost: float = 0.0


@dataclass(frozen=True)
class MortgagePaymentResult:
    """Monthly mortgage payment split into its components."""

    loan_amount: float = 0.0
    principal_and_interest: float = 0.0
    taxes: float = 0.0
    insurance: float = 0.0
    hoa: float = 0.0
    total: float = 0.0


@dataclass(frozen=True)
class PayoffResult:
    """Time and cost to pay off a balance with a fixed monthly payment."""

    months: float = 0.0
    total_interest: float = 0.0
    total_paid: float = 0.0


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate to the per-month decimal rate."""
    return annual_rate_percent / 100 / 12


def calculate_payment(
    principal: float, annual_rate_percent: float, amortization_months: float
) -> float:
    """
    Calculate monthly loan payment.

    Args:
        principal: Loan principal amount
        annual_rate_percent: Annual interest rate in percent (e.g., 7 for 7%)
        amortization_months: Total amortization period in months

    Returns:
        Monthly payment amount
    """
    if annual_rate_percent == 0:
        return principal / amortization_months

    rate = monthly_rate(annual_rate_percent)
    return principal * rate / (1 - (1 + rate) ** (-amortization_months))


def calculate_loan_payment(
    amount: float, annual_rate_percent: float, years: float
) -> LoanPaymentResult:
    """Payment, total interest and total cost over the full term."""
    months = years * 12
    payment = calculate_payment(amount, annual_rate_percent, months)
    total_cost = payment * months

    return LoanPaymentResult(
        payment=payment,
        total_interest=total_cost - amount,
        total_cost=total_cost,
    )


def calculate_mortgage_payment(
    home_price: float,
    down_payment: float,
    annual_rate_percent: float,
    years: float,
    property_tax_rate_percent: float,
    annual_insurance: float,
    monthly_hoa: float,
) -> MortgagePaymentResult:
    """
    Calculate the monthly cost of a mortgage.

    Property tax is a yearly percentage of the home price; insurance is a
    yearly amount; HOA (or PMI) is already monthly.
    """
    loan_amount = home_price - down_payment
    principal_and_interest = calculate_payment(
        loan_amount, annual_rate_percent, years * 12
    )
    taxes = home_price * (property_tax_rate_percent / 100) / 12
    insurance = annual_insurance / 12

    return MortgagePaymentResult(
        loan_amount=loan_amount,
        principal_and_interest=principal_and_interest,
        taxes=taxes,
        insurance=insurance,
        hoa=monthly_hoa,
        total=principal_and_interest + taxes + insurance + monthly_hoa,
    )


def is_payment_too_low(
    balance: float, annual_rate_percent: float, payment: float
) -> bool:
    """True when the payment does not cover the first month's interest."""
    return annual_rate_percent > 0 and payment <= balance * monthly_rate(
        annual_rate_percent
    )


def calculate_payoff_months(
    balance: float, annual_rate_percent: float, payment: float
) -> float:
    """
    Solve the amortization formula for the number of months.

    Callers must rule out is_payment_too_low() first; the result is
    fractional and is not rounded here.
    """
    if annual_rate_percent == 0:
        return balance / payment

    rate = monthly_rate(annual_rate_percent)
    return -math.log(1 - rate * balance / payment) / math.log(1 + rate)


def calculate_payoff(
    balance: float, annual_rate_percent: float, payment: float
) -> PayoffResult:
    """Months to pay off, plus totals assuming every month is a full payment."""
    months = calculate_payoff_months(balance, annual_rate_percent, payment)
    total_paid = payment * math.ceil(months)

    return PayoffResult(
        months=months,
        total_interest=total_paid - balance,
        total_paid=total_paid,
    )
