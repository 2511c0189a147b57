"""
The six calculators offered by the site.
"""

import math
from typing import Dict, List, Mapping

from fincalc.calculations.amortization import (
    LoanPaymentResult,
    MortgagePaymentResult,
    PayoffResult,
    calculate_loan_payment,
    calculate_mortgage_payment,
    calculate_payoff,
    is_payment_too_low,
)
from fincalc.calculations.growth import (
    CompoundInterestResult,
    FeeImpactResult,
    calculate_compound_interest,
    calculate_fee_impact,
)
from fincalc.calculations.salary import PayBreakdown, calculate_pay_breakdown
from fincalc.calculations.validation import (
    Constraint,
    FieldRule,
    ValidationResult,
    has_errors,
    is_positive,
)
from fincalc.calculators.base import Calculator, FAQItem, InputField, ResultItem
from fincalc.formatting import (
    format_currency,
    format_number,
    format_percent,
    format_years_and_months,
)

POSITIVE = Constraint.POSITIVE
NON_NEGATIVE = Constraint.NON_NEGATIVE

NON_NEGATIVE_RATE = "Enter a non-negative rate."
NON_NEGATIVE_AMOUNT = "Enter a non-negative amount."
TERM_GREATER_THAN_ZERO = "Enter a term greater than 0."
PAYMENT_TOO_LOW = "Payment is too low to reduce the balance."
DOWN_PAYMENT_TOO_HIGH = "Down payment cannot exceed the home price."


# =============================================================================
# COMPOUND INTEREST
# =============================================================================


def _compound_interest(values: Mapping[str, float]) -> CompoundInterestResult:
    return calculate_compound_interest(
        principal=values["principal"],
        monthly_contribution=values["contribution"],
        annual_rate_percent=values["rate"],
        years=values["years"],
    )


def _present_compound_interest(result: CompoundInterestResult, values):
    years = values["years"] if is_positive(values["years"]) else 0
    items = [
        ResultItem("Future value", format_currency(result.future_value, 2)),
        ResultItem("Total contributions", format_currency(result.total_contributions, 2)),
        ResultItem("Interest earned", format_currency(result.interest_earned, 2)),
    ]
    note = (
        f"Over {format_number(years)} years, your balance could reach "
        f"{format_currency(result.future_value, 2)}."
    )
    return items, note


COMPOUND_INTEREST = Calculator(
    id="compound-interest",
    title="Compound Interest Calculator",
    intro="Estimate how your savings grow with compounding and steady monthly contributions.",
    results_title="Estimated growth",
    fields=(
        InputField(
            FieldRule("principal", NON_NEGATIVE, "Enter a non-negative number."),
            label="Starting balance",
            default="5000",
            helper="The amount you have saved today.",
        ),
        InputField(
            FieldRule("contribution", NON_NEGATIVE, "Enter a non-negative number."),
            label="Monthly contribution",
            default="200",
            helper="How much you plan to add each month.",
        ),
        InputField(
            FieldRule("rate", NON_NEGATIVE, NON_NEGATIVE_RATE),
            label="Annual interest rate",
            default="6",
            unit="%",
            helper="Use the expected yearly return rate.",
            step="0.01",
        ),
        InputField(
            FieldRule("years", POSITIVE, "Enter a number greater than 0."),
            label="Years to grow",
            default="20",
            unit="years",
            helper="Total time your money is invested.",
            step="1",
        ),
    ),
    result_type=CompoundInterestResult,
    compute=_compound_interest,
    present=_present_compound_interest,
    faqs=(
        FAQItem(
            "What does compound interest mean?",
            "Compound interest means you earn interest on your original balance "
            "and on the interest already earned.",
        ),
        FAQItem(
            "How often is interest compounded here?",
            "This calculator assumes monthly compounding and monthly contributions.",
        ),
        FAQItem(
            "Can I set contributions to zero?",
            "Yes. Enter 0 for monthly contributions to see growth from the "
            "starting balance only.",
        ),
        FAQItem(
            "Does this include taxes or inflation?",
            "No. Results are gross estimates before taxes or inflation effects.",
        ),
    ),
)


# =============================================================================
# LOAN PAYMENT
# =============================================================================


def _loan_payment(values: Mapping[str, float]) -> LoanPaymentResult:
    return calculate_loan_payment(values["amount"], values["rate"], values["years"])


def _present_loan_payment(result: LoanPaymentResult, values):
    items = [
        ResultItem("Monthly payment", format_currency(result.payment, 2)),
        ResultItem("Total interest", format_currency(result.total_interest, 2)),
        ResultItem("Total cost", format_currency(result.total_cost, 2)),
    ]
    return items, "This estimate assumes on-time monthly payments over the full term."


LOAN_PAYMENT = Calculator(
    id="loan-payment",
    title="Loan Payment Calculator",
    intro="Estimate your monthly payment, total interest, and overall cost for a fixed-rate loan.",
    results_title="Loan payment summary",
    fields=(
        InputField(
            FieldRule("amount", POSITIVE, "Enter a loan amount greater than 0."),
            label="Loan amount",
            default="20000",
            helper="Total amount you plan to borrow.",
        ),
        InputField(
            FieldRule("rate", NON_NEGATIVE, NON_NEGATIVE_RATE),
            label="Annual interest rate",
            default="7",
            unit="%",
            helper="Interest rate before fees or discounts.",
            step="0.01",
        ),
        InputField(
            FieldRule("years", POSITIVE, TERM_GREATER_THAN_ZERO),
            label="Loan term",
            default="5",
            unit="years",
            helper="Length of the loan in years.",
            step="1",
        ),
    ),
    result_type=LoanPaymentResult,
    compute=_loan_payment,
    present=_present_loan_payment,
    faqs=(
        FAQItem(
            "Is this for fixed-rate loans only?",
            "Yes. Variable-rate loans require a schedule of rate changes to "
            "estimate accurately.",
        ),
        FAQItem(
            "Does this include fees or taxes?",
            "No. It only models principal and interest for a standard amortized loan.",
        ),
        FAQItem(
            "Can I use this for auto loans?",
            "Yes. Any fixed-rate installment loan works with this formula.",
        ),
        FAQItem(
            "What if my rate is 0%?",
            "The payment is simply the loan amount divided by the total number of months.",
        ),
    ),
)


# =============================================================================
# MORTGAGE PAYMENT
# =============================================================================


def _check_down_payment(
    values: Mapping[str, float], errors: ValidationResult
) -> ValidationResult:
    # Only meaningful once both amounts parsed; otherwise their own rules fail
    home_price = values["home_price"]
    down_payment = values["down_payment"]
    if math.isfinite(home_price) and math.isfinite(down_payment):
        if home_price - down_payment < 0:
            return {"loan_amount": DOWN_PAYMENT_TOO_HIGH}
    return {"loan_amount": None}


def _mortgage_payment(values: Mapping[str, float]) -> MortgagePaymentResult:
    return calculate_mortgage_payment(
        home_price=values["home_price"],
        down_payment=values["down_payment"],
        annual_rate_percent=values["rate"],
        years=values["years"],
        property_tax_rate_percent=values["tax_rate"],
        annual_insurance=values["insurance"],
        monthly_hoa=values["hoa"],
    )


def _present_mortgage_payment(result: MortgagePaymentResult, values):
    items = [
        ResultItem("Principal & interest", format_currency(result.principal_and_interest, 2)),
        ResultItem("Property taxes", format_currency(result.taxes, 2)),
        ResultItem("Insurance", format_currency(result.insurance, 2)),
        ResultItem("HOA / PMI", format_currency(result.hoa, 2)),
        ResultItem("Total monthly payment", format_currency(result.total, 2)),
    ]
    note = f"Loan amount: {format_currency(result.loan_amount, 2)}."
    return items, note


MORTGAGE_PAYMENT = Calculator(
    id="mortgage-payment",
    title="Mortgage Payment Calculator",
    intro="Estimate a monthly mortgage payment including taxes, insurance, and HOA dues.",
    results_title="Monthly payment breakdown",
    fields=(
        InputField(
            FieldRule("home_price", POSITIVE, "Enter a home price greater than 0."),
            label="Home price",
            default="350000",
            helper="Purchase price of the home.",
        ),
        InputField(
            FieldRule("down_payment", NON_NEGATIVE, "Enter a non-negative down payment."),
            label="Down payment",
            default="70000",
            helper="Cash paid upfront.",
        ),
        InputField(
            FieldRule("rate", NON_NEGATIVE, NON_NEGATIVE_RATE),
            label="Annual interest rate",
            default="6.2",
            unit="%",
            helper="Fixed mortgage rate.",
            step="0.01",
        ),
        InputField(
            FieldRule("years", POSITIVE, TERM_GREATER_THAN_ZERO),
            label="Loan term",
            default="30",
            unit="years",
            helper="Length of the mortgage in years.",
            step="1",
        ),
        InputField(
            FieldRule("tax_rate", NON_NEGATIVE, "Enter a non-negative tax rate."),
            label="Property tax rate",
            default="1.1",
            unit="%",
            helper="Yearly tax as a percent of the home price.",
            step="0.01",
        ),
        InputField(
            FieldRule("insurance", NON_NEGATIVE, NON_NEGATIVE_AMOUNT),
            label="Home insurance",
            default="1200",
            unit="USD/year",
            helper="Yearly homeowners insurance premium.",
        ),
        InputField(
            FieldRule("hoa", NON_NEGATIVE, NON_NEGATIVE_AMOUNT),
            label="HOA or PMI",
            default="0",
            unit="USD/month",
            helper="Monthly HOA dues or PMI.",
        ),
    ),
    result_type=MortgagePaymentResult,
    compute=_mortgage_payment,
    present=_present_mortgage_payment,
    cross_checks=(_check_down_payment,),
    faqs=(
        FAQItem(
            "Does this include PMI?",
            "No. Add PMI to the HOA field if you want to include it in the estimate.",
        ),
        FAQItem(
            "Are property taxes required?",
            "They are optional but recommended for a realistic payment estimate.",
        ),
        FAQItem(
            "Can I use this for refinancing?",
            "Yes. Use your new loan balance, rate, and term to estimate the new payment.",
        ),
        FAQItem(
            "Why is my payment different from a lender quote?",
            "Lenders may include insurance, escrow fees, and other items not modeled here.",
        ),
    ),
)


# =============================================================================
# STUDENT LOAN PAYOFF
# =============================================================================


def _check_payment_covers_interest(
    values: Mapping[str, float], errors: ValidationResult
) -> ValidationResult:
    if has_errors(errors):
        return {}
    if is_payment_too_low(values["balance"], values["rate"], values["payment"]):
        return {"payment": PAYMENT_TOO_LOW}
    return {}


def _student_loan_payoff(values: Mapping[str, float]) -> PayoffResult:
    return calculate_payoff(values["balance"], values["rate"], values["payment"])


def _present_student_loan_payoff(result: PayoffResult, values):
    items = [
        ResultItem("Time to pay off", format_years_and_months(result.months)),
        ResultItem("Total interest", format_currency(result.total_interest, 2)),
        ResultItem("Total paid", format_currency(result.total_paid, 2)),
    ]
    note = (
        f"That is roughly {format_number(result.months)} months of payments "
        "at the current rate."
    )
    return items, note


STUDENT_LOAN_PAYOFF = Calculator(
    id="student-loan-payoff",
    title="Student Loan Payoff Calculator",
    intro="Estimate how long it could take to pay off your student loans based on "
    "your current payment.",
    results_title="Payoff estimate",
    fields=(
        InputField(
            FieldRule("balance", POSITIVE, "Enter a balance greater than 0."),
            label="Current balance",
            default="28000",
            helper="Total remaining loan balance.",
        ),
        InputField(
            FieldRule("rate", NON_NEGATIVE, NON_NEGATIVE_RATE),
            label="Annual interest rate",
            default="5",
            unit="%",
            helper="Interest rate for the loan.",
            step="0.01",
        ),
        InputField(
            FieldRule("payment", POSITIVE, "Enter a monthly payment greater than 0."),
            label="Monthly payment",
            default="350",
            helper="Planned monthly payment amount.",
        ),
    ),
    result_type=PayoffResult,
    compute=_student_loan_payoff,
    present=_present_student_loan_payoff,
    cross_checks=(_check_payment_covers_interest,),
    faqs=(
        FAQItem(
            "What if I make extra payments?",
            "Increase the monthly payment to see how extra payments shorten payoff time.",
        ),
        FAQItem(
            "Does this include income-driven repayment plans?",
            "No. This is a standard amortization estimate based on a fixed payment.",
        ),
        FAQItem(
            "Why does the payment need to cover interest?",
            "Payments below monthly interest will not reduce the balance and can "
            "grow the loan.",
        ),
        FAQItem(
            "Can I use this for private loans?",
            "Yes. Use the current balance, rate, and monthly payment for any "
            "fixed-rate loan.",
        ),
    ),
)


# =============================================================================
# INVESTMENT FEE IMPACT
# =============================================================================


def _fee_impact(values: Mapping[str, float]) -> FeeImpactResult:
    return calculate_fee_impact(
        starting_balance=values["starting_balance"],
        annual_contribution=values["annual_contribution"],
        annual_return_percent=values["annual_return"],
        years=values["years"],
        annual_fee_percent=values["fee"],
    )


def _present_fee_impact(result: FeeImpactResult, values):
    items = [
        ResultItem("Balance without fees", format_currency(result.no_fee, 2)),
        ResultItem("Balance with fees", format_currency(result.with_fee, 2)),
        ResultItem("Estimated cost of fees", format_currency(result.lost_to_fees, 2)),
    ]
    note = (
        f"An annual fee of {format_percent(result.fee_rate, 2)} can noticeably "
        "reduce your ending balance over time."
    )
    return items, note


INVESTMENT_FEE_IMPACT = Calculator(
    id="investment-fee-impact",
    title="Investment Fee Impact Calculator",
    intro="Compare investment growth with and without annual fees to see the "
    "long-term impact.",
    results_title="Fee impact summary",
    fields=(
        InputField(
            FieldRule("starting_balance", NON_NEGATIVE, NON_NEGATIVE_AMOUNT),
            label="Starting balance",
            default="15000",
            helper="Amount already invested.",
        ),
        InputField(
            FieldRule("annual_contribution", NON_NEGATIVE, NON_NEGATIVE_AMOUNT),
            label="Annual contribution",
            default="3000",
            helper="How much you invest each year.",
        ),
        InputField(
            FieldRule("annual_return", NON_NEGATIVE, "Enter a non-negative return rate."),
            label="Annual return (before fees)",
            default="6.5",
            unit="%",
            helper="Expected average annual return.",
            step="0.01",
        ),
        InputField(
            FieldRule("years", POSITIVE, "Enter a number greater than 0."),
            label="Years invested",
            default="20",
            unit="years",
            helper="Total time invested.",
            step="1",
        ),
        InputField(
            FieldRule("fee", NON_NEGATIVE, "Enter a non-negative fee."),
            label="Annual fee",
            default="1.0",
            unit="%",
            helper="Expense ratio or advisory fee.",
            step="0.01",
        ),
    ),
    result_type=FeeImpactResult,
    compute=_fee_impact,
    present=_present_fee_impact,
    faqs=(
        FAQItem(
            "Is the fee applied annually?",
            "Yes. This assumes an annual fee as a percentage of assets under management.",
        ),
        FAQItem(
            "What types of fees does this model?",
            "Think expense ratios, advisory fees, or platform fees expressed as "
            "annual percentages.",
        ),
        FAQItem(
            "Does it include taxes?",
            "No. Taxes and inflation are not included in this estimate.",
        ),
        FAQItem(
            "What if my expected return is lower than the fee?",
            "The model still works, but long-term growth may be reduced or flat.",
        ),
    ),
)


# =============================================================================
# SALARY TO HOURLY
# =============================================================================


def _salary_to_hourly(values: Mapping[str, float]) -> PayBreakdown:
    return calculate_pay_breakdown(values["salary"], values["hours"], values["weeks"])


def _present_salary_to_hourly(result: PayBreakdown, values):
    items = [
        ResultItem("Hourly pay", format_currency(result.hourly, 2)),
        ResultItem("Weekly pay", format_currency(result.weekly, 2)),
        ResultItem("Monthly pay", format_currency(result.monthly, 2)),
    ]
    return items, "Adjust hours or weeks to compare different schedules or contract roles."


SALARY_TO_HOURLY = Calculator(
    id="salary-to-hourly",
    title="Salary to Hourly Calculator",
    intro="Convert an annual salary to hourly, weekly, and monthly pay based on "
    "your schedule.",
    results_title="Pay breakdown",
    fields=(
        InputField(
            FieldRule("salary", POSITIVE, "Enter a salary greater than 0."),
            label="Annual salary",
            default="72000",
            helper="Gross annual pay before taxes.",
        ),
        InputField(
            FieldRule("hours", POSITIVE, "Enter hours greater than 0."),
            label="Hours per week",
            default="40",
            unit="hours",
            helper="Average hours worked each week.",
            step="0.5",
        ),
        InputField(
            FieldRule("weeks", POSITIVE, "Enter weeks greater than 0."),
            label="Weeks per year",
            default="52",
            unit="weeks",
            helper="Typically 52, or fewer for unpaid time off.",
            step="1",
        ),
    ),
    result_type=PayBreakdown,
    compute=_salary_to_hourly,
    present=_present_salary_to_hourly,
    faqs=(
        FAQItem(
            "Does this include overtime?",
            "No. This is a straight conversion using standard weekly hours.",
        ),
        FAQItem(
            "What if I take unpaid time off?",
            "Reduce the weeks per year to reflect unpaid leave or shorter work years.",
        ),
        FAQItem(
            "Is this before or after taxes?",
            "This is a gross income conversion. Taxes and deductions are not included.",
        ),
        FAQItem(
            "Why show weekly and monthly?",
            "It helps compare offers with different pay schedules.",
        ),
    ),
)


CALCULATORS: Dict[str, Calculator] = {
    calculator.id: calculator
    for calculator in (
        COMPOUND_INTEREST,
        LOAN_PAYMENT,
        MORTGAGE_PAYMENT,
        STUDENT_LOAN_PAYOFF,
        INVESTMENT_FEE_IMPACT,
        SALARY_TO_HOURLY,
    )
}


def get_calculator(calculator_id: str) -> Calculator:
    """Look up a calculator by id; raises KeyError when unknown."""
    return CALCULATORS[calculator_id]


def list_calculators() -> List[Calculator]:
    return list(CALCULATORS.values())
