"""
Input Parsing and Validation

Converts raw form text into floats and checks each value against the
constraint its calculator declares for it. A failing field carries a fixed
message; any message at all suppresses computation for the calculator.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional

NAN = float("nan")

# Plain decimal notation with an optional exponent. Python's float() would
# also accept "inf", "nan" and digit separators, none of which a form should.
_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


class Constraint(str, Enum):
    """Predicate a parsed value must satisfy to be usable."""

    POSITIVE = "positive"
    NON_NEGATIVE = "non_negative"


def to_number(text: Optional[str]) -> float:
    """
    Parse raw text into a finite float.

    Returns NaN for empty, malformed or out-of-range input; never clamps.
    """
    if text is None:
        return NAN
    stripped = str(text).strip()
    if not stripped or not _DECIMAL_PATTERN.match(stripped):
        return NAN

    value = float(stripped)
    return value if math.isfinite(value) else NAN


def is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def is_non_negative(value: float) -> bool:
    return math.isfinite(value) and value >= 0


_CHECKS = {
    Constraint.POSITIVE: is_positive,
    Constraint.NON_NEGATIVE: is_non_negative,
}


@dataclass(frozen=True)
class FieldRule:
    """A calculator input field and the constraint it must satisfy."""

    name: str
    constraint: Constraint
    message: str

    def check(self, value: float) -> Optional[str]:
        """Return the error message when the value breaks the constraint."""
        return None if _CHECKS[self.constraint](value) else self.message


ValidationResult = Dict[str, Optional[str]]


def parse_fields(
    raw: Mapping[str, Optional[str]], rules: Iterable[FieldRule]
) -> Dict[str, float]:
    """Parse every declared field; missing fields parse as NaN."""
    return {rule.name: to_number(raw.get(rule.name)) for rule in rules}


def validate_fields(
    values: Mapping[str, float], rules: Iterable[FieldRule]
) -> ValidationResult:
    """Check each parsed value against its rule."""
    return {rule.name: rule.check(values[rule.name]) for rule in rules}


def has_errors(errors: ValidationResult) -> bool:
    """A calculator is valid only if every field is."""
    return any(errors.values())
