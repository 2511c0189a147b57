"""
Generic calculator descriptor.

Every calculator page runs the same cycle on each input change: parse the
raw strings, validate them, then either compute or fall back to a zeroed
result. A Calculator bundles the pieces that differ (fields, compute,
presentation, FAQs) and runs that cycle.
"""

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from fincalc.calculations.validation import (
    FieldRule,
    ValidationResult,
    has_errors,
    parse_fields,
    validate_fields,
)

logger = logging.getLogger(__name__)

CrossCheck = Callable[[Mapping[str, float], ValidationResult], ValidationResult]

# Error key for inputs that are each valid but give no finite result
RESULT_ERROR_KEY = "result"
OUT_OF_RANGE = "These values are outside the range this calculator can handle."


@dataclass(frozen=True)
class InputField:
    """A form control and the rule its value must satisfy."""

    rule: FieldRule
    label: str
    default: str
    unit: str = "USD"
    helper: str = ""
    step: Optional[str] = None

    @property
    def name(self) -> str:
        return self.rule.name


@dataclass(frozen=True)
class FAQItem:
    question: str
    answer: str


@dataclass(frozen=True)
class ResultItem:
    label: str
    value: str


@dataclass(frozen=True)
class CalculatorRun:
    """Outcome of one evaluation of a calculator."""

    values: Dict[str, float]
    errors: ValidationResult
    result: Any
    items: List[ResultItem]
    note: str = ""

    @property
    def is_valid(self) -> bool:
        return not has_errors(self.errors)

    def result_values(self) -> Dict[str, float]:
        return asdict(self.result)


@dataclass(frozen=True)
class Calculator:
    """
    Descriptor for one calculator.

    Attributes:
        id: Stable identifier shared with the route catalog
        title: Page heading
        intro: One-line description shown under the heading
        results_title: Heading of the results panel
        fields: Input fields in display order
        result_type: Result dataclass; its no-argument instance is the zeroed result
        compute: Maps parsed, valid values to a result
        present: Maps a result and the parsed values to display items and a note
        cross_checks: Checks spanning several fields, run after the per-field rules
        faqs: Questions shown on the page and in structured data
    """

    id: str
    title: str
    intro: str
    results_title: str
    fields: Tuple[InputField, ...]
    result_type: type
    compute: Callable[[Mapping[str, float]], Any]
    present: Callable[[Any, Mapping[str, float]], Tuple[List[ResultItem], str]]
    cross_checks: Tuple[CrossCheck, ...] = ()
    faqs: Tuple[FAQItem, ...] = field(default_factory=tuple)

    @property
    def rules(self) -> List[FieldRule]:
        return [f.rule for f in self.fields]

    def default_inputs(self) -> Dict[str, str]:
        return {f.name: f.default for f in self.fields}

    def validate(self, values: Mapping[str, float]) -> ValidationResult:
        errors = validate_fields(values, self.rules)
        for check in self.cross_checks:
            errors.update(check(values, errors))
        return errors

    def _compute_finite(self, values: Mapping[str, float]) -> Optional[Any]:
        """Compute, or return None when the result is not a finite number."""
        try:
            result = self.compute(values)
        except (ArithmeticError, ValueError) as e:
            logger.debug("%s: suppressed, compute failed: %s", self.id, e)
            return None

        for name, value in asdict(result).items():
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                logger.debug("%s: suppressed, %s is %r", self.id, name, value)
                return None
        return result

    def run(self, raw: Optional[Mapping[str, Optional[str]]] = None) -> CalculatorRun:
        """
        Evaluate the calculator for raw form input.

        Missing fields take their default value when no input is given at
        all; otherwise a missing field is treated as empty and fails
        validation. Invalid input never raises; it yields the zeroed result.
        """
        if raw is None:
            raw = self.default_inputs()

        values = parse_fields(raw, self.rules)
        errors = self.validate(values)

        if has_errors(errors):
            failing = sorted(name for name, message in errors.items() if message)
            logger.debug("%s: suppressed, invalid fields %s", self.id, failing)
            result = self.result_type()
        else:
            result = self._compute_finite(values)
            if result is None:
                errors[RESULT_ERROR_KEY] = OUT_OF_RANGE
                result = self.result_type()

        items, note = self.present(result, values)
        return CalculatorRun(
            values=values, errors=errors, result=result, items=items, note=note
        )
