"""
Calculator API endpoints.

These endpoints accept raw form inputs and return validation errors,
numeric results and display strings. Invalid input is not an HTTP error:
it comes back with its messages and a zeroed result set.
"""

from typing import Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from fincalc.calculators.registry import get_calculator, list_calculators

router = APIRouter()


class FieldInfo(BaseModel):
    """Describes one calculator input."""

    name: str
    label: str
    default: str
    unit: str
    helper: str
    constraint: str


class CalculatorInfo(BaseModel):
    id: str
    title: str
    intro: str
    fields: List[FieldInfo]


class CalculationInput(BaseModel):
    """Raw inputs keyed by field name, as typed into the form."""

    inputs: Dict[str, Union[str, float, None]] = {}


class DisplayItem(BaseModel):
    label: str
    value: str


class CalculationResponse(BaseModel):
    """Validation outcome, raw results and formatted results."""

    calculator_id: str
    valid: bool
    errors: Dict[str, Optional[str]]
    results: Dict[str, float]
    display: List[DisplayItem]
    note: str


@router.get("/", response_model=List[CalculatorInfo])
async def list_calculator_endpoints():
    """List calculators with their input fields."""
    return [
        CalculatorInfo(
            id=calculator.id,
            title=calculator.title,
            intro=calculator.intro,
            fields=[
                FieldInfo(
                    name=f.name,
                    label=f.label,
                    default=f.default,
                    unit=f.unit,
                    helper=f.helper,
                    constraint=f.rule.constraint.value,
                )
                for f in calculator.fields
            ],
        )
        for calculator in list_calculators()
    ]


@router.post("/{calculator_id}", response_model=CalculationResponse)
async def run_calculator(calculator_id: str, payload: CalculationInput):
    """Validate the inputs and run one calculator."""
    try:
        calculator = get_calculator(calculator_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Calculator not found")

    raw = {
        name: None if value is None else str(value)
        for name, value in payload.inputs.items()
    }
    run = calculator.run(raw)

    return CalculationResponse(
        calculator_id=calculator.id,
        valid=run.is_valid,
        errors=run.errors,
        results=run.result_values(),
        display=[DisplayItem(label=item.label, value=item.value) for item in run.items],
        note=run.note,
    )
