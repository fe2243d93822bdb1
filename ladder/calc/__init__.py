from .facade import (
    CalculationOutcome,
    CalculatorInput,
    InvalidInput,
    PlanResult,
    RiskSummary,
    compute,
    validate_input,
)
from .plan import MAX_ADDITIONAL_ENTRIES, PRICE_STEP, Direction, PositionEntry, generate_plan

__all__ = [
    "CalculationOutcome",
    "CalculatorInput",
    "InvalidInput",
    "PlanResult",
    "RiskSummary",
    "compute",
    "validate_input",
    "MAX_ADDITIONAL_ENTRIES",
    "PRICE_STEP",
    "Direction",
    "PositionEntry",
    "generate_plan",
]
