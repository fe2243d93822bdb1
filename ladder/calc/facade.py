# ladder/calc/facade.py
# Single entry point: validate a calculator input, build the entry ladder,
# estimate liquidation and summarise the risk of the plan.

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, List, Optional

from ladder.calc.liquidation import (
    estimate_liquidation_price,
    is_beyond_liquidation,
    max_position,
)
from ladder.calc.plan import (
    MAX_ADDITIONAL_ENTRIES,
    PRICE_STEP,
    Direction,
    PositionEntry,
    generate_plan,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorInput:
    risk_budget: float
    entry_ratio: float
    additional_entries: int
    direction: Any  # Direction or "long"/"short" (any case)
    initial_price: float
    leverage: float
    price_step: float = PRICE_STEP
    max_loss: Optional[float] = None


@dataclass(frozen=True)
class InvalidInput:
    field: str
    reason: str


@dataclass(frozen=True)
class RiskSummary:
    total_committed: float
    final_average_price: float
    final_cumulative_loss: float
    max_position: float
    max_loss: float
    exceeds_max_loss: bool
    over_committed: bool
    ladder_hits_liquidation: bool


@dataclass(frozen=True)
class PlanResult:
    entries: List[PositionEntry]
    liquidation_price: float
    summary: RiskSummary


@dataclass(frozen=True)
class CalculationOutcome:
    result: Optional[PlanResult] = None
    error: Optional[InvalidInput] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_direction(value: Any) -> Optional[Direction]:
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction(value.strip().lower())
        except ValueError:
            return None
    return None


def _finite(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _positive(inp: CalculatorInput, name: str) -> Optional[InvalidInput]:
    value = getattr(inp, name)
    if not _finite(value):
        return InvalidInput(name, "must be a finite number")
    if value <= 0:
        return InvalidInput(name, "must be > 0")
    return None


def _range_error(inp: CalculatorInput, direction: Direction, n: int) -> Optional[InvalidInput]:
    """
    Checked before the ladder is built: every price, quantity and total
    must stay a finite positive float.
    """
    amount = float(inp.risk_budget) * float(inp.entry_ratio)
    initial = float(inp.initial_price)
    if not math.isfinite(amount) or amount <= 0:
        return InvalidInput("entry_ratio", "risk_budget * entry_ratio must be finite and > 0")

    factor = 1.0 - inp.price_step if direction == Direction.LONG else 1.0 + inp.price_step
    try:
        last = initial * factor ** n
    except OverflowError:
        last = math.inf
    if not math.isfinite(last) or last <= 0:
        return InvalidInput("additional_entries", "last ladder price is out of float range")

    lo, hi = min(initial, last), max(initial, last)
    # upper bounds on cumulative_qty and on price * cumulative_qty
    qty_bound = (n + 1) * amount / lo
    if not math.isfinite(qty_bound) or not math.isfinite(hi * qty_bound):
        return InvalidInput("additional_entries", "ladder totals are out of float range")
    return None


def validate_input(
    inp: CalculatorInput,
    max_additional_entries: int = MAX_ADDITIONAL_ENTRIES,
) -> Optional[InvalidInput]:
    """
    Returns the first violated constraint, else None.
    """
    for name in ("risk_budget", "entry_ratio", "initial_price", "leverage"):
        err = _positive(inp, name)
        if err:
            return err

    n = inp.additional_entries
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        return InvalidInput("additional_entries", "must be an integer")
    if isinstance(n, float) and not (math.isfinite(n) and n.is_integer()):
        return InvalidInput("additional_entries", "must be an integer")
    if n < 0:
        return InvalidInput("additional_entries", "must be >= 0")
    if n > max_additional_entries:
        return InvalidInput("additional_entries", f"must be <= {max_additional_entries}")

    if parse_direction(inp.direction) is None:
        return InvalidInput("direction", f"unrecognized direction: {inp.direction!r}")

    if not _finite(inp.price_step) or not (0.0 < inp.price_step < 1.0):
        return InvalidInput("price_step", "must be in (0, 1)")

    if inp.max_loss is not None:
        if not _finite(inp.max_loss):
            return InvalidInput("max_loss", "must be a finite number")
        if inp.max_loss < 0:
            return InvalidInput("max_loss", "must be >= 0")

    return _range_error(inp, parse_direction(inp.direction), int(n))


def summarize(
    inp: CalculatorInput,
    direction: Direction,
    entries: List[PositionEntry],
    liquidation_price: float,
) -> RiskSummary:
    last = entries[-1]
    max_loss = inp.risk_budget if inp.max_loss is None else float(inp.max_loss)
    return RiskSummary(
        total_committed=last.cumulative_amount,
        final_average_price=last.average_price,
        final_cumulative_loss=last.cumulative_loss,
        max_position=max_position(inp.risk_budget, inp.leverage),
        max_loss=max_loss,
        exceeds_max_loss=last.cumulative_loss > max_loss,
        over_committed=(
            last.cumulative_amount > inp.risk_budget
            and not math.isclose(last.cumulative_amount, inp.risk_budget)
        ),
        ladder_hits_liquidation=any(
            is_beyond_liquidation(direction, e.price, liquidation_price) for e in entries
        ),
    )


def compute(
    inp: CalculatorInput,
    max_additional_entries: int = MAX_ADDITIONAL_ENTRIES,
) -> CalculationOutcome:
    """
    Validate `inp` and, if valid, return the entry ladder, the liquidation
    estimate and a risk summary. An invalid input yields an outcome with
    `error` set and no entries; nothing is computed in that case.
    """
    err = validate_input(inp, max_additional_entries)
    if err is not None:
        logger.info("Rejected calculator input: %s %s", err.field, err.reason)
        return CalculationOutcome(error=err)

    direction = parse_direction(inp.direction)
    entries = generate_plan(
        risk_budget=float(inp.risk_budget),
        entry_ratio=float(inp.entry_ratio),
        additional_entries=int(inp.additional_entries),
        direction=direction,
        initial_price=float(inp.initial_price),
        price_step=float(inp.price_step),
    )
    liq = estimate_liquidation_price(direction, float(inp.initial_price), float(inp.leverage))
    summary = summarize(inp, direction, entries, liq)
    logger.debug("Computed plan: %d entries, liquidation %.8f", len(entries), liq)
    return CalculationOutcome(result=PlanResult(entries=entries, liquidation_price=liq, summary=summary))
