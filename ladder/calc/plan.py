# ladder/calc/plan.py
# Staged entry ladder: averaging down (LONG) / up (SHORT) into a position.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List

PRICE_STEP = 0.05  # 5% adverse move between consecutive entries
MAX_ADDITIONAL_ENTRIES = 500


class Direction(str, Enum):
    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True)
class PositionEntry:
    index: int
    price: float
    entry_amount: float
    entry_qty: float
    cumulative_amount: float
    cumulative_qty: float
    average_price: float
    cumulative_loss: float


def next_price(price: float, direction: Direction, price_step: float = PRICE_STEP) -> float:
    # compounding: the step applies to the previous entry, not the first one
    if direction == Direction.LONG:
        return price * (1.0 - price_step)
    return price * (1.0 + price_step)


def unrealized_loss(direction: Direction, average_price: float, price: float, qty: float) -> float:
    """
    Loss of `qty` held at `average_price` when marked at `price`.
    Positive when the position is underwater.
    """
    if direction == Direction.LONG:
        return (average_price - price) * qty
    return (price - average_price) * qty


def generate_plan(
    risk_budget: float,
    entry_ratio: float,
    additional_entries: int,
    direction: Direction,
    initial_price: float,
    price_step: float = PRICE_STEP,
) -> List[PositionEntry]:
    """
    Build additional_entries + 1 entries. Every entry commits
    risk_budget * entry_ratio at a price one step further against the
    position than the previous entry. Running totals are folded forward,
    so entry k reflects entries 1..k.

    Inputs are assumed valid (see facade.validate_input). No rounding here.
    """
    entry_amount = risk_budget * entry_ratio
    entries: List[PositionEntry] = []
    price = initial_price
    cum_amount = 0.0
    cum_qty = 0.0

    for i in range(additional_entries + 1):
        if i > 0:
            price = next_price(price, direction, price_step)
        qty = entry_amount / price
        cum_amount += entry_amount
        cum_qty += qty
        avg = cum_amount / cum_qty
        entries.append(PositionEntry(
            index=i + 1,
            price=price,
            entry_amount=entry_amount,
            entry_qty=qty,
            cumulative_amount=cum_amount,
            cumulative_qty=cum_qty,
            average_price=avg,
            cumulative_loss=unrealized_loss(direction, avg, price, cum_qty),
        ))
    return entries
