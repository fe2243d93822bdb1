# ladder/calc/formatting.py
# Display formatting for money, quantities and prices.
# Formatting never raises: a value that is not a finite number renders as zero.

from __future__ import annotations
import logging
import math
from typing import Any, Dict

from ladder.calc.plan import PositionEntry

logger = logging.getLogger(__name__)

MONEY_DECIMALS = 2
QTY_DECIMALS = 4
PRICE_DECIMALS = 5


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(num):
        return None
    return num


def format_fixed(value: Any, decimals: int) -> str:
    num = _as_number(value)
    if num is None:
        logger.debug("formatting fallback for %r", value)
        num = 0.0
    text = f"{num:.{decimals}f}"
    # -0.00 from tiny negative residue
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text


def format_money(value: Any, decimals: int = MONEY_DECIMALS) -> str:
    return f"${format_fixed(value, decimals)}"


def format_qty(value: Any, decimals: int = QTY_DECIMALS) -> str:
    return format_fixed(value, decimals)


def format_price(value: Any, decimals: int = PRICE_DECIMALS) -> str:
    return f"${format_fixed(value, decimals)}"


def format_entry(
    entry: PositionEntry,
    *,
    money_decimals: int = MONEY_DECIMALS,
    qty_decimals: int = QTY_DECIMALS,
    price_decimals: int = PRICE_DECIMALS,
) -> Dict[str, str]:
    """Table row for one ladder entry."""
    return {
        "index": str(entry.index),
        "price": format_price(entry.price, price_decimals),
        "entry_amount": format_money(entry.entry_amount, money_decimals),
        "entry_qty": format_qty(entry.entry_qty, qty_decimals),
        "cumulative_amount": format_money(entry.cumulative_amount, money_decimals),
        "cumulative_qty": format_qty(entry.cumulative_qty, qty_decimals),
        "average_price": format_price(entry.average_price, price_decimals),
        "cumulative_loss": format_money(entry.cumulative_loss, money_decimals),
    }
