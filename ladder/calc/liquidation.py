# ladder/calc/liquidation.py
# First-order liquidation estimate and maximum available position.

from __future__ import annotations

from ladder.calc.plan import Direction


def estimate_liquidation_price(direction: Direction, entry: float, lev: float) -> float:
    """
    Price at which a single entry funded at `lev` loses its whole margin:
      LONG:  entry * (1 - 1/lev)
      SHORT: entry * (1 + 1/lev)
    No maintenance margin, fees or funding; a rough estimate only.
    Returns 0.0 (no liquidation) when lev <= 1.
    """
    if lev <= 1.0:
        return 0.0
    if direction == Direction.LONG:
        return float(entry * (1.0 - (1.0 / lev)))
    return float(entry * (1.0 + (1.0 / lev)))


def max_position(capital: float, lev: float) -> float:
    """Notional that `capital` of margin opens at `lev`."""
    return float(capital * lev)


def is_beyond_liquidation(direction: Direction, price: float, liquidation_price: float) -> bool:
    if liquidation_price <= 0.0:
        return False
    if direction == Direction.LONG:
        return price <= liquidation_price
    return price >= liquidation_price
