import math

import pytest

from ladder.calc.plan import PRICE_STEP, Direction, generate_plan, next_price, unrealized_loss


def test_single_entry_identity():
    entries = generate_plan(100.0, 0.5, 0, Direction.LONG, initial_price=0.3)
    assert len(entries) == 1
    e = entries[0]
    assert e.index == 1
    assert e.price == 0.3
    assert e.average_price == pytest.approx(0.3)
    assert e.cumulative_loss == pytest.approx(0.0, abs=1e-12)
    assert e.entry_amount == 50.0
    assert e.cumulative_amount == 50.0


def test_concrete_long_scenario():
    entries = generate_plan(100.0, 0.5, 2, Direction.LONG, initial_price=1.0)
    assert [e.index for e in entries] == [1, 2, 3]

    e1, e2, e3 = entries
    assert e1.price == 1.0
    assert e1.cumulative_loss == pytest.approx(0.0, abs=1e-12)

    assert e2.price == pytest.approx(0.95)
    assert e2.cumulative_amount == 100.0
    assert e2.cumulative_qty == pytest.approx(102.6316, abs=1e-4)
    assert e2.average_price == pytest.approx(0.97436, abs=1e-5)
    assert e2.cumulative_loss == pytest.approx(2.5, abs=1e-9)

    assert e3.price == pytest.approx(0.9025)
    assert e3.cumulative_amount == 150.0
    assert e3.cumulative_qty == pytest.approx(158.0332, abs=1e-4)
    assert e3.average_price == pytest.approx(0.949167, abs=1e-6)
    assert e3.cumulative_loss == pytest.approx(7.375, abs=1e-6)


def test_long_ladder_compounds_down():
    entries = generate_plan(1000.0, 0.2, 6, Direction.LONG, initial_price=250.0)
    for prev, cur in zip(entries, entries[1:]):
        assert cur.price < prev.price
        assert cur.price == pytest.approx(prev.price * (1 - PRICE_STEP))
    # geometric, not initial * (1 - i * step)
    assert entries[-1].price == pytest.approx(250.0 * (1 - PRICE_STEP) ** 6)
    assert entries[-1].price != pytest.approx(250.0 * (1 - 6 * PRICE_STEP))


def test_short_ladder_compounds_up():
    entries = generate_plan(1000.0, 0.2, 5, Direction.SHORT, initial_price=40.0)
    for prev, cur in zip(entries, entries[1:]):
        assert cur.price > prev.price
        assert cur.price == pytest.approx(prev.price * (1 + PRICE_STEP))


@pytest.mark.parametrize("direction", [Direction.LONG, Direction.SHORT])
def test_average_price_within_seen_prices(direction):
    entries = generate_plan(500.0, 0.3, 8, direction, initial_price=17.5)
    seen = []
    for e in entries:
        seen.append(e.price)
        assert min(seen) - 1e-12 <= e.average_price <= max(seen) + 1e-12


@pytest.mark.parametrize("direction", [Direction.LONG, Direction.SHORT])
def test_loss_grows_as_price_moves_against(direction):
    entries = generate_plan(500.0, 0.3, 5, direction, initial_price=17.5)
    losses = [e.cumulative_loss for e in entries]
    assert all(later > earlier for earlier, later in zip(losses[1:], losses[2:]))
    assert all(loss > 0 for loss in losses[1:])


def test_accumulation():
    entries = generate_plan(100.0, 0.5, 4, Direction.SHORT, initial_price=3.0)
    running_qty = 0.0
    for k, e in enumerate(entries, start=1):
        running_qty += e.entry_qty
        assert e.cumulative_amount == e.entry_amount * k
        assert e.cumulative_qty == pytest.approx(running_qty)
        assert e.entry_qty == pytest.approx(e.entry_amount / e.price)
        assert e.average_price == pytest.approx(e.cumulative_amount / e.cumulative_qty)


def test_deterministic():
    a = generate_plan(321.0, 0.37, 7, Direction.LONG, initial_price=0.0123)
    b = generate_plan(321.0, 0.37, 7, Direction.LONG, initial_price=0.0123)
    assert a == b


def test_ratio_above_budget_is_allowed():
    # 5 entries * 0.5 of the budget commits 2.5x the budget; not clipped
    entries = generate_plan(100.0, 0.5, 4, Direction.LONG, initial_price=10.0)
    assert entries[-1].cumulative_amount == 250.0


def test_custom_step():
    entries = generate_plan(100.0, 0.1, 2, Direction.LONG, initial_price=100.0, price_step=0.1)
    assert [e.price for e in entries] == pytest.approx([100.0, 90.0, 81.0])


def test_helpers_sign_convention():
    assert next_price(100.0, Direction.LONG) == pytest.approx(95.0)
    assert next_price(100.0, Direction.SHORT) == pytest.approx(105.0)
    assert math.isclose(unrealized_loss(Direction.LONG, 10.0, 9.0, 2.0), 2.0)
    assert math.isclose(unrealized_loss(Direction.SHORT, 10.0, 11.0, 2.0), 2.0)
    assert unrealized_loss(Direction.LONG, 10.0, 11.0, 2.0) < 0
