import logging

from fastapi import APIRouter, HTTPException
from starlette import status

from ladder.api.config import settings
from ladder.api.schemas import (
    CalculatorDefaults,
    CalculatorRequest,
    PlanDisplay,
    PlanResponse,
    PositionEntryOut,
    RiskSummaryOut,
)
from ladder.calc import CalculatorInput, compute
from ladder.calc.formatting import format_entry, format_money, format_price

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/defaults", response_model=CalculatorDefaults)
async def get_defaults():
    """Initial form values"""
    return CalculatorDefaults(
        leverage=settings.DEFAULT_LEVERAGE,
        additional_entries=settings.DEFAULT_ADDITIONAL_ENTRIES,
        entry_ratio=settings.DEFAULT_ENTRY_RATIO,
        price_step=settings.PRICE_STEP,
    )


@router.post("/plan", response_model=PlanResponse)
async def create_plan(req: CalculatorRequest):
    """Entry ladder, liquidation estimate and risk summary"""
    inp = CalculatorInput(
        risk_budget=req.risk_budget,
        entry_ratio=req.entry_ratio,
        additional_entries=req.additional_entries,
        direction=req.direction,
        initial_price=req.initial_price,
        leverage=req.leverage,
        price_step=settings.PRICE_STEP if req.price_step is None else req.price_step,
        max_loss=req.max_loss,
    )
    outcome = compute(inp, max_additional_entries=settings.MAX_ADDITIONAL_ENTRIES)
    if not outcome.ok:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"field": outcome.error.field, "reason": outcome.error.reason},
        )

    plan = outcome.result
    rows = [
        format_entry(
            e,
            money_decimals=settings.MONEY_DECIMALS,
            qty_decimals=settings.QTY_DECIMALS,
            price_decimals=settings.PRICE_DECIMALS,
        )
        for e in plan.entries
    ]
    return PlanResponse(
        entries=[PositionEntryOut.model_validate(e) for e in plan.entries],
        liquidation_price=plan.liquidation_price,
        summary=RiskSummaryOut.model_validate(plan.summary),
        display=PlanDisplay(
            rows=rows,
            liquidation_price=format_price(plan.liquidation_price, settings.PRICE_DECIMALS),
            max_position=format_money(plan.summary.max_position, settings.MONEY_DECIMALS),
        ),
    )
