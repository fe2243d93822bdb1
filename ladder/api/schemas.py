# ladder/api/schemas.py
# Pydantic schemas for the calculator API.

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict


class CalculatorRequest(BaseModel):
    # Range checks live in ladder.calc.facade so the HTTP and library paths agree.
    model_config = ConfigDict(populate_by_name=True)

    risk_budget: float = Field(alias="riskBudget")
    entry_ratio: float = Field(alias="entryRatio")
    additional_entries: float = Field(alias="additionalEntries")
    direction: str
    initial_price: float = Field(alias="initialPrice")
    leverage: float
    price_step: Optional[float] = Field(default=None, alias="priceStep")
    max_loss: Optional[float] = Field(default=None, alias="maxLoss")


class PositionEntryOut(BaseModel):
    index: int
    price: float
    entry_amount: float
    entry_qty: float
    cumulative_amount: float
    cumulative_qty: float
    average_price: float
    cumulative_loss: float

    model_config = ConfigDict(from_attributes=True)


class RiskSummaryOut(BaseModel):
    total_committed: float
    final_average_price: float
    final_cumulative_loss: float
    max_position: float
    max_loss: float
    exceeds_max_loss: bool
    over_committed: bool
    ladder_hits_liquidation: bool

    model_config = ConfigDict(from_attributes=True)


class PlanDisplay(BaseModel):
    rows: List[Dict[str, str]]
    liquidation_price: str
    max_position: str


class PlanResponse(BaseModel):
    entries: List[PositionEntryOut]
    liquidation_price: float
    summary: RiskSummaryOut
    display: PlanDisplay


class CalculatorDefaults(BaseModel):
    leverage: float
    additional_entries: int
    entry_ratio: float
    price_step: float
