from pydantic import Field
from typing import Optional, Union

from app.schemas.common import CamelModel, SEASON_PATTERN, METHOD_PATTERN

class Breakdown(CamelModel):
    accommodation: float = Field(0.0, ge=0)
    transportation: float = Field(0.0, ge=0)
    food: float = Field(0.0, ge=0)
    activities: float = Field(0.0, ge=0)
    miscellaneous: float = Field(0.0, ge=0)

class BreakdownWithTotal(Breakdown):
    total: float = Field(0.0, ge=0)

class TripDetails(CamelModel):
    destination: str = Field(..., min_length=1, max_length=100)
    number_of_members: int = Field(..., ge=1)
    days: int = Field(..., ge=1)
    season: str = Field(default="peak", pattern=SEASON_PATTERN)

class EstimateRequest(TripDetails):
    pass

class EstimateResponse(TripDetails):
    breakdown: BreakdownWithTotal
    total: float
    per_person: float
    per_day: float
    currency: str
    insights: str
    calculation_method: str = "Smart"

class ManualBudgetRequest(CamelModel):
    # Raw form values; blanks and non-numeric entries count as 0
    accommodation: Union[float, str, None] = None
    transportation: Union[float, str, None] = None
    food: Union[float, str, None] = None
    activities: Union[float, str, None] = None
    miscellaneous: Union[float, str, None] = None

class ManualBudgetResponse(CamelModel):
    breakdown: BreakdownWithTotal
    total: float
    currency: str
    is_manual: bool = True

class AdjustRequest(CamelModel):
    breakdown: BreakdownWithTotal

class ManualFields(Breakdown):
    pass

class SaveBudgetRequest(TripDetails):
    breakdown: Breakdown
    total: Optional[float] = Field(None, ge=0)
    is_manual: bool = False
    calculation_method: Optional[str] = Field(None, pattern=METHOD_PATTERN)
