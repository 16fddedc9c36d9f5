"""
Money Map API Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_ledger
from app.config import settings
from app.schemas.budget import (
    EstimateRequest,
    EstimateResponse,
    ManualBudgetRequest,
    ManualBudgetResponse,
    AdjustRequest,
    ManualFields,
    SaveBudgetRequest
)
from app.schemas.travel_fund import BudgetRecordResponse
from app.services.budget_estimator import BudgetEstimator, manual_breakdown, to_manual_fields
from app.services.ledger import TravelFundLedger

router = APIRouter()

@router.post("/calculate", response_model=EstimateResponse)
async def calculate_budget(
    request: EstimateRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Smart budget estimate with insights
    """
    estimator = BudgetEstimator(db)
    try:
        estimate = await estimator.estimate(
            destination=request.destination,
            number_of_members=request.number_of_members,
            days=request.days,
            season=request.season
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return EstimateResponse(**estimate)

@router.post("/manual", response_model=ManualBudgetResponse)
async def calculate_manual_budget(request: ManualBudgetRequest):
    """
    Total of manually entered amounts
    """
    try:
        breakdown = manual_breakdown(request.dict())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ManualBudgetResponse(
        breakdown=breakdown,
        total=breakdown['total'],
        currency=settings.CURRENCY
    )

@router.post("/adjust", response_model=ManualFields)
async def adjust_values_manually(request: AdjustRequest):
    """
    Copy a smart estimate into editable manual fields
    """
    return ManualFields(**to_manual_fields(request.breakdown.dict()))

@router.post("/save", response_model=BudgetRecordResponse)
async def save_budget(
    budget: SaveBudgetRequest,
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """
    Save a budget to the Travel Fund
    """
    return await ledger.save_budget(user_id, budget.dict())
