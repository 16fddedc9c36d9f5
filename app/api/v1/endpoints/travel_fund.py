"""
Travel Fund API Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from app.api.deps import get_ledger, get_catalog
from app.schemas.travel_fund import (
    BudgetRecordCreate,
    BudgetRecordResponse,
    BudgetRecordUpdate,
    BucketListAdd,
    BucketListItem,
    EditForm,
    ShareResponse
)
from app.services.bucket_list import BucketListService
from app.services.catalog import DestinationCatalog
from app.services.ledger import TravelFundLedger
from app.services.trip_history import edit_form, share_text

router = APIRouter()

@router.get("/", response_model=List[BudgetRecordResponse])
async def get_budgets(
    user_id: int = Query(..., description="User ID"),
    is_bucket_list: Optional[bool] = Query(None, description="Filter by bucket list flag"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """
    Get all budget records for user
    """
    return await ledger.list(user_id, is_bucket_list=is_bucket_list)

@router.post("/", response_model=BudgetRecordResponse)
async def create_budget(
    budget: BudgetRecordCreate,
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """
    Create a budget record
    """
    return await ledger.create(user_id, budget.dict())

@router.get("/bucket-list", response_model=List[BucketListItem])
async def get_bucket_list(
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """
    Get bucket list destinations with catalog details
    """
    service = BucketListService(ledger, catalog)
    return await service.list_items(user_id)

@router.post("/bucket-list", response_model=BudgetRecordResponse)
async def add_to_bucket_list(
    item: BucketListAdd,
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """Add a destination to the bucket list"""
    return await ledger.add_to_bucket_list(user_id, item.destination)

@router.get("/{record_id}", response_model=BudgetRecordResponse)
async def get_budget(
    record_id: int,
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    record = await ledger.get(user_id, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Budget record not found")
    return record

@router.put("/{record_id}", response_model=BudgetRecordResponse)
async def update_budget(
    record_id: int,
    update_data: BudgetRecordUpdate,
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """
    Update trip status, dates, accommodation, rating or notes
    """
    try:
        record = await ledger.update(user_id, record_id, update_data.dict(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not record:
        raise HTTPException(status_code=404, detail="Budget record not found")
    return record

@router.delete("/{record_id}")
async def delete_budget(
    record_id: int,
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """
    Delete budget record
    """
    if not await ledger.delete(user_id, record_id):
        raise HTTPException(status_code=404, detail="Budget record not found")

    return {"message": "Budget record deleted successfully"}

@router.get("/{record_id}/edit-form", response_model=EditForm)
async def get_edit_form(
    record_id: int,
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """Prefilled values for the trip edit form"""
    record = await ledger.get(user_id, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Budget record not found")
    return edit_form(record)

@router.get("/{record_id}/share", response_model=ShareResponse)
async def get_share_text(
    record_id: int,
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    record = await ledger.get(user_id, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Budget record not found")
    return share_text(record)
