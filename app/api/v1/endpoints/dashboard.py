"""
Dashboard API Endpoints
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from app.api.deps import get_catalog, get_ledger
from app.config import settings
from app.schemas.catalog import DestinationResponse, DashboardSummary
from app.services.catalog import DestinationCatalog
from app.services.ledger import TravelFundLedger

router = APIRouter()

@router.get("/popular-destinations", response_model=List[DestinationResponse])
async def get_popular_destinations(
    limit: int = Query(6, ge=1, le=50),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    return await catalog.popular_destinations(limit=limit)

@router.get("/search", response_model=List[DestinationResponse])
async def search_destinations(
    query: Optional[str] = Query(None),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """
    Quick search by destination name, city or country
    """
    return await catalog.search(query)

@router.get("/summary", response_model=DashboardSummary)
async def get_summary(
    user_id: int = Query(..., description="User ID"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """
    Total budget across saved trips
    """
    records = await ledger.list(user_id)
    trips = [record for record in records if not record.is_bucket_list]

    return DashboardSummary(
        total_budget=sum(record.total or 0.0 for record in trips),
        active_trips=len(trips),
        bucket_list_count=len(records) - len(trips),
        currency=settings.CURRENCY
    )
