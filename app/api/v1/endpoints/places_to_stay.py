"""
Places to Stay API Endpoints
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from app.api.deps import get_catalog
from app.schemas.catalog import AccommodationResponse
from app.services.catalog import DestinationCatalog

router = APIRouter()

@router.get("/hotels", response_model=List[AccommodationResponse])
async def get_hotels(
    destination: Optional[int] = Query(None, description="Destination ID"),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """List hotels, optionally for one destination"""
    return await catalog.list_accommodations("hotel", destination_id=destination)

@router.get("/restaurants", response_model=List[AccommodationResponse])
async def get_restaurants(
    destination: Optional[int] = Query(None, description="Destination ID"),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """List restaurants, optionally for one destination"""
    return await catalog.list_accommodations("restaurant", destination_id=destination)
