from pydantic import Field
from datetime import datetime
from typing import Optional, List

from app.schemas.common import CamelModel

class DestinationResponse(CamelModel):
    id: int
    name: str
    city: Optional[str] = None
    country: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    best_season: Optional[str] = None
    is_popular: bool = False
    famous_food: List[str] = Field(default_factory=list)
    famous_for: List[str] = Field(default_factory=list)
    rating: Optional[float] = None
    average_daily_cost: Optional[float] = None
    created_at: Optional[datetime] = None

class NearbyDestination(DestinationResponse):
    distance_km: float

class AccommodationResponse(CamelModel):
    id: int
    destination_id: int
    kind: str
    name: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    price_range: Optional[str] = None
    amenities: List[str] = Field(default_factory=list)
    cuisine: List[str] = Field(default_factory=list)
    rating: Optional[float] = None

class DistanceResponse(CamelModel):
    distance_km: float
    unit: str = "km"

class DashboardSummary(CamelModel):
    total_budget: float
    active_trips: int
    bucket_list_count: int
    currency: str

class Coordinates(CamelModel):
    lat: float
    lng: float

class MapMarker(CamelModel):
    id: int
    name: str
    coordinates: Optional[Coordinates] = None
    type: str
    address: Optional[str] = None
    rating: Optional[float] = None

class MapData(CamelModel):
    destinations: List[MapMarker] = Field(default_factory=list)
    hotels: List[MapMarker] = Field(default_factory=list)
    restaurants: List[MapMarker] = Field(default_factory=list)
