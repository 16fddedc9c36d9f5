from typing import List

from app.schemas.common import CamelModel
from app.schemas.travel_fund import BudgetRecordResponse

class TripStats(CamelModel):
    total_trips: int
    destinations_visited: int
    days_traveled: int
    total_spent: float

class TravelHistoryResponse(CamelModel):
    trips: List[BudgetRecordResponse]
    stats: TripStats
    filtered_count: int
