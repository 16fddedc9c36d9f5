from pydantic import Field, field_validator
from datetime import datetime, date
from typing import Optional, List

from app.schemas.common import CamelModel, STATUS_PATTERN, METHOD_PATTERN
from app.schemas.budget import Breakdown, TripDetails

class BudgetRecordCreate(TripDetails):
    breakdown: Breakdown = Field(default_factory=Breakdown)
    total: Optional[float] = Field(None, ge=0)
    is_manual: bool = False
    calculation_method: Optional[str] = Field(None, pattern=METHOD_PATTERN)
    is_bucket_list: bool = False
    status: str = Field(default="planned", pattern=STATUS_PATTERN)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    accommodation: Optional[str] = Field(None, max_length=200)
    rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = None

class BudgetRecordUpdate(CamelModel):
    status: Optional[str] = Field(None, pattern=STATUS_PATTERN)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    accommodation: Optional[str] = Field(None, max_length=200)
    rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = None

    @field_validator("start_date", "end_date", "accommodation", "rating", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # The edit form posts empty strings for cleared inputs
        if isinstance(value, str) and not value.strip():
            return None
        return value

class BudgetRecordResponse(TripDetails):
    id: int
    user_id: int
    breakdown: Breakdown
    total: float
    currency: str
    is_manual: bool
    calculation_method: Optional[str] = None
    is_bucket_list: bool
    status: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    accommodation: Optional[str] = None
    rating: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

class BucketListAdd(CamelModel):
    destination: str = Field(..., min_length=1, max_length=100)

class BucketListItem(BudgetRecordResponse):
    description: str
    location: str
    tags: List[str]
    # Destination rating from the catalog, not the traveller's own rating
    rating: Optional[float] = None
    image: Optional[str] = None

class EditForm(CamelModel):
    status: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    accommodation: str = ""
    rating: Optional[int] = None
    notes: str = ""

class ShareResponse(CamelModel):
    title: str
    text: str
