from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Date, Text, JSON
from datetime import datetime
from app.core.database import Base

BREAKDOWN_CATEGORIES = ("accommodation", "transportation", "food", "activities", "miscellaneous")

class BudgetRecord(Base):
    __tablename__ = "budget_records"

    id = Column(Integer, primary_key=True, index=True)
    # Owner id comes from the auth layer
    user_id = Column(Integer, nullable=False, index=True)

    destination = Column(String(100), nullable=False, index=True)
    number_of_members = Column(Integer, nullable=False, default=1)
    days = Column(Integer, nullable=False, default=1)
    season = Column(String(20), nullable=False, default="peak")  # peak, off-peak, shoulder

    breakdown = Column(JSON, nullable=False)
    total = Column(Float, nullable=False, default=0.0)
    currency = Column(String(3), nullable=False, default="PKR")

    is_manual = Column(Boolean, default=False)
    calculation_method = Column(String(20), default="Smart")  # Smart, Manual, Hybrid
    is_bucket_list = Column(Boolean, default=False, index=True)

    status = Column(String(20), default="planned")  # planned, confirmed, completed, cancelled
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    accommodation = Column(String(200), nullable=True)
    rating = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
