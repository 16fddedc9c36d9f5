from sqlalchemy import Column, Integer, String, Float, Boolean, ForeignKey, DateTime, Text, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base

class Destination(Base):
    __tablename__ = "destinations"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(100), nullable=False, index=True)
    city = Column(String(100))
    country = Column(String(100), default="Pakistan")
    category = Column(String(50), index=True)  # Mountains, Historical, Beach, ...
    description = Column(Text)
    images = Column(JSON, default=list)

    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    best_season = Column(String(50))
    is_popular = Column(Boolean, default=False)
    famous_food = Column(JSON, default=list)
    famous_for = Column(JSON, default=list)
    rating = Column(Float, nullable=True)

    # PKR per person per day, used by the Money Map estimator
    average_daily_cost = Column(Float, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    accommodations = relationship("Accommodation", back_populates="destination", cascade="all, delete-orphan")

class Accommodation(Base):
    __tablename__ = "accommodations"

    id = Column(Integer, primary_key=True, index=True)
    destination_id = Column(Integer, ForeignKey("destinations.id"), nullable=False, index=True)

    kind = Column(String(20), nullable=False, index=True)  # hotel, restaurant
    name = Column(String(200), nullable=False)
    address = Column(String(300))

    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    price_range = Column(String(50))
    amenities = Column(JSON, default=list)
    cuisine = Column(JSON, default=list)
    rating = Column(Float, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    destination = relationship("Destination", back_populates="accommodations")
