"""Database models initialization."""

# Import all models to ensure they're registered with SQLAlchemy
from .budget_record import BudgetRecord, BREAKDOWN_CATEGORIES
from .destination import Destination, Accommodation

__all__ = [
    "BudgetRecord",
    "BREAKDOWN_CATEGORIES",
    "Destination",
    "Accommodation"
]
