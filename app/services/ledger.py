"""
Travel Fund Ledger
Persists budget records per user
"""

import logging
from typing import Dict, List, Optional, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_

from app.config import settings
from app.core.datetime_utils import convert_timezone_aware_datetimes
from app.models.budget_record import BudgetRecord, BREAKDOWN_CATEGORIES
from app.services.budget_estimator import breakdown_total

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('status', 'start_date', 'end_date', 'accommodation', 'rating', 'notes')

BUCKET_LIST_SEASON = 'shoulder'

class TravelFundLedger:
    """
    CRUD over a user's budget records. Last write wins.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_id: int, data: Dict[str, Any]) -> BudgetRecord:
        """
        Create a record. Total defaults to the breakdown sum unless overridden.
        """
        data = convert_timezone_aware_datetimes(dict(data))

        breakdown = {
            category: float(data.get('breakdown', {}).get(category) or 0.0)
            for category in BREAKDOWN_CATEGORIES
        }
        total = data.get('total')
        if total is None:
            total = breakdown_total(breakdown)

        is_manual = bool(data.get('is_manual', False))
        calculation_method = data.get('calculation_method') or ('Manual' if is_manual else 'Smart')

        record = BudgetRecord(
            user_id=user_id,
            destination=data['destination'],
            number_of_members=data.get('number_of_members', 1),
            days=data.get('days', 1),
            season=data.get('season', 'peak'),
            breakdown=breakdown,
            total=total,
            currency=settings.CURRENCY,
            is_manual=is_manual,
            calculation_method=calculation_method,
            is_bucket_list=bool(data.get('is_bucket_list', False)),
            status=data.get('status') or 'planned',
            start_date=data.get('start_date'),
            end_date=data.get('end_date'),
            accommodation=data.get('accommodation'),
            rating=data.get('rating'),
            notes=data.get('notes')
        )

        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)

        logger.info("Created budget record %s for user %s (%s)", record.id, user_id, record.destination)
        return record

    async def save_budget(self, user_id: int, payload: Dict[str, Any]) -> BudgetRecord:
        """
        Save a Money Map result to the Travel Fund
        """
        data = dict(payload)
        is_manual = bool(data.get('is_manual', False))
        data['calculation_method'] = 'Manual' if is_manual else 'Hybrid'
        data['is_bucket_list'] = False
        return await self.create(user_id, data)

    async def add_to_bucket_list(self, user_id: int, destination: str) -> BudgetRecord:
        return await self.create(user_id, {
            'destination': destination,
            'number_of_members': 1,
            'days': 1,
            'season': BUCKET_LIST_SEASON,
            'breakdown': {},
            'total': 0.0,
            'is_bucket_list': True
        })

    async def list(self, user_id: int, is_bucket_list: Optional[bool] = None) -> List[BudgetRecord]:
        query = select(BudgetRecord).where(BudgetRecord.user_id == user_id)

        if is_bucket_list is not None:
            query = query.where(BudgetRecord.is_bucket_list == is_bucket_list)

        query = query.order_by(BudgetRecord.created_at.desc(), BudgetRecord.id.desc())

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, user_id: int, record_id: int) -> Optional[BudgetRecord]:
        stmt = select(BudgetRecord).where(
            and_(
                BudgetRecord.id == record_id,
                BudgetRecord.user_id == user_id
            )
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, user_id: int, record_id: int, fields: Dict[str, Any]) -> Optional[BudgetRecord]:
        """
        Update trip metadata. The budget breakdown is not editable.
        """
        record = await self.get(user_id, record_id)
        if not record:
            return None

        fields = convert_timezone_aware_datetimes(dict(fields))
        for key, value in fields.items():
            # Status can change but never be cleared
            if key == 'status' and value is None:
                continue
            if key in EDITABLE_FIELDS:
                setattr(record, key, value)

        if record.start_date and record.end_date and record.end_date < record.start_date:
            await self.db.rollback()
            raise ValueError("End date cannot be before start date")

        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def delete(self, user_id: int, record_id: int) -> bool:
        record = await self.get(user_id, record_id)
        if not record:
            return False

        await self.db.delete(record)
        await self.db.commit()

        logger.info("Deleted budget record %s for user %s", record_id, user_id)
        return True
