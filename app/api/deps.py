"""
FastAPI Dependencies
"""

import logging
from typing import AsyncGenerator
from fastapi import Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import async_session
from app.services.catalog import DestinationCatalog
from app.services.ledger import TravelFundLedger

logger = logging.getLogger(__name__)

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency"""
    async with async_session() as session:
        try:
            yield session
        except SQLAlchemyError:
            await session.rollback()
            logger.exception("Database error")
            raise HTTPException(status_code=500, detail="Database error, please try again")
        finally:
            await session.close()

def get_ledger(db: AsyncSession = Depends(get_db)) -> TravelFundLedger:
    """Travel Fund ledger dependency"""
    return TravelFundLedger(db)

def get_catalog(db: AsyncSession = Depends(get_db)) -> DestinationCatalog:
    """Destination catalog dependency"""
    return DestinationCatalog(db)
