import asyncio
import os
import tempfile
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app.core.database import Base
from app.models.destination import Destination
from app.services.catalog import DestinationCatalog, contains_pattern

def run_with_catalog(destinations, action):
    """Run action(catalog) against a private database holding only the given rows"""
    db_path = os.path.join(tempfile.mkdtemp(prefix="catalog-tests-"), "catalog.db")

    async def scenario():
        engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        try:
            async with session_factory() as session:
                session.add_all(destinations)
                await session.commit()
                return await action(DestinationCatalog(session))
        finally:
            await engine.dispose()

    return asyncio.run(scenario())

def test_contains_pattern_escapes_wildcards():
    assert contains_pattern(" Hunza ") == "%hunza%"
    assert contains_pattern("100%_off") == "%100\\%\\_off%"
    assert contains_pattern("a\\b") == "%a\\\\b%"

def test_popular_falls_back_to_newest():
    start = datetime(2026, 1, 1)
    destinations = [
        Destination(name=f"Place {index}", is_popular=False, created_at=start + timedelta(days=index))
        for index in range(8)
    ]

    popular = run_with_catalog(destinations, lambda catalog: catalog.popular_destinations())

    assert [destination.name for destination in popular] == [f"Place {index}" for index in range(7, 1, -1)]

def test_popular_prefers_flagged_destinations():
    destinations = [
        Destination(name="Quiet Town", is_popular=False, rating=5.0),
        Destination(name="Naran", is_popular=True, rating=4.4),
        Destination(name="Murree", is_popular=True, rating=4.2)
    ]

    popular = run_with_catalog(destinations, lambda catalog: catalog.popular_destinations())

    assert [destination.name for destination in popular] == ["Naran", "Murree"]

def test_search_matches_wildcards_literally():
    destinations = [
        Destination(name="Hunza Valley", city="Karimabad", country="Pakistan"),
        Destination(name="Kumrat 100% Green", city="Dir", country="Pakistan")
    ]

    async def action(catalog):
        return (
            await catalog.search("100%"),
            await catalog.search("_unza"),
            await catalog.list_destinations(search="%")
        )

    percent, underscore, listed = run_with_catalog(destinations, action)

    assert [destination.name for destination in percent] == ["Kumrat 100% Green"]
    assert underscore == []
    assert [destination.name for destination in listed] == ["Kumrat 100% Green"]
