"""
Bucket List
Bucket list records enriched with destination catalog details
"""

import logging
from typing import Dict, List, Optional

from app.models.budget_record import BudgetRecord
from app.models.destination import Destination
from app.services.catalog import DestinationCatalog
from app.services.ledger import TravelFundLedger

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = 'A beautiful destination waiting to be explored.'
DEFAULT_TAGS = ['Adventure', 'Nature']
DEFAULT_RATING = 4.5

def record_fields(record: BudgetRecord) -> Dict:
    return {column.name: getattr(record, column.name) for column in BudgetRecord.__table__.columns}

def enrich_item(record: BudgetRecord, destination: Optional[Destination]) -> Dict:
    item = record_fields(record)

    if destination is None:
        item.update({
            'description': DEFAULT_DESCRIPTION,
            'location': f"{record.destination}, Pakistan",
            'tags': list(DEFAULT_TAGS),
            'rating': DEFAULT_RATING,
            'image': None
        })
        return item

    # An empty famous_for list still wins over the fallbacks
    if destination.famous_for is not None:
        tags = list(destination.famous_for)
    elif destination.category:
        tags = [destination.category]
    else:
        tags = list(DEFAULT_TAGS)

    item.update({
        'description': destination.description or DEFAULT_DESCRIPTION,
        'location': f"{destination.city or ''}, {destination.country or 'Pakistan'}".strip(),
        'tags': tags,
        'rating': destination.rating or DEFAULT_RATING,
        'image': destination.images[0] if destination.images else None
    })
    return item

class BucketListService:

    def __init__(self, ledger: TravelFundLedger, catalog: DestinationCatalog):
        self.ledger = ledger
        self.catalog = catalog

    async def list_items(self, user_id: int) -> List[Dict]:
        records = await self.ledger.list(user_id, is_bucket_list=True)

        items = []
        for record in records:
            destination = await self.catalog.find_by_name(record.destination)
            if destination is None:
                logger.debug("No catalog details for %s", record.destination)
            items.append(enrich_item(record, destination))
        return items
