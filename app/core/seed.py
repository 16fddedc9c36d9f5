"""
Development seed for the destination catalog
"""

import logging
from sqlalchemy import select, func

from app.core.database import async_session
from app.models.destination import Destination, Accommodation

logger = logging.getLogger(__name__)

DESTINATIONS = [
    {
        'name': 'Hunza Valley', 'city': 'Karimabad', 'category': 'Mountains',
        'description': 'Terraced orchards and glacier views along the Karakoram Highway.',
        'images': ['/images/destinations/hunza.jpg'],
        'latitude': 36.3167, 'longitude': 74.65, 'best_season': 'summer', 'is_popular': True,
        'famous_food': ['Chapshuro', 'Diram Fitti'], 'famous_for': ['Baltit Fort', 'Attabad Lake'],
        'rating': 4.9, 'average_daily_cost': 6500,
        'accommodations': [
            {'kind': 'hotel', 'name': 'Eagle Nest Hotel', 'address': 'Duikar, Hunza', 'latitude': 36.3306, 'longitude': 74.6717,
             'price_range': 'PKR 15,000 - 25,000', 'amenities': ['WiFi', 'Restaurant', 'Sunrise view'], 'rating': 4.6},
            {'kind': 'restaurant', 'name': 'Cafe de Hunza', 'address': 'Karimabad Bazaar', 'latitude': 36.3239, 'longitude': 74.6631,
             'price_range': 'PKR 800 - 2,000', 'cuisine': ['Hunza', 'Cafe'], 'rating': 4.5}
        ]
    },
    {
        'name': 'Skardu', 'city': 'Skardu', 'category': 'Mountains',
        'description': 'Gateway to the Karakoram peaks with cold desert and alpine lakes.',
        'images': ['/images/destinations/skardu.jpg'],
        'latitude': 35.2971, 'longitude': 75.6333, 'best_season': 'summer', 'is_popular': True,
        'famous_food': ['Balti Gyal'], 'famous_for': ['Shangrila Resort', 'Deosai Plains'],
        'rating': 4.8, 'average_daily_cost': 6000,
        'accommodations': [
            {'kind': 'hotel', 'name': 'Shangrila Resort', 'address': 'Lower Kachura, Skardu', 'latitude': 35.4229, 'longitude': 75.4543,
             'price_range': 'PKR 20,000 - 35,000', 'amenities': ['Lake view', 'Restaurant', 'Parking'], 'rating': 4.7}
        ]
    },
    {
        'name': 'Swat Valley', 'city': 'Mingora', 'category': 'Mountains',
        'description': 'Green valleys, rivers and ski slopes of Malam Jabba.',
        'images': ['/images/destinations/swat.jpg'],
        'latitude': 35.2227, 'longitude': 72.4258, 'best_season': 'spring', 'is_popular': True,
        'famous_food': ['Trout fish'], 'famous_for': ['Malam Jabba', 'Kalam'],
        'rating': 4.6, 'average_daily_cost': 5000,
        'accommodations': []
    },
    {
        'name': 'Lahore', 'city': 'Lahore', 'category': 'Historical',
        'description': 'Mughal heritage, food streets and the Walled City.',
        'images': ['/images/destinations/lahore.jpg'],
        'latitude': 31.5204, 'longitude': 74.3587, 'best_season': 'winter', 'is_popular': True,
        'famous_food': ['Nihari', 'Halwa Puri'], 'famous_for': ['Badshahi Mosque', 'Lahore Fort'],
        'rating': 4.7, 'average_daily_cost': 5000,
        'accommodations': [
            {'kind': 'hotel', 'name': 'Pearl Continental Lahore', 'address': 'Shahrah-e-Quaid-e-Azam', 'latitude': 31.5542, 'longitude': 74.3271,
             'price_range': 'PKR 30,000 - 50,000', 'amenities': ['Pool', 'Gym', 'WiFi'], 'rating': 4.5},
            {'kind': 'restaurant', 'name': 'Haveli Restaurant', 'address': 'Fort Road Food Street',
             'price_range': 'PKR 2,000 - 5,000', 'cuisine': ['Pakistani', 'BBQ'], 'rating': 4.4}
        ]
    },
    {
        'name': 'Islamabad', 'city': 'Islamabad', 'category': 'City',
        'description': 'The capital at the foot of the Margalla Hills.',
        'images': ['/images/destinations/islamabad.jpg'],
        'latitude': 33.6844, 'longitude': 73.0479, 'best_season': 'spring', 'is_popular': False,
        'famous_food': ['Chapli Kabab'], 'famous_for': ['Faisal Mosque', 'Daman-e-Koh'],
        'rating': 4.5, 'average_daily_cost': None,
        'accommodations': []
    },
    {
        'name': 'Gwadar', 'city': 'Gwadar', 'category': 'Beach',
        'description': 'Arabian Sea coastline and the Hammerhead cliff.',
        'images': [],
        'latitude': 25.1216, 'longitude': 62.3254, 'best_season': 'winter', 'is_popular': False,
        'famous_food': ['Seafood'], 'famous_for': [],
        'rating': 4.3, 'average_daily_cost': 4500,
        'accommodations': []
    }
]

async def seed_catalog():
    """Insert the sample catalog when the destinations table is empty"""
    async with async_session() as session:
        result = await session.execute(select(func.count(Destination.id)))
        if result.scalar():
            return

        for entry in DESTINATIONS:
            entry = dict(entry)
            accommodations = entry.pop('accommodations')
            destination = Destination(**entry)
            destination.accommodations = [Accommodation(**item) for item in accommodations]
            session.add(destination)

        await session.commit()
        logger.info("Seeded %d catalog destinations", len(DESTINATIONS))
