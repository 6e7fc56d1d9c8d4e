# apps/packages/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker
from datetime import date

from .models import Package

fake = Faker('en_IN')

DESTINATIONS = [
    ('BAL', 'Bali', 'Indonesia'),
    ('MAL', 'Maldives', 'Maldives'),
    ('THA', 'Thailand', 'Thailand'),
    ('GOA', 'Goa', 'India'),
    ('KER', 'Kerala', 'India'),
]


class PackageFactory(DjangoModelFactory):
    """Factory for travel packages"""

    class Meta:
        model = Package

    class Params:
        place = factory.Iterator(DESTINATIONS)

    destination_id = factory.Sequence(lambda n: f'PKG_{n + 1:03d}')
    destination_name = factory.LazyAttribute(lambda obj: obj.place[1])
    country = factory.LazyAttribute(lambda obj: obj.place[2])
    overview = factory.LazyFunction(lambda: fake.paragraph(nb_sentences=2))
    duration = '5 Nights / 6 Days'
    duration_nights = 5
    duration_days = 6
    travel_type = 'Couple'
    budget_category = 'Mid'
    star_category = '4-Star'
    meal_plan = 'Breakfast'
    price_range_inr = '₹60,000 - ₹80,000'
    inclusions = 'Accommodation, Breakfast, Private Transfers'
    exclusions = 'Flights, Visa'
    day_wise_itinerary = 'Day 1: Arrival and check-in | Day 2: City tour | Day 3: Beach day'
    highlights = factory.LazyFunction(lambda: ['Sunset cruise', 'Candlelight dinner'])
    created_by = 'admin@travelzada.test'
    last_updated = factory.LazyFunction(date.today)
