# apps/destinations/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker

from .models import Destination

fake = Faker('en_IN')


class DestinationFactory(DjangoModelFactory):
    """Factory for destination pages"""

    class Meta:
        model = Destination

    name = factory.Sequence(lambda n: f'{fake.city()} {n + 1}')
    country = 'India'
    region = Destination.REGION_INDIA
    description = factory.LazyFunction(lambda: fake.paragraph(nb_sentences=3))
    highlights = factory.LazyFunction(lambda: ['Backwaters', 'Tea gardens'])
    activities = factory.LazyFunction(list)
    package_ids = factory.LazyFunction(list)
