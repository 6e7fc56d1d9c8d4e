# apps/tailored/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker

from .models import TailoredLead

fake = Faker('en_IN')


class TailoredLeadFactory(DjangoModelFactory):
    class Meta:
        model = TailoredLead

    destinations = factory.LazyFunction(lambda: ['Bali'])
    route_items = factory.LazyFunction(lambda: [{'destination': 'Bali', 'nights': 4}])
    group_type = 'couple'
    hotel_types = factory.LazyFunction(lambda: ['5-star'])
    contact_name = factory.LazyFunction(lambda: fake.name())
    contact_phone = '9876543210'
