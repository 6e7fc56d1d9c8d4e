# apps/itineraries/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker
from decimal import Decimal

from apps.packages.factories import PackageFactory
from .models import CustomerItinerary

fake = Faker('en_IN')


class CustomerItineraryFactory(DjangoModelFactory):
    class Meta:
        model = CustomerItinerary

    client_name = factory.LazyFunction(lambda: fake.name())
    client_email = factory.Sequence(lambda n: f'client{n}@example.com')
    client_phone = '9876543210'
    package = factory.SubFactory(PackageFactory)
    package_name = factory.LazyAttribute(lambda o: o.package.destination_name if o.package else '')
    destination_name = factory.LazyAttribute(lambda o: o.package.destination_name if o.package else '')
    travel_date = factory.LazyFunction(lambda: fake.future_date(end_date='+90d'))
    total_cost = Decimal('120000')
    advance_paid = Decimal('20000')
    created_by = 'admin'
