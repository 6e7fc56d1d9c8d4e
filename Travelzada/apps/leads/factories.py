# apps/leads/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker

from .models import Lead

fake = Faker('en_IN')


class LeadFactory(DjangoModelFactory):
    class Meta:
        model = Lead

    name = factory.LazyFunction(lambda: fake.name())
    mobile = factory.Sequence(lambda n: f'98{n:08d}')
    email = factory.Sequence(lambda n: f'lead{n}@example.com')
    source_url = 'https://travelzada.com/packages/bali-honeymoon'
    package_name = 'Bali Honeymoon'
    destination = 'Bali'
    status = Lead.STATUS_NEW
    read = False
