# apps/contacts/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker

from .models import ContactMessage

fake = Faker('en_IN')


class ContactMessageFactory(DjangoModelFactory):
    class Meta:
        model = ContactMessage

    name = factory.LazyFunction(lambda: fake.name())
    email = factory.Sequence(lambda n: f'contact{n}@example.com')
    phone = factory.LazyFunction(lambda: fake.msisdn()[:10])
    destination = 'Maldives'
    message = factory.LazyFunction(lambda: fake.paragraph(nb_sentences=2))
