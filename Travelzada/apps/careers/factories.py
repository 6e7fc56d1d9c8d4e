# apps/careers/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker

from .models import JobApplication, JobOpening

fake = Faker('en_IN')


class JobOpeningFactory(DjangoModelFactory):
    class Meta:
        model = JobOpening

    title = factory.Sequence(lambda n: f'Travel Consultant {n + 1}')
    department = 'Sales'
    location = 'Jaipur'
    type = 'Full-time'
    description = factory.LazyFunction(lambda: fake.paragraph(nb_sentences=3))
    status = JobOpening.STATUS_ACTIVE


class JobApplicationFactory(DjangoModelFactory):
    class Meta:
        model = JobApplication

    name = factory.LazyFunction(lambda: fake.name())
    email = factory.Sequence(lambda n: f'applicant{n}@example.com')
    phone = '9876543210'
    position = 'Travel Consultant'
    cover_letter = factory.LazyFunction(lambda: fake.paragraph(nb_sentences=4))
