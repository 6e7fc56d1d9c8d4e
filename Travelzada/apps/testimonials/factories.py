# apps/testimonials/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker

from .models import Testimonial

fake = Faker('en_IN')


class TestimonialFactory(DjangoModelFactory):
    class Meta:
        model = Testimonial

    name = factory.LazyFunction(lambda: fake.name())
    rating = 5
    quote = factory.LazyFunction(lambda: fake.sentence(nb_words=14))
