# apps/subscribers/factories.py
import factory
from factory.django import DjangoModelFactory

from .models import Subscriber


class SubscriberFactory(DjangoModelFactory):
    class Meta:
        model = Subscriber

    email = factory.Sequence(lambda n: f'reader{n}@example.com')
    status = Subscriber.STATUS_ACTIVE
    source = Subscriber.DEFAULT_SOURCE
