# apps/users/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker

from .models import User

fake = Faker('en_IN')


class UserFactory(DjangoModelFactory):
    """Factory for dashboard and customer accounts"""

    class Meta:
        model = User
        django_get_or_create = ('email',)
        skip_postgeneration_save = True

    email = factory.Sequence(lambda n: f'user{n + 1}@travelzada.test')
    username = factory.LazyAttribute(lambda obj: obj.email)
    display_name = factory.LazyFunction(lambda: fake.name())
    role = User.ROLE_USER
    permissions = factory.LazyFunction(list)
    is_active = True

    @factory.post_generation
    def password(obj, create, extracted, **kwargs):
        obj.set_password(extracted or 'travelzada123')
        if create:
            obj.save()


class AdminUserFactory(UserFactory):
    email = factory.Sequence(lambda n: f'admin{n + 1}@travelzada.test')
    role = User.ROLE_ADMIN
