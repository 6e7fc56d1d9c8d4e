# apps/blogs/factories.py
import factory
from factory.django import DjangoModelFactory
from faker import Faker
from datetime import date

from .models import BlogPost

fake = Faker('en_IN')


class BlogPostFactory(DjangoModelFactory):
    """Factory for blog posts, published by default"""

    class Meta:
        model = BlogPost

    title = factory.Sequence(lambda n: f'Travel guide {n + 1}: {fake.city()}')
    subtitle = factory.LazyFunction(lambda: fake.sentence(nb_words=6))
    description = factory.LazyFunction(lambda: fake.paragraph(nb_sentences=2))
    content = factory.LazyFunction(lambda: fake.paragraph(nb_sentences=8))
    blog_structure = factory.LazyFunction(list)
    author = factory.LazyFunction(lambda: fake.name())
    date = factory.LazyFunction(date.today)
    category = 'Guides'
    published = True
