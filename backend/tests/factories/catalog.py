"""
Catalog factories: taxonomy terms, products and content posts.
"""

import factory
from faker import Faker

from apps.catalog.models import Post, Term

from .base import BaseFactory

fake = Faker()


class TermFactory(BaseFactory):
    """Factory for published catalog terms."""

    class Meta:
        model = Term

    taxonomy = "catalog"
    name = factory.Faker("word")
    slug = factory.Sequence(lambda n: f"term-{n}")
    status = "published"
    seo_slug = ""
    sort_order = factory.Sequence(lambda n: n)


class PostFactory(BaseFactory):
    """Factory for published content posts."""

    class Meta:
        model = Post

    post_type = Post.POST
    title = factory.Faker("sentence", nb_words=3)
    slug = factory.Sequence(lambda n: f"post-{n}")
    status = "published"
    seo_slug = ""

    @factory.post_generation
    def terms(self, create, extracted, **kwargs):
        if not create or not extracted:
            return
        self.terms.add(*extracted)


class ProductFactory(PostFactory):
    """Factory for published products."""

    post_type = Post.PRODUCT
    slug = factory.Sequence(lambda n: f"product-{n}")
