from django.core.signals import request_finished
from django.test import TestCase

from apps.routing.components import get_components
from apps.routing.conf import PRODUCT
from tests.factories import LocaleFactory, ProductFactory, TermFactory


class RoutingSignalsTest(TestCase):
    """Test cases for invalidation on content and locale changes."""

    def setUp(self):
        """Set up test data."""
        LocaleFactory(code="uk", is_default=True, sort_order=0)
        LocaleFactory(code="ru", sort_order=1)
        self.components = get_components()
        self.components.rebuild_now()

    def test_term_change_schedules_rebuild(self):
        """Test that saving a term defers a rebuild to the end of the request."""
        TermFactory(slug="zonty", seo_slug="[:ru]muzhskie-zonty-vinnica[:]")

        self.assertTrue(self.components.scheduler.pending)
        self.assertIsNone(self.components.route_table.match("/ru/muzhskie-zonty-vinnica/"))

        request_finished.send(sender=self.__class__)

        self.assertFalse(self.components.scheduler.pending)
        self.assertEqual(
            self.components.route_table.match("/ru/muzhskie-zonty-vinnica/").slug, "zonty"
        )

    def test_term_delete_schedules_rebuild(self):
        """Test that deleting a term removes its rules after the request."""
        term = TermFactory(slug="zonty", seo_slug="[:ru]muzhskie-zonty-vinnica[:]")
        self.components.rebuild_now()

        term.delete()
        request_finished.send(sender=self.__class__)

        self.assertIsNone(self.components.route_table.match("/ru/muzhskie-zonty-vinnica/"))

    def test_other_taxonomy_ignored(self):
        """Test that terms of untracked taxonomies do not trigger rebuilds."""
        TermFactory(taxonomy="color", slug="red")

        self.assertFalse(self.components.scheduler.pending)

    def test_product_change_clears_slugs(self):
        """Test that editing a product is visible to the next lookup."""
        product = ProductFactory(seo_slug="[:ru]zont-chernyj[:]")
        store = self.components.slug_store
        self.assertEqual(store.get_translated_slug(product.pk, PRODUCT, "ru"), "zont-chernyj")

        product.seo_slug = "[:ru]zont-chernyj-novyj[:]"
        product.save()

        self.assertEqual(
            store.get_translated_slug(product.pk, PRODUCT, "ru"), "zont-chernyj-novyj"
        )
        self.assertFalse(self.components.scheduler.pending)

    def test_locale_change_schedules_rebuild(self):
        """Test that adding a language regenerates rules for it."""
        TermFactory(slug="zonty", seo_slug="[:ru]muzhskie-zonty-vinnica[:en]mens-umbrellas[:]")
        self.components.rebuild_now()

        LocaleFactory(code="en", sort_order=2)

        self.assertTrue(self.components.scheduler.pending)
        request_finished.send(sender=self.__class__)
        self.assertEqual(self.components.route_table.match("/en/mens-umbrellas/").language, "en")

    def test_edit_outside_request_rebuilt_at_exit(self):
        """Test that a term edited from the shell gets its rules rebuilt at process exit."""
        term = TermFactory(slug="zonty", seo_slug="[:ru]muzhskie-zonty-vinnica[:]")
        self.components.rebuild_now()

        term.seo_slug = "[:ru]novye-zonty[:]"
        term.save()
        self.assertIsNone(self.components.route_table.match("/ru/novye-zonty/"))

        self.components.scheduler._on_exit()

        self.assertFalse(self.components.scheduler.pending)
        self.assertEqual(self.components.route_table.match("/ru/novye-zonty/").slug, "zonty")
        self.assertIsNone(self.components.route_table.match("/ru/muzhskie-zonty-vinnica/"))
