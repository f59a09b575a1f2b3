from unittest.mock import patch

from django.core.cache import cache
from django.test import TestCase

from apps.core.exceptions import DependencyUnavailable
from apps.i18n.models import Locale
from apps.i18n.registry import Language, LanguageRegistry


class LanguageRegistryTest(TestCase):
    """Test cases for the language registry."""

    def setUp(self):
        """Set up test data."""
        Locale.objects.create(code="uk", name="Ukrainian", is_default=True, sort_order=0)
        Locale.objects.create(
            code="ru", name="Russian", hreflang="ru-ru", sort_order=1
        )
        Locale.objects.create(
            code="en", name="English", url_prefix="eng", sort_order=2
        )
        Locale.objects.create(code="pl", name="Polish", is_active=False, sort_order=3)
        self.registry = LanguageRegistry()

    def test_list_languages_ordered_and_active_only(self):
        """Test that only active locales are listed, in sort order."""
        codes = [language.code for language in self.registry.list_languages()]

        self.assertEqual(codes, ["uk", "ru", "en"])

    def test_languages_are_snapshots(self):
        """Test that languages carry prefix, default flag and hreflang tag."""
        languages = {language.code: language for language in self.registry.list_languages()}

        self.assertEqual(
            languages["ru"],
            Language(code="ru", prefix="ru", is_default=False, hreflang="ru-ru", name="Russian"),
        )
        self.assertEqual(languages["en"].prefix, "eng")
        self.assertEqual(languages["en"].hreflang_tag, "en")
        self.assertTrue(languages["uk"].is_default)

    def test_default_language(self):
        """Test default language lookup."""
        self.assertEqual(self.registry.default_language(), "uk")

    def test_get(self):
        """Test lookup by code."""
        self.assertEqual(self.registry.get("ru").code, "ru")
        self.assertIsNone(self.registry.get("pl"))
        self.assertIsNone(self.registry.get("de"))

    def test_by_prefix_matches_prefix_or_code(self):
        """Test that a path segment matches either prefix or code."""
        self.assertEqual(self.registry.by_prefix("eng").code, "en")
        self.assertEqual(self.registry.by_prefix("en").code, "en")
        self.assertEqual(self.registry.by_prefix("ru").code, "ru")
        self.assertIsNone(self.registry.by_prefix("zonty"))

    def test_languages_are_cached(self):
        """Test that repeated calls do not hit the database."""
        self.registry.list_languages()

        with self.assertNumQueries(0):
            self.registry.list_languages()

    def test_locale_change_clears_cache(self):
        """Test that saving a locale refreshes the registry."""
        self.registry.list_languages()

        Locale.objects.filter(code="pl").update(is_active=True)
        locale = Locale.objects.get(code="pl")
        locale.save()

        codes = [language.code for language in self.registry.list_languages()]
        self.assertIn("pl", codes)

    def test_no_default_locale(self):
        """Test that a registry without a default language is unavailable."""
        Locale.objects.update(is_default=False)
        cache.clear()

        with self.assertRaises(DependencyUnavailable):
            self.registry.list_languages()

    def test_missing_locale_table(self):
        """Test that a missing locale table is reported as unavailable."""
        with patch.object(LanguageRegistry, "_database_ready", return_value=False):
            with self.assertRaises(DependencyUnavailable):
                self.registry.list_languages()
