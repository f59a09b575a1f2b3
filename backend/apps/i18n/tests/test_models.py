from django.core.exceptions import ValidationError
from django.test import TestCase

from apps.i18n.models import Locale


class LocaleModelTest(TestCase):
    """Test cases for Locale model."""

    def setUp(self):
        """Set up test data."""
        self.locale_uk = Locale.objects.create(code="uk", name="Ukrainian", is_default=True)
        self.locale_ru = Locale.objects.create(code="ru", name="Russian", hreflang="ru-ru")

    def test_locale_string_representation(self):
        """Test locale string representation."""
        self.assertEqual(str(self.locale_uk), "Ukrainian (uk)")

    def test_prefix_defaults_to_code(self):
        """Test that a blank URL prefix falls back to the code."""
        self.assertEqual(self.locale_ru.prefix, "ru")

        self.locale_ru.url_prefix = "rus"
        self.assertEqual(self.locale_ru.prefix, "rus")

    def test_only_one_default_locale(self):
        """Test that only one locale can be default."""
        Locale.objects.create(code="en", name="English", is_default=True)

        self.locale_uk.refresh_from_db()
        self.assertFalse(self.locale_uk.is_default)
        self.assertEqual(Locale.objects.filter(is_default=True).count(), 1)

    def test_first_active_locale_becomes_default(self):
        """Test that a lone active locale is made the default."""
        Locale.objects.all().delete()

        locale = Locale.objects.create(code="pl", name="Polish")

        self.assertTrue(locale.is_default)

    def test_prefix_must_be_unique(self):
        """Test that two locales cannot share a URL prefix."""
        with self.assertRaises(ValidationError):
            Locale.objects.create(code="be", name="Belarusian", url_prefix="ru")

    def test_code_clashing_with_prefix(self):
        """Test that a code cannot reuse another locale's explicit prefix."""
        Locale.objects.create(code="en", name="English", url_prefix="eng")

        with self.assertRaises(ValidationError):
            Locale.objects.create(code="eng", name="Old English")
