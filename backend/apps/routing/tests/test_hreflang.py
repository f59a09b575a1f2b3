from unittest.mock import MagicMock

from django.test import SimpleTestCase, TestCase

from apps.i18n.registry import Language
from apps.routing.components import build_components
from apps.routing.conf import RoutingSettings
from apps.routing.hreflang import X_DEFAULT, HreflangProcessor, build_alternate_links
from apps.routing.resources import ResourceRef
from tests.factories import LocaleFactory, TermFactory

SITE = "http://testserver"


def link(hreflang, href, quote='"'):
    return f"<link rel={quote}alternate{quote} hreflang={quote}{hreflang}{quote} href={quote}{href}{quote} />"


class NormalizeRegionTest(SimpleTestCase):
    """Test cases for region tag overrides."""

    def setUp(self):
        self.processor = HreflangProcessor(MagicMock(), {"ru-ru": "ru-UA"})

    def test_double_quotes(self):
        """Test rewriting a double-quoted tag."""
        self.assertEqual(
            self.processor.normalize_region('<link hreflang="ru-ru" href="/ru/" />'),
            '<link hreflang="ru-UA" href="/ru/" />',
        )

    def test_single_quotes(self):
        """Test rewriting a single-quoted tag."""
        self.assertEqual(
            self.processor.normalize_region("<link hreflang='ru-ru' href='/ru/' />"),
            "<link hreflang='ru-UA' href='/ru/' />",
        )

    def test_any_case(self):
        """Test that the source tag is matched case-insensitively."""
        for source in ("RU-RU", "ru-RU", "Ru-Ru"):
            with self.subTest(source=source):
                self.assertEqual(
                    self.processor.normalize_region(f'<link hreflang="{source}" />'),
                    '<link hreflang="ru-UA" />',
                )

    def test_unquoted(self):
        """Test rewriting an unquoted attribute."""
        self.assertEqual(
            self.processor.normalize_region("<link hreflang=ru-ru href=/ru/>"),
            "<link hreflang=ru-UA href=/ru/>",
        )

    def test_other_tags_untouched(self):
        """Test that similar tags are not rewritten."""
        for annotation in (
            '<link hreflang="ru" />',
            '<link hreflang="ru-rux" />',
            '<link hreflang="en-us" href="/ru-ru/" />',
        ):
            with self.subTest(annotation=annotation):
                self.assertEqual(self.processor.normalize_region(annotation), annotation)

    def test_idempotent(self):
        """Test that normalizing twice changes nothing more."""
        once = self.processor.normalize_region('<link hreflang="ru-ru" />')

        self.assertEqual(self.processor.normalize_region(once), once)


class HreflangProcessorTest(SimpleTestCase):
    """Test cases for alternate link processing with a stub translator."""

    def setUp(self):
        self.translator = MagicMock()
        self.translator.translate.side_effect = (
            lambda url, code, current=None, fallback_url=None: f"{SITE}/{code}/translated/"
        )
        self.processor = HreflangProcessor(self.translator, {"ru-ru": "ru-UA"})
        self.links = {
            "uk": link("uk", f"{SITE}/zonty/"),
            "ru": link("ru-ru", f"{SITE}/ru/zonty/"),
            X_DEFAULT: link("x-default", f"{SITE}/zonty/"),
        }

    def test_hrefs_replaced(self):
        """Test that each language href comes from the translator."""
        result = self.processor.process(self.links, f"{SITE}/zonty/")

        self.assertEqual(result["uk"], link("uk", f"{SITE}/uk/translated/"))
        self.assertEqual(result["ru"], link("ru-UA", f"{SITE}/ru/translated/"))

    def test_x_default_untouched(self):
        """Test that x-default keeps its href."""
        result = self.processor.process(self.links, f"{SITE}/zonty/")

        self.assertEqual(result[X_DEFAULT], self.links[X_DEFAULT])

    def test_old_href_is_fallback(self):
        """Test that the host's href is handed to the translator as fallback."""
        current = ResourceRef("taxonomy-term", 1, "zonty")

        self.processor.process(self.links, f"{SITE}/zonty/", current=current)

        self.translator.translate.assert_any_call(
            f"{SITE}/zonty/", "ru", current=current, fallback_url=f"{SITE}/ru/zonty/"
        )
        self.assertEqual(self.translator.translate.call_count, 2)

    def test_single_quoted_href(self):
        """Test that single-quoted hrefs are replaced too."""
        result = self.processor.process(
            {"ru": link("ru-ru", f"{SITE}/ru/zonty/", quote="'")}, f"{SITE}/zonty/"
        )

        self.assertEqual(result["ru"], link("ru-UA", f"{SITE}/ru/translated/", quote="'"))

    def test_annotation_without_href(self):
        """Test that annotations without an href only get their region fixed."""
        result = self.processor.process({"ru": '<link hreflang="ru-ru" />'}, f"{SITE}/zonty/")

        self.assertEqual(result["ru"], '<link hreflang="ru-UA" />')
        self.translator.translate.assert_not_called()

    def test_input_not_modified(self):
        """Test that the host's mapping is left as it was."""
        original = dict(self.links)

        self.processor.process(self.links, f"{SITE}/zonty/")

        self.assertEqual(self.links, original)

    def test_idempotent(self):
        """Test that processing the output again yields the same output."""
        once = self.processor.process(self.links, f"{SITE}/zonty/")

        self.assertEqual(self.processor.process(once, f"{SITE}/zonty/"), once)


class BuildAlternateLinksTest(SimpleTestCase):
    """Test cases for the host's generic alternate links."""

    def test_links(self):
        """Test prefix insertion and x-default."""
        languages = [
            Language(code="uk", prefix="uk", is_default=True),
            Language(code="ru", prefix="ru", hreflang="ru-ru"),
        ]

        links = build_alternate_links("/zonty/", languages, SITE)

        self.assertEqual(
            links,
            {
                "uk": link("uk", f"{SITE}/zonty/"),
                "ru": link("ru-ru", f"{SITE}/ru/zonty/"),
                X_DEFAULT: link("x-default", f"{SITE}/zonty/"),
            },
        )

    def test_root(self):
        """Test links for the site root."""
        links = build_alternate_links("/", [Language(code="ru", prefix="ru")], SITE)

        self.assertEqual(links["ru"], link("ru", f"{SITE}/ru/"))


class HreflangIntegrationTest(TestCase):
    """Test cases for alternate links of a real term."""

    def setUp(self):
        """Set up test data."""
        LocaleFactory(code="uk", is_default=True, sort_order=0)
        LocaleFactory(code="ru", hreflang="ru-ru", sort_order=1)
        self.zonty = TermFactory(slug="zonty", seo_slug="[:ru]muzhskie-zonty-vinnica[:]")
        self.components = build_components(RoutingSettings(site_url=SITE))

    def test_alternates_for_localized_page(self):
        """Test the corrected alternate links of the Russian category page."""
        languages = self.components.registry.list_languages()
        generic = build_alternate_links("/zonty/", languages, SITE)

        result = self.components.hreflang.process(
            generic,
            f"{SITE}/ru/muzhskie-zonty-vinnica/",
            current=ResourceRef.from_instance(self.zonty),
        )

        self.assertEqual(
            result,
            {
                "uk": link("uk", f"{SITE}/zonty/"),
                "ru": link("ru-UA", f"{SITE}/ru/muzhskie-zonty-vinnica/"),
                X_DEFAULT: link("x-default", f"{SITE}/zonty/"),
            },
        )
