import re
from typing import Optional

from .resources import ResourceRef

X_DEFAULT = "x-default"

HREF_RE = re.compile(r"""href\s*=\s*(["'])(.*?)\1""", re.IGNORECASE)


class HreflangProcessor:
    """
    Correct the host's alternate links before they are rendered.

    Each link's href is replaced with the translator's URL for its language,
    and configured region tags are rewritten (e.g. ``ru-ru`` to ``ru-UA``).
    The input mapping is never modified, so processing is idempotent.
    """

    def __init__(self, translator, overrides: Optional[dict] = None):
        self.translator = translator
        self.overrides = [
            (
                re.compile(
                    r"""(hreflang\s*=\s*)(["']?)""" + re.escape(source) + r"""\2(?=[\s/>]|$)""",
                    re.IGNORECASE,
                ),
                target,
            )
            for source, target in (overrides or {}).items()
        ]

    def process(
        self,
        alternate_links: dict,
        current_url: str,
        current: Optional[ResourceRef] = None,
    ) -> dict:
        processed = {}
        for code, annotation in alternate_links.items():
            if code != X_DEFAULT:
                annotation = self._replace_href(annotation, code, current_url, current)
            processed[code] = self.normalize_region(annotation)
        return processed

    def normalize_region(self, annotation: str) -> str:
        for pattern, target in self.overrides:
            annotation = pattern.sub(
                lambda match: f"{match.group(1)}{match.group(2)}{target}{match.group(2)}",
                annotation,
            )
        return annotation

    def _replace_href(self, annotation, code, current_url, current):
        found = HREF_RE.search(annotation)
        if found is None:
            return annotation

        correct_url = self.translator.translate(
            current_url, code, current=current, fallback_url=found.group(2)
        )
        start, end = found.span(2)
        return annotation[:start] + correct_url + annotation[end:]


def build_alternate_links(path: str, languages, site_url: str) -> dict:
    """
    Render the host's generic alternate links for a path.

    Non-default languages get their prefix inserted in front of the path;
    ``x-default`` points at the unprefixed path.
    """
    path = "/" + path.strip("/")
    if path != "/":
        path += "/"

    links = {}
    for language in languages:
        href = site_url + (path if language.is_default else f"/{language.prefix}{path}")
        links[language.code] = (
            f'<link rel="alternate" hreflang="{language.hreflang_tag}" href="{href}" />'
        )
    links[X_DEFAULT] = f'<link rel="alternate" hreflang="x-default" href="{site_url}{path}" />'
    return links
