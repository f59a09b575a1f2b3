"""
Route rules generated from translated taxonomy slugs.

A rebuild produces a complete, ordered rule set that replaces the previous
one wholesale. Generated rules are placed ahead of any host rules so they
win pattern overlaps under first-match-wins dispatch.
"""

import atexit
import logging
import re
import threading
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Callable, Iterable, Optional, Sequence

from django.core.signals import request_finished

from apps.core.cache import GenerationalCache
from apps.core.exceptions import DependencyUnavailable

from .conf import TAXONOMY_TERM

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteQuery:
    """What a matched path resolves to: a resource by canonical slug."""

    resource_type: str
    slug: str
    language: str
    page: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "resource_type": self.resource_type,
            "slug": self.slug,
            "language": self.language,
            "page": self.page,
        }


@dataclass(frozen=True)
class RouteRule:
    """A static path pattern bound to a canonical resource query."""

    pattern: str
    query: RouteQuery
    supports_pagination: bool = False

    @cached_property
    def regex(self):
        return re.compile(self.pattern)

    def match(self, path: str) -> Optional[RouteQuery]:
        """Return the bound query when ``path`` matches, including any page number."""
        found = self.regex.match(path.lstrip("/"))
        if found is None:
            return None
        if self.supports_pagination:
            return replace(self.query, page=int(found.group(1)))
        return self.query


class RouteTableBuilder:
    """Emit route rules for every translated slug of the tracked taxonomy."""

    def __init__(self, slug_store):
        self.slug_store = slug_store

    def build(self, languages, terms, existing: Sequence[RouteRule] = ()) -> tuple:
        rules = {}

        for language in languages:
            # The default language is served by the host's canonical routes
            if language.is_default:
                continue

            for term in terms:
                translated = self.slug_store.get_translated_slug(
                    term.id, TAXONOMY_TERM, language.code
                )
                if not translated or translated == term.slug:
                    continue

                query = RouteQuery(TAXONOMY_TERM, term.slug, language.code)
                base = f"^{re.escape(language.prefix)}/{re.escape(translated)}"

                for rule in (
                    RouteRule(f"{base}/?$", query),
                    RouteRule(f"{base}/page/([0-9]{{1,}})/?$", query, True),
                ):
                    if rule.pattern in rules:
                        logger.warning(
                            f"Slug '{translated}' ({language.code}) of term '{term.slug}' "
                            f"collides with term '{rules[rule.pattern].query.slug}', skipped"
                        )
                        continue
                    rules[rule.pattern] = rule

        return tuple(rules.values()) + tuple(existing)


class RouteTable:
    """
    The active rule set.

    Rules are built lazily on first use. A rebuild swaps in a new tuple in a
    single assignment and bumps a build generation kept in the cache, so
    every process notices and rebuilds its own copy on its next match.
    """

    def __init__(
        self,
        builder: RouteTableBuilder,
        registry,
        repository,
        host_rules: Sequence[RouteRule] = (),
    ):
        self.builder = builder
        self.registry = registry
        self.repository = repository
        self.host_rules = tuple(host_rules)
        self._rules: Optional[tuple] = None
        self._generation = None
        self._lock = threading.Lock()
        self._shared = GenerationalCache("routes")

    @property
    def rules(self) -> tuple:
        self._ensure_current()
        return self._rules

    def match(self, path: str) -> Optional[RouteQuery]:
        """First matching rule wins."""
        for rule in self.rules:
            query = rule.match(path)
            if query is not None:
                return query
        return None

    def rebuild(self) -> tuple:
        """Build a fresh rule set, publish it to other processes and return it."""
        rules = self._build()
        generation = self._shared.clear()
        with self._lock:
            self._rules = rules
            self._generation = generation
        logger.info(f"Route table rebuilt with {len(rules)} rules")
        return rules

    def _ensure_current(self):
        generation = self._shared.generation()
        if self._rules is not None and generation == self._generation:
            return
        rules = self._build()
        with self._lock:
            self._rules = rules
            self._generation = generation

    def _build(self) -> tuple:
        try:
            languages = self.registry.list_languages()
        except DependencyUnavailable as e:
            logger.debug(f"Route table left with host rules only: {e}")
            return self.host_rules
        terms = self.repository.list_terms(hide_empty=False)
        return self.builder.build(languages, terms, existing=self.host_rules)


class RebuildScheduler:
    """
    Coalesce rebuild requests into one rebuild at the end of the request.

    ``schedule()`` only marks a rebuild as pending; the rebuild itself runs
    when Django sends ``request_finished``, when ``flush()`` is called, or
    when the process exits after changes made outside a request.
    """

    def __init__(self, rebuild: Callable[[], object]):
        self.rebuild = rebuild
        self.pending = False
        self._lock = threading.Lock()

    def connect(self):
        request_finished.connect(
            self._on_request_finished, dispatch_uid=f"routing-rebuild-{id(self)}"
        )
        atexit.register(self._on_exit)

    def disconnect(self):
        request_finished.disconnect(dispatch_uid=f"routing-rebuild-{id(self)}")
        atexit.unregister(self._on_exit)

    def schedule(self):
        with self._lock:
            self.pending = True

    def flush(self) -> bool:
        """Run a pending rebuild now. Returns True when one ran."""
        with self._lock:
            if not self.pending:
                return False
            self.pending = False
        self.rebuild()
        return True

    def _on_request_finished(self, sender, **kwargs):
        self.flush()

    def _on_exit(self):
        if self.flush():
            logger.info("Pending route rebuild ran at process exit")


def host_rules_from(patterns: Iterable) -> tuple:
    """Build host rules from ``(pattern, resource_type, slug, language)`` tuples."""
    return tuple(
        RouteRule(pattern, RouteQuery(resource_type, slug, language))
        for pattern, resource_type, slug, language in patterns
    )
