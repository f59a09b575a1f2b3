"""
Cache utilities and key management for localized routing.

Provides consistent cache key generation and whole-namespace invalidation.
"""

import time
from typing import Optional, Union

from django.core.cache import caches

# Cache TTL settings
CACHE_TIMEOUTS = {
    "slug": 60 * 60,  # 1 hour
    "routes": None,  # never expires
}

# Cache key prefixes
CACHE_PREFIXES = {
    "slug": "sl",
    "routes": "rt",
}

MISSING = object()


class CacheKeyBuilder:
    """
    Builds consistent cache keys for the routing apps.

    Key format: {prefix}:{namespace}:{key_parts}
    """

    def __init__(self, prefix: str = "routing"):
        self.prefix = prefix

    def build_key(self, namespace: str, *parts: Union[str, int, None]) -> str:
        """
        Build a cache key from namespace and parts.

        Args:
            namespace: Key namespace (e.g., 'slug', 'routes')
            *parts: Key components to join

        Returns:
            Formatted cache key
        """
        # Convert all parts to strings and filter out None values
        clean_parts = [str(part) for part in parts if part is not None]
        key_suffix = ":".join(clean_parts)

        # Get prefix for namespace
        ns_prefix = CACHE_PREFIXES.get(namespace, namespace[:2])

        return f"{self.prefix}:{ns_prefix}:{key_suffix}"

    def generation_key(self, namespace: str) -> str:
        """
        Build the key holding a namespace's generation counter.

        Format: routing:{ns}:generation
        """
        return self.build_key(namespace, "generation")


class GenerationalCache:
    """
    Namespaced cache whose entries are all invalidated at once.

    Every key embeds the namespace's current generation number. ``clear()``
    increments the generation atomically, which makes all earlier entries
    unreachable without enumerating them; they expire on their own.
    """

    def __init__(
        self,
        namespace: str,
        alias: str = "default",
        timeout: Optional[int] = None,
        key_builder: Optional[CacheKeyBuilder] = None,
    ):
        self.namespace = namespace
        self.alias = alias
        self.timeout = timeout if timeout is not None else CACHE_TIMEOUTS.get(namespace)
        self.key_builder = key_builder or CacheKeyBuilder()

    @property
    def backend(self):
        return caches[self.alias]

    def generation(self) -> int:
        """Return the current generation, starting a new one if none is stored."""
        key = self.key_builder.generation_key(self.namespace)
        # Seeded from the clock so an evicted counter never revives old keys
        return self.backend.get_or_set(key, time.time_ns(), timeout=None)

    def key(self, parts: tuple) -> str:
        return self.key_builder.build_key(self.namespace, self.generation(), *parts)

    def get(self, parts: tuple, default=MISSING):
        """Get a value, returning ``default`` on a miss (stored None is a hit)."""
        return self.backend.get(self.key(parts), default)

    def put(self, parts: tuple, value):
        self.backend.set(self.key(parts), value, self.timeout)

    def clear(self) -> int:
        """Invalidate every entry of the namespace and return the new generation."""
        key = self.key_builder.generation_key(self.namespace)
        try:
            return self.backend.incr(key)
        except ValueError:
            # Counter was evicted; a fresh clock value is newer than any old one
            generation = time.time_ns()
            self.backend.set(key, generation, timeout=None)
            return generation
