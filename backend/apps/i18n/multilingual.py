"""Codec for multilingual string fields.

A multilingual value packs one string per language into a single text
column using language tags::

    [:uk]parasolki-cholovichi[:ru]muzhskie-zonty-vinnica[:]

Brace tags (``{:uk}...{:}``) are accepted on decode as well. Callers only see
``decode`` / ``encode``; nothing outside this module relies on the grammar.
"""

import re

from apps.core.exceptions import MalformedEncoding

TAG_RE = re.compile(r"[\[{]:([A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,4})?)?[\]}]")


class MultilingualCodec:
    """Decode and encode language-tagged strings."""

    def decode(self, value) -> dict[str, str]:
        """Return a mapping of language code to value.

        Empty input decodes to an empty mapping.

        Raises:
            MalformedEncoding: the value is not a tagged multilingual string.
        """
        if value is None:
            return {}

        if not isinstance(value, str):
            raise MalformedEncoding(f"Expected a string, got {type(value).__name__}")

        if not value.strip():
            return {}

        matches = list(TAG_RE.finditer(value))
        if not matches or matches[0].start() != 0:
            raise MalformedEncoding(f"Value has no leading language tag: {value[:40]!r}")

        result = {}
        for index, match in enumerate(matches):
            code = match.group(1)
            if not code:
                # Closing tag
                continue
            end = matches[index + 1].start() if index + 1 < len(matches) else len(value)
            text = value[match.end():end].strip()
            if text:
                result[code.lower()] = text

        return result

    def encode(self, values: dict[str, str]) -> str:
        """Pack a mapping of language code to value into a single string."""
        parts = [f"[:{code}]{text}" for code, text in values.items() if text]
        if not parts:
            return ""
        return "".join(parts) + "[:]"


default_codec = MultilingualCodec()
