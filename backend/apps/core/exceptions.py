"""Exceptions shared by the routing core and its collaborators.

None of these escape into page rendering: the routing components catch them
and fall back to an unlocalized link or to the host's default routing.
"""


class RoutingError(Exception):
    """Base class for localized routing errors."""


class ResourceNotFound(RoutingError):
    """No published resource matches the given slug or id."""

    def __init__(self, resource_type, identifier):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"No published {resource_type} matches '{identifier}'")


class TranslationMissing(RoutingError):
    """Resource exists but has no slug for the requested language."""


class MalformedEncoding(RoutingError):
    """A multilingual field value could not be decoded."""


class DependencyUnavailable(RoutingError):
    """The language registry is not present or not configured."""
