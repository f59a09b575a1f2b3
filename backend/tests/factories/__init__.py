"""Test data factories for the routing, i18n and catalog apps."""

from .base import BaseFactory, StaffUserFactory, UserFactory  # noqa: F401
from .catalog import PostFactory, ProductFactory, TermFactory  # noqa: F401
from .i18n import LocaleFactory  # noqa: F401
