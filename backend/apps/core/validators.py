"""Custom validators for the core app."""

from django.core.exceptions import ValidationError
from django.core.validators import validate_unicode_slug
from django.utils.translation import gettext_lazy as _

from .exceptions import MalformedEncoding


def validate_multilingual_slug(value):
    """
    Validate a multilingual slug field.

    Every language entry must decode and be a valid unicode slug.

    Args:
        value: The encoded multilingual string to validate
    """
    if not value:
        return

    from apps.i18n.multilingual import default_codec

    try:
        translations = default_codec.decode(value)
    except MalformedEncoding as e:
        raise ValidationError(
            _("Invalid multilingual value: %(error)s"),
            params={"error": str(e)},
            code="invalid_multilingual",
        )

    for code, slug in translations.items():
        try:
            validate_unicode_slug(slug)
        except ValidationError:
            raise ValidationError(
                _("Slug '%(slug)s' for language '%(code)s' is not a valid slug."),
                params={"slug": slug, "code": code},
                code="invalid_slug",
            )
