from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import BooleanField, CharField, DateTimeField, PositiveIntegerField


class Locale(models.Model):
    """Locale model for multi-language routing support."""

    code: CharField = models.CharField(
        max_length=10, unique=True, help_text="Language code (e.g., 'uk', 'ru', 'en')"
    )

    name: CharField = models.CharField(
        max_length=100,
        help_text="Human-readable name in English (e.g., 'Ukrainian', 'Russian')",
    )

    url_prefix: CharField = models.CharField(
        max_length=20,
        blank=True,
        default="",
        help_text="URL path prefix for this locale (defaults to the code when blank)",
    )

    hreflang: CharField = models.CharField(
        max_length=20,
        blank=True,
        default="",
        help_text="Language/region tag used in alternate links (e.g., 'ru-ru')",
    )

    sort_order: PositiveIntegerField = models.PositiveIntegerField(
        default=0, help_text="Sort order for locale lists (lower numbers first)"
    )

    is_active: BooleanField = models.BooleanField(
        default=True, help_text="Whether this locale is active and available for use"
    )

    is_default: BooleanField = models.BooleanField(
        default=False, help_text="Whether this is the default locale for the site"
    )

    created_at: DateTimeField = models.DateTimeField(auto_now_add=True)

    updated_at: DateTimeField = models.DateTimeField(
        auto_now=True, null=True, blank=True
    )

    class Meta:
        ordering = ["sort_order", "code"]
        indexes = [
            models.Index(
                fields=["is_active", "sort_order"], name="i18n_locale_is_acti_5c8e1f_idx"
            ),
            models.Index(fields=["is_default"], name="i18n_locale_is_defa_9a1b2c_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.code})"

    @property
    def prefix(self) -> str:
        return self.url_prefix or self.code

    def clean(self):
        """Validate locale data."""
        super().clean()

        clashing = Locale.objects.exclude(pk=self.pk).filter(
            models.Q(url_prefix=self.prefix)
            | models.Q(url_prefix="", code=self.prefix)
        )
        if clashing.exists():
            raise ValidationError(
                {"url_prefix": f"URL prefix '{self.prefix}' is already used by another locale."}
            )

    def save(self, *args, **kwargs):
        # Ensure only one default locale
        if self.is_default:
            Locale.objects.exclude(pk=self.pk).update(is_default=False)

        # Ensure we have a default locale if this is the only active one
        if not self.is_default and self.is_active:
            if (
                not Locale.objects.exclude(pk=self.pk)
                .filter(is_default=True, is_active=True)
                .exists()
            ):
                self.is_default = True

        # Run validation
        self.full_clean()

        super().save(*args, **kwargs)
