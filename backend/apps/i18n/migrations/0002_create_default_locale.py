"""
Migration to create the default locale.
"""

from django.db import migrations


def create_default_locale(apps, schema_editor):
    """Create the default English locale."""
    Locale = apps.get_model("i18n", "Locale")

    # Check if any default locale already exists
    if not Locale.objects.filter(is_default=True).exists():
        Locale.objects.get_or_create(
            code="en",
            defaults={
                "name": "English",
                "is_default": True,
                "is_active": True,
            },
        )


def reverse_default_locale(apps, schema_editor):
    """Remove the default English locale."""
    Locale = apps.get_model("i18n", "Locale")
    Locale.objects.filter(code="en", is_default=True).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("i18n", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_default_locale, reverse_default_locale),
    ]
