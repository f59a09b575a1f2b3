from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Locale",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        help_text="Language code (e.g., 'uk', 'ru', 'en')",
                        max_length=10,
                        unique=True,
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Human-readable name in English (e.g., 'Ukrainian', 'Russian')",
                        max_length=100,
                    ),
                ),
                (
                    "url_prefix",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="URL path prefix for this locale (defaults to the code when blank)",
                        max_length=20,
                    ),
                ),
                (
                    "hreflang",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Language/region tag used in alternate links (e.g., 'ru-ru')",
                        max_length=20,
                    ),
                ),
                (
                    "sort_order",
                    models.PositiveIntegerField(
                        default=0,
                        help_text="Sort order for locale lists (lower numbers first)",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Whether this locale is active and available for use",
                    ),
                ),
                (
                    "is_default",
                    models.BooleanField(
                        default=False,
                        help_text="Whether this is the default locale for the site",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True, null=True, blank=True)),
            ],
            options={
                "ordering": ["sort_order", "code"],
                "indexes": [
                    models.Index(
                        fields=["is_active", "sort_order"],
                        name="i18n_locale_is_acti_5c8e1f_idx",
                    ),
                    models.Index(
                        fields=["is_default"], name="i18n_locale_is_defa_9a1b2c_idx"
                    ),
                ],
            },
        ),
    ]
