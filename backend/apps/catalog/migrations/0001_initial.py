import apps.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Term",
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
                ("taxonomy", models.CharField(default="catalog", max_length=50)),
                ("name", models.CharField(max_length=200)),
                (
                    "slug",
                    models.SlugField(allow_unicode=True, blank=True, max_length=200),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("published", "Published"),
                            ("archived", "Archived"),
                        ],
                        default="published",
                        max_length=20,
                    ),
                ),
                (
                    "seo_slug",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Translated slugs per language, e.g. [:ru]muzhskie-zonty[:]",
                        validators=[apps.core.validators.validate_multilingual_slug],
                    ),
                ),
                ("sort_order", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["sort_order", "id"],
                "indexes": [
                    models.Index(
                        fields=["taxonomy", "status"],
                        name="catalog_ter_taxonom_0d4b7e_idx",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("taxonomy", "slug"),
                        name="catalog_term_taxonomy_slug_uniq",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Post",
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
                    "post_type",
                    models.CharField(
                        choices=[("product", "Product"), ("post", "Post")],
                        default="post",
                        max_length=20,
                    ),
                ),
                ("title", models.CharField(max_length=200)),
                (
                    "slug",
                    models.SlugField(allow_unicode=True, blank=True, max_length=200),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("published", "Published"),
                            ("archived", "Archived"),
                        ],
                        default="draft",
                        max_length=20,
                    ),
                ),
                (
                    "seo_slug",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Translated slugs per language, e.g. [:ru]chernyj-zont[:]",
                        validators=[apps.core.validators.validate_multilingual_slug],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "terms",
                    models.ManyToManyField(
                        blank=True, related_name="posts", to="catalog.term"
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["post_type", "status"],
                        name="catalog_pos_post_ty_3f1a2c_idx",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("post_type", "slug"),
                        name="catalog_post_type_slug_uniq",
                    )
                ],
            },
        ),
    ]
