from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Count, Q
from django.utils.text import slugify

from apps.core.managers import PublishedManager, PublishedQuerySet
from apps.core.validators import validate_multilingual_slug

STATUS_CHOICES = [
    ("draft", "Draft"),
    ("published", "Published"),
    ("archived", "Archived"),
]


class SlugLockMixin:
    """Reject canonical slug changes on published rows."""

    def _check_slug_locked(self):
        if not self.pk:
            return
        previous = (
            type(self).objects.filter(pk=self.pk).values("slug", "status").first()
        )
        if (
            previous
            and previous["status"] == "published"
            and previous["slug"] != self.slug
        ):
            raise ValidationError(
                {"slug": "The slug of a published item cannot be changed."}
            )


class TermQuerySet(PublishedQuerySet):
    def for_taxonomy(self, taxonomy, hide_empty=False):
        """Terms of one taxonomy, optionally only those with published posts."""
        queryset = self.filter(taxonomy=taxonomy)
        if hide_empty:
            queryset = queryset.annotate(
                published_posts=Count("posts", filter=Q(posts__status="published"))
            ).filter(published_posts__gt=0)
        return queryset


class Term(SlugLockMixin, models.Model):
    """Taxonomy term (e.g. a catalog category) with per-language SEO slugs."""

    taxonomy: models.CharField = models.CharField(max_length=50, default="catalog")

    name: models.CharField = models.CharField(max_length=200)

    slug: models.SlugField = models.SlugField(
        max_length=200, blank=True, allow_unicode=True
    )

    status: models.CharField = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default="published"
    )

    seo_slug: models.TextField = models.TextField(
        blank=True,
        default="",
        validators=[validate_multilingual_slug],
        help_text="Translated slugs per language, e.g. [:ru]muzhskie-zonty[:]",
    )

    sort_order: models.PositiveIntegerField = models.PositiveIntegerField(default=0)

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)

    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    objects = TermQuerySet.as_manager()

    class Meta:
        ordering = ["sort_order", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["taxonomy", "slug"], name="catalog_term_taxonomy_slug_uniq"
            ),
        ]
        indexes = [
            models.Index(fields=["taxonomy", "status"], name="catalog_ter_taxonom_0d4b7e_idx"),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        self._check_slug_locked()

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name, allow_unicode=True)

        super().save(*args, **kwargs)


class Post(SlugLockMixin, models.Model):
    """Routable post: either a product or an ordinary content post."""

    PRODUCT = "product"
    POST = "post"

    POST_TYPE_CHOICES = [
        (PRODUCT, "Product"),
        (POST, "Post"),
    ]

    post_type: models.CharField = models.CharField(
        max_length=20, choices=POST_TYPE_CHOICES, default=POST
    )

    title: models.CharField = models.CharField(max_length=200)

    slug: models.SlugField = models.SlugField(
        max_length=200, blank=True, allow_unicode=True
    )

    status: models.CharField = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default="draft"
    )

    seo_slug: models.TextField = models.TextField(
        blank=True,
        default="",
        validators=[validate_multilingual_slug],
        help_text="Translated slugs per language, e.g. [:ru]chernyj-zont[:]",
    )

    terms: models.ManyToManyField = models.ManyToManyField(
        Term, blank=True, related_name="posts"
    )

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)

    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    objects = PublishedManager()

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["post_type", "slug"], name="catalog_post_type_slug_uniq"
            ),
        ]
        indexes = [
            models.Index(fields=["post_type", "status"], name="catalog_pos_post_ty_3f1a2c_idx"),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        super().clean()
        self._check_slug_locked()

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.title, allow_unicode=True)

        super().save(*args, **kwargs)
