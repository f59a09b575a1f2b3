"""Lookups of routable resources in the catalog.

The routing core never touches the ORM directly; it goes through
``ResourceRepository`` and receives lightweight ``ResourceRef`` handles.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from apps.catalog.models import Post, Term

from .conf import CONTENT_POST, PRODUCT, TAXONOMY_TERM


@dataclass(frozen=True)
class ResourceRef:
    """Handle to a routable resource: its type, id and canonical slug."""

    resource_type: str
    id: int
    slug: str

    @classmethod
    def from_instance(cls, instance) -> "ResourceRef":
        if isinstance(instance, Term):
            return cls(TAXONOMY_TERM, instance.pk, instance.slug)
        if instance.post_type == Post.PRODUCT:
            return cls(PRODUCT, instance.pk, instance.slug)
        return cls(CONTENT_POST, instance.pk, instance.slug)


class ResourceRepository:
    """Read access to published products, content posts and taxonomy terms."""

    POST_TYPES = {
        PRODUCT: Post.PRODUCT,
        CONTENT_POST: Post.POST,
    }

    def __init__(self, taxonomy: str = "catalog"):
        self.taxonomy = taxonomy

    def _queryset(self, resource_type):
        if resource_type == TAXONOMY_TERM:
            return Term.objects.published().for_taxonomy(self.taxonomy)
        try:
            post_type = self.POST_TYPES[resource_type]
        except KeyError:
            raise ValueError(f"Unknown resource type: {resource_type}")
        return Post.objects.published().filter(post_type=post_type)

    def find_published(self, resource_type: str, slug: str) -> Optional[ResourceRef]:
        """Find a published resource by its canonical slug."""
        row = self._queryset(resource_type).filter(slug=slug).values("pk", "slug").first()
        if row is None:
            return None
        return ResourceRef(resource_type, row["pk"], row["slug"])

    def find_by_id(self, resource_type: str, resource_id: int) -> Optional[ResourceRef]:
        row = (
            self._queryset(resource_type)
            .filter(pk=resource_id)
            .values("pk", "slug")
            .first()
        )
        if row is None:
            return None
        return ResourceRef(resource_type, row["pk"], row["slug"])

    def get_slug_field(self, resource_type: str, resource_id: int) -> Optional[str]:
        """Return the raw multilingual slug value, or None when the row is gone."""
        model = Term if resource_type == TAXONOMY_TERM else Post
        return (
            model.objects.filter(pk=resource_id)
            .values_list("seo_slug", flat=True)
            .first()
        )

    def iter_published(
        self, resource_type: str, containing: Optional[str] = None
    ) -> Iterator[ResourceRef]:
        """Yield published resources of a type in stable enumeration order.

        ``containing`` narrows the scan to rows whose multilingual slug field
        holds the given text.
        """
        queryset = self._queryset(resource_type)
        if containing:
            queryset = queryset.filter(seo_slug__contains=containing)
        for pk, slug in queryset.values_list("pk", "slug").iterator():
            yield ResourceRef(resource_type, pk, slug)

    def list_terms(self, hide_empty: bool = False) -> list[ResourceRef]:
        """Published terms of the tracked taxonomy in enumeration order."""
        queryset = (
            Term.objects.published()
            .for_taxonomy(self.taxonomy, hide_empty=hide_empty)
            .values_list("pk", "slug")
        )
        return [ResourceRef(TAXONOMY_TERM, pk, slug) for pk, slug in queryset]

    def load(self, ref: ResourceRef):
        """Return the model instance behind a reference, or None."""
        if ref.resource_type == TAXONOMY_TERM:
            return Term.objects.filter(pk=ref.id).first()
        return Post.objects.filter(pk=ref.id).first()
