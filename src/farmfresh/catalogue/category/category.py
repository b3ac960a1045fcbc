"""Category aggregate root for grouping products in the storefront."""

import re
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from farmfresh.domain import farmfresh


@farmfresh.event(part_of="Category")
class CategoryCreated:
    __version__ = 1

    category_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=100)


@farmfresh.aggregate
class Category:
    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=100)
    description = Text()
    image_url = String(max_length=500)
    created_at = DateTime()

    @classmethod
    def create(cls, name, slug, description=None, image_url=None):
        if not re.match(r"^[a-z0-9]+(-[a-z0-9]+)*$", slug):
            raise ValidationError({"slug": ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

        category = cls(
            name=name,
            slug=slug,
            description=description,
            image_url=image_url,
            created_at=datetime.now(UTC),
        )
        category.raise_(
            CategoryCreated(
                category_id=str(category.id),
                name=name,
                slug=slug,
            )
        )
        return category


@farmfresh.repository(part_of=Category)
class CategoryRepository:
    def all_categories(self) -> list[Category]:
        return self._dao.query.order_by("name").all().items

    def by_slug(self, slug) -> Category | None:
        matches = self._dao.query.filter(slug=slug).all().items
        return matches[0] if matches else None
