"""Category management — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from farmfresh.catalogue.category.category import Category
from farmfresh.domain import farmfresh


@farmfresh.command(part_of="Category")
class CreateCategory:
    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=100)
    description = Text()
    image_url = String(max_length=500)


@farmfresh.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if repo.by_slug(command.slug) is not None:
            raise ValidationError({"slug": [f"Category '{command.slug}' already exists"]})

        category = Category.create(
            name=command.name,
            slug=command.slug,
            description=command.description,
            image_url=command.image_url,
        )
        repo.add(category)
        return str(category.id)
