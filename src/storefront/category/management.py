"""Category management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.domain import storefront
from storefront.shared.errors import Conflict, get_or_raise

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=255)


@storefront.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=255)


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if repo.find_by_name(command.name) is not None:
            raise Conflict("Category", "name", command.name)

        category = Category.create(name=command.name)
        repo.add(category)

        logger.info("Category created", category_id=str(category.id), name=category.name)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = get_or_raise(repo, "Category", "category_id", command.category_id)
        category.rename(command.name)
        repo.add(category)
        return str(category.id)

    @handle(DeleteCategory)
    def delete_category(self, command):
        """Remove the category and hand back the removed aggregate as a snapshot.

        Products of the category are left untouched.
        """
        repo = current_domain.repository_for(Category)
        category = get_or_raise(repo, "Category", "category_id", command.category_id)
        repo._dao.delete(category)

        logger.info("Category deleted", category_id=str(category.id), name=category.name)
        return category
