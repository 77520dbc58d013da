"""Category aggregate root."""

from datetime import datetime

from protean.fields import DateTime, String

from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A named grouping of products.

    Names are unique and compared case-sensitively. Products point at their
    category through ``Product.category_id``; the category itself holds no
    product collection.
    """

    name: String(required=True, max_length=255)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name):
        from storefront.category.events import CategoryCreated

        now = datetime.now()
        category = cls(name=name, created_at=now, updated_at=now)
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
            )
        )
        return category

    def rename(self, name):
        from storefront.category.events import CategoryRenamed

        previous_name = self.name
        self.name = name
        self.updated_at = datetime.now()

        self.raise_(
            CategoryRenamed(
                category_id=self.id,
                previous_name=previous_name,
                name=name,
            )
        )
