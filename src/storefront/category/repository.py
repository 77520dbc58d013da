"""Repository for the Category aggregate."""

from storefront.category.category import Category
from storefront.domain import storefront
from storefront.shared.pagination import fetch_all


@storefront.repository(part_of=Category)
class CategoryRepository:
    def find_by_name(self, name: str) -> Category | None:
        """Find a Category by its exact (case-sensitive) name."""
        return self._dao.query.filter(name=name).all().first

    def find_all(self) -> list[Category]:
        return fetch_all(self._dao.query)

    def count(self) -> int:
        return self._dao.query.all().total
