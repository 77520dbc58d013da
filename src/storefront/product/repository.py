"""Repository for the Product aggregate."""

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.pagination import fetch_all


@storefront.repository(part_of=Product)
class ProductRepository:
    def find_by_name_in_category(self, category_id: str, name: str) -> Product | None:
        """Product names are unique per category, not globally."""
        return self._dao.query.filter(category_id=category_id, name=name).all().first

    def find_by_category(self, category_id: str) -> list[Product]:
        return fetch_all(self._dao.query.filter(category_id=category_id))

    def search_by_name(self, keyword: str) -> list[Product]:
        """Case-insensitive substring match on the product name."""
        return fetch_all(self._dao.query.filter(name__icontains=keyword))

    def find_all(self) -> list[Product]:
        return fetch_all(self._dao.query)
