"""Product queries — listing and searching the catalogue."""

from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.product.product import Product
from storefront.shared.errors import EmptyResult, get_or_raise
from storefront.shared.pagination import Page, paginate


def list_products(page_number: int, page_size: int, sort_by: str, sort_order: str) -> Page:
    """Return one page of all products. An empty catalogue gives an empty page."""
    return paginate(
        current_domain.repository_for(Product).find_all(),
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        entity_cls=Product,
    )


def search_by_category(category_id: str, page_number: int, page_size: int, sort_by: str, sort_order: str) -> Page:
    """Return the products of a category, cheapest first, then by the requested sort."""
    category = get_or_raise(current_domain.repository_for(Category), "Category", "category_id", category_id)

    products = current_domain.repository_for(Product).find_by_category(category.id)
    if not products:
        raise EmptyResult(f"{category.name} category does not have any products")

    return paginate(
        products,
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        entity_cls=Product,
        ordering=("price",),
    )


def search_by_keyword(keyword: str, page_number: int, page_size: int, sort_by: str, sort_order: str) -> Page:
    """Return the products whose name contains ``keyword``, ignoring case."""
    products = current_domain.repository_for(Product).search_by_name(keyword)
    if not products:
        raise EmptyResult(f"Products not found with keyword: {keyword}")

    return paginate(
        products,
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        entity_cls=Product,
    )
