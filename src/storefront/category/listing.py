"""Category listing — read side of the category store."""

from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.shared.errors import EmptyResult
from storefront.shared.pagination import Page, paginate


def list_categories(page_number: int, page_size: int, sort_by: str, sort_order: str) -> Page:
    """Return one page of categories.

    An empty store is a business error; a page past the end of a non-empty
    store is not, and comes back with no items.
    """
    repo = current_domain.repository_for(Category)
    if repo.count() == 0:
        raise EmptyResult("No category created till now.")

    return paginate(
        repo.find_all(),
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        entity_cls=Category,
    )
