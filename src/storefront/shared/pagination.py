"""Sorting and paging over entity collections.

``paginate`` accepts either a Protean queryset (anything with ``.all()``
returning a result set) or a plain sequence of entities. Items are sorted in
memory with a stable sort, so ties keep the order the store returned them
in, and only then sliced into the requested page.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from protean.utils.reflection import declared_fields

from storefront.shared.errors import InvalidArgument

SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class Page:
    """A bounded, sorted slice of a larger collection."""

    items: list[Any] = field(default_factory=list)
    page_number: int = 0
    page_size: int = 0
    total_elements: int = 0
    total_pages: int = 0
    is_last_page: bool = True


def fetch_all(queryset) -> list:
    """Materialize every record matched by ``queryset``, past the default query limit."""
    result = queryset.all()
    if result.total > len(result.items):
        result = queryset.limit(result.total).all()
    return list(result.items)


def normalize_sort_order(sort_order: str) -> str:
    order = (sort_order or "").strip().lower()
    if order not in SORT_ORDERS:
        raise InvalidArgument("sort_order", f"Sort order must be one of {', '.join(SORT_ORDERS)}, got '{sort_order}'")
    return order


def _sort_key(attribute: str):
    def key(item):
        value = getattr(item, attribute)
        # None sorts after every real value
        return (value is None, value)

    return key


def _sorted(items: list, attribute: str, descending: bool) -> list:
    return sorted(items, key=_sort_key(attribute), reverse=descending)


def paginate(
    source,
    page_number: int,
    page_size: int,
    sort_by: str,
    sort_order: str = "asc",
    entity_cls=None,
    ordering: tuple[str, ...] = (),
) -> Page:
    """Sort ``source`` and return page ``page_number`` of size ``page_size``.

    ``ordering`` holds query-level keys (``"price"`` or ``"-price"``) that take
    priority over the requested sort, which then only breaks their ties.
    ``entity_cls`` restricts ``sort_by`` to the class's declared fields.
    """
    if page_size is None or page_size <= 0:
        raise InvalidArgument("page_size", "Page size must be greater than zero")
    if page_number is None or page_number < 0:
        raise InvalidArgument("page_number", "Page number must be zero or greater")

    descending = normalize_sort_order(sort_order) == "desc"

    if entity_cls is not None and sort_by not in declared_fields(entity_cls):
        raise InvalidArgument("sort_by", f"'{sort_by}' is not a sortable field of {entity_cls.__name__}")

    items = fetch_all(source) if hasattr(source, "all") else list(source)

    items = _sorted(items, sort_by, descending)
    # Stable sorts: apply the lowest-priority key first
    for key in reversed(ordering):
        items = _sorted(items, key.lstrip("-"), key.startswith("-"))

    total_elements = len(items)
    total_pages = math.ceil(total_elements / page_size)
    start = page_number * page_size

    return Page(
        items=items[start : start + page_size],
        page_number=page_number,
        page_size=page_size,
        total_elements=total_elements,
        total_pages=total_pages,
        is_last_page=page_number >= total_pages - 1,
    )
