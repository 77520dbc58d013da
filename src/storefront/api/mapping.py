"""Entity to DTO mapping.

Each mapper names the fields it copies; nothing is discovered by reflection.
"""

from storefront.api.schemas import (
    CartDTO,
    CartItemDTO,
    CategoryDTO,
    CategoryResponse,
    ProductDTO,
    ProductResponse,
)
from storefront.shared.pagination import Page


def to_category_dto(category) -> CategoryDTO:
    return CategoryDTO(category_id=str(category.id), name=category.name)


def to_product_dto(product) -> ProductDTO:
    return ProductDTO(
        product_id=str(product.id),
        category_id=str(product.category_id),
        name=product.name,
        description=product.description,
        quantity=product.quantity,
        price=product.price,
        discount=product.discount,
        special_price=product.special_price,
        image=product.image,
    )


def to_cart_item_dto(item) -> CartItemDTO:
    return CartItemDTO(
        cart_item_id=str(item.id),
        product_id=str(item.product_id),
        product_name=item.product_name,
        image=item.image,
        product_price=item.product_price,
        discount=item.discount,
        quantity=item.quantity,
    )


def to_cart_dto(cart) -> CartDTO:
    return CartDTO(
        cart_id=str(cart.id),
        user_id=str(cart.user_id),
        total_price=cart.total_price,
        items=[to_cart_item_dto(item) for item in cart.items],
    )


def _page_metadata(page: Page) -> dict:
    return {
        "page_number": page.page_number,
        "page_size": page.page_size,
        "total_elements": page.total_elements,
        "total_pages": page.total_pages,
        "last_page": page.is_last_page,
    }


def to_category_response(page: Page) -> CategoryResponse:
    return CategoryResponse(content=[to_category_dto(c) for c in page.items], **_page_metadata(page))


def to_product_response(page: Page) -> ProductResponse:
    return ProductResponse(content=[to_product_dto(p) for p in page.items], **_page_metadata(page))
