"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartCreated:
    """A cart was opened for a user."""

    __version__ = 1

    cart_id: Identifier(required=True)
    user_id: Identifier(required=True)


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A product was added to a cart at its current special price."""

    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    product_price: Float(required=True)
    total_price: Float(required=True)


@storefront.event(part_of="Cart")
class CartItemRepriced:
    """A cart line's snapshot was refreshed from its product."""

    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    previous_price: Float(required=True)
    product_price: Float(required=True)
    total_price: Float(required=True)


@storefront.event(part_of="Cart")
class CartItemRemoved:
    """A line was removed from a cart."""

    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    total_price: Float(required=True)
