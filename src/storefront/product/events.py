"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to a category."""

    __version__ = 1

    product_id: Identifier(required=True)
    category_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    discount: Float(required=True)
    special_price: Float(required=True)
    quantity: Integer(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """A product's details and pricing were overwritten."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    previous_special_price: Float(required=True)
    price: Float(required=True)
    discount: Float(required=True)
    special_price: Float(required=True)
    quantity: Integer(required=True)


@storefront.event(part_of="Product")
class ProductImageUpdated:
    """A product's image reference was replaced."""

    __version__ = 1

    product_id: Identifier(required=True)
    image: String(required=True)
