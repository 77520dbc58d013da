"""Product aggregate root."""

from datetime import datetime

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.pricing import compute_special_price
from storefront.shared.settings import setting


@storefront.aggregate
class Product:
    """A sellable item belonging to exactly one category.

    ``special_price`` is always derived from ``price`` and ``discount`` and is
    the value carts copy into their lines.
    """

    name: String(required=True, max_length=255)
    description: Text()
    quantity: Integer(default=0, min_value=0)
    price: Float(required=True, min_value=0.0)
    discount: Float(default=0.0, min_value=0.0, max_value=100.0)
    special_price: Float(min_value=0.0)
    image: String(max_length=500)
    category_id: Identifier(required=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, category_id, name, price, discount=0.0, quantity=0, description=None, image=None):
        from storefront.product.events import ProductAdded

        discount = discount or 0.0
        quantity = quantity or 0
        image = image or setting("default_image")
        now = datetime.now()

        product = cls(
            category_id=category_id,
            name=name,
            description=description,
            quantity=quantity,
            price=price,
            discount=discount,
            special_price=compute_special_price(price, discount),
            image=image,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                category_id=category_id,
                name=name,
                price=product.price,
                discount=product.discount,
                special_price=product.special_price,
                quantity=product.quantity,
                created_at=now,
            )
        )
        return product

    def update_details(self, name, price, discount=0.0, quantity=0, description=None):
        """Overwrite every editable field and recompute the special price."""
        from storefront.product.events import ProductUpdated

        discount = discount or 0.0
        quantity = quantity or 0
        special_price = compute_special_price(price, discount)
        previous_special_price = self.special_price

        self.name = name
        self.description = description
        self.quantity = quantity
        self.price = price
        self.discount = discount
        self.special_price = special_price
        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                previous_special_price=previous_special_price,
                price=self.price,
                discount=self.discount,
                special_price=self.special_price,
                quantity=self.quantity,
            )
        )

    def update_image(self, image):
        from storefront.product.events import ProductImageUpdated

        self.image = image
        self.updated_at = datetime.now()

        self.raise_(ProductImageUpdated(product_id=self.id, image=image))
