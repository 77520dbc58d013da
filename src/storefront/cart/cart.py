"""Cart aggregate — a user's cart holding priced snapshots of catalogue products.

Each line references its product by identity but bills at ``product_price``,
a copy of the product's special price taken when the line was last priced.
The cart total is never adjusted incrementally: every mutation recomputes it
from the remaining lines, so ``total_price`` always equals the sum of
``product_price * quantity``.
"""

from datetime import datetime

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront


@storefront.entity(part_of="Cart")
class CartItem:
    product_id: Identifier(required=True)
    product_name: String(max_length=255)
    image: String(max_length=500)
    product_price: Float(default=0.0, min_value=0.0)
    discount: Float(default=0.0)
    quantity: Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return self.product_price * self.quantity


@storefront.aggregate
class Cart:
    user_id: Identifier(required=True)
    items: HasMany(CartItem)
    total_price: Float(default=0.0)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, user_id):
        from storefront.cart.events import CartCreated

        now = datetime.now()
        cart = cls(user_id=user_id, total_price=0.0, created_at=now, updated_at=now)
        cart.raise_(CartCreated(cart_id=cart.id, user_id=user_id))
        return cart

    def line_for(self, product_id):
        """Return the line referencing ``product_id``, or None."""
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def items_total(self):
        return sum(item.line_total for item in self.items)

    def _recalculate_total(self):
        self.total_price = self.items_total()

    def add_item(self, product_id, product_name, image, product_price, discount, quantity):
        """Add a line priced at ``product_price``. A product appears at most once per cart."""
        from storefront.cart.events import CartItemAdded

        if self.line_for(product_id) is not None:
            raise ValidationError({"product_id": [f"Product {product_name} already exists in the cart"]})

        with atomic_change(self):
            item = CartItem(
                product_id=product_id,
                product_name=product_name,
                image=image,
                product_price=product_price,
                discount=discount,
                quantity=quantity,
            )
            self.add_items(item)
            self._recalculate_total()
            self.updated_at = datetime.now()

        self.raise_(
            CartItemAdded(
                cart_id=self.id,
                item_id=item.id,
                product_id=product_id,
                quantity=quantity,
                product_price=product_price,
                total_price=self.total_price,
            )
        )
        return item

    def reprice_item(self, product_id, product_name, image, product_price, discount):
        """Refresh the snapshot of ``product_id``'s line.

        Returns False and changes nothing when the line is missing or already
        current, which is what makes repeated repairs converge.
        """
        from storefront.cart.events import CartItemRepriced

        item = self.line_for(product_id)
        if item is None:
            return False

        snapshot = (product_name, image, product_price, discount)
        if (item.product_name, item.image, item.product_price, item.discount) == snapshot and (
            self.total_price == self.items_total()
        ):
            return False

        previous_price = item.product_price
        with atomic_change(self):
            item.product_name = product_name
            item.image = image
            item.product_price = product_price
            item.discount = discount
            self._recalculate_total()
            self.updated_at = datetime.now()

        self.raise_(
            CartItemRepriced(
                cart_id=self.id,
                item_id=item.id,
                product_id=product_id,
                previous_price=previous_price,
                product_price=product_price,
                total_price=self.total_price,
            )
        )
        return True

    def remove_item(self, product_id):
        """Remove the line referencing ``product_id`` and recompute the total."""
        from storefront.cart.events import CartItemRemoved

        item = self.line_for(product_id)
        if item is None:
            raise ValidationError({"product_id": [f"Product {product_id} is not in the cart"]})

        with atomic_change(self):
            self.remove_items(item)
            self._recalculate_total()
            self.updated_at = datetime.now()

        self.raise_(
            CartItemRemoved(
                cart_id=self.id,
                item_id=item.id,
                product_id=product_id,
                total_price=self.total_price,
            )
        )
        return item
