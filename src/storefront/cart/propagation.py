"""Cart consistency propagation — carts react to catalogue mutations.

Carts keep a denormalized copy of the products they hold (price, name,
image, discount). Whenever the catalogue changes a product, every cart line
referencing it is repaired here, synchronously and inside the unit of work
of the catalogue mutation:

- ``on_product_updated`` refreshes the line snapshot from the product's
  current state and recomputes the cart total.
- ``on_product_deleted`` drops the line and recomputes the cart total. It
  must finish before the product row is deleted so that no cart is left
  pointing at a product that no longer exists.

Every affected cart is attempted. Carts that could not be repaired are
reported together through ``PropagationIncomplete`` once all the others
have been processed, which fails the originating mutation.

Both operations converge: calling them again with no intervening product
change finds nothing stale and writes nothing.
"""

import structlog
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.product.product import Product
from storefront.shared.errors import PropagationIncomplete, get_or_raise

logger = structlog.get_logger(__name__)


class CartConsistencyPropagator:
    """Repairs the carts referencing a product after a catalogue mutation."""

    def __init__(self, carts=None, products=None):
        self.carts = carts if carts is not None else current_domain.repository_for(Cart)
        self.products = products if products is not None else current_domain.repository_for(Product)

    def on_product_updated(self, product_id, product=None) -> list[str]:
        """Reprice every line referencing the product and return the ids of repaired carts.

        ``product`` carries the post-update aggregate when the caller has it at
        hand; otherwise the product is loaded from the store.
        """
        if product is None:
            product = get_or_raise(self.products, "Product", "product_id", product_id)

        def repair(cart):
            return cart.reprice_item(
                product_id=product_id,
                product_name=product.name,
                image=product.image,
                product_price=product.special_price,
                discount=product.discount,
            )

        return self._propagate("updated", product_id, repair)

    def on_product_deleted(self, product_id) -> list[str]:
        """Remove every line referencing the product and return the ids of repaired carts."""

        def repair(cart):
            cart.remove_item(product_id)
            return True

        return self._propagate("deleted", product_id, repair)

    def _propagate(self, change, product_id, repair) -> list[str]:
        carts = self.carts.find_by_product(product_id)
        logger.info("Propagating product change to carts", change=change, product_id=str(product_id), carts=len(carts))

        repaired, failed = [], []
        for cart in carts:
            try:
                if repair(cart):
                    self.carts.add(cart)
                    repaired.append(str(cart.id))
            except Exception:
                logger.exception(
                    "Cart could not be repaired",
                    change=change,
                    product_id=str(product_id),
                    cart_id=str(cart.id),
                )
                failed.append(str(cart.id))

        if failed:
            raise PropagationIncomplete(str(product_id), failed)

        return repaired
