"""Product details management — command and handler.

Updating a product is the only path that changes its pricing. The new
special price is always recomputed here; carts holding the product are
repriced in the same unit of work.
"""

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.propagation import CartConsistencyPropagator
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.errors import get_or_raise

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: String()
    quantity: Integer(default=0)
    price: Float(required=True)
    discount: Float(default=0.0)


@storefront.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = get_or_raise(repo, "Product", "product_id", command.product_id)

        product.update_details(
            name=command.name,
            description=command.description,
            quantity=command.quantity,
            price=command.price,
            discount=command.discount,
        )
        repo.add(product)

        repaired = CartConsistencyPropagator().on_product_updated(product.id, product=product)

        logger.info(
            "Product updated",
            product_id=str(product.id),
            special_price=product.special_price,
            carts_repriced=len(repaired),
        )
        return str(product.id)
