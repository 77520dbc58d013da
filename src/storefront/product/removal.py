"""Product removal — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.propagation import CartConsistencyPropagator
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.errors import get_or_raise

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class RemoveProductHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        """Strip the product from every cart, then delete it.

        Returns the removed aggregate as a snapshot. If any cart cannot be
        repaired the product is left in place.
        """
        repo = current_domain.repository_for(Product)
        product = get_or_raise(repo, "Product", "product_id", command.product_id)

        repaired = CartConsistencyPropagator().on_product_deleted(product.id)
        repo._dao.delete(product)

        logger.info("Product deleted", product_id=str(product.id), carts_repaired=len(repaired))
        return product
