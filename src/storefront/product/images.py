"""Product image management — command and handler.

The image bytes are stored by the image storage adapter before this command
is processed; the product only records the returned reference. Cart lines
holding the product pick up the new image in the same unit of work.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.cart.propagation import CartConsistencyPropagator
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.errors import get_or_raise

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class UpdateProductImage:
    product_id: Identifier(required=True)
    image: String(required=True, max_length=500)


@storefront.command_handler(part_of=Product)
class ManageProductImageHandler:
    @handle(UpdateProductImage)
    def update_image(self, command):
        repo = current_domain.repository_for(Product)
        product = get_or_raise(repo, "Product", "product_id", command.product_id)
        product.update_image(command.image)
        repo.add(product)

        repaired = CartConsistencyPropagator().on_product_updated(product.id, product=product)

        logger.info(
            "Product image updated",
            product_id=str(product.id),
            image=product.image,
            carts_repriced=len(repaired),
        )
        return str(product.id)
