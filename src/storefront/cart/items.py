"""Cart item management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.errors import Conflict, InvalidArgument, NotFound, get_or_raise

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class AddProductToCart:
    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class RemoveProductFromCart:
    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddProductToCart)
    def add_product_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = get_or_raise(repo, "Cart", "cart_id", command.cart_id)
        product = get_or_raise(current_domain.repository_for(Product), "Product", "product_id", command.product_id)

        if cart.line_for(product.id) is not None:
            raise Conflict(
                "CartItem",
                "product_id",
                product.id,
                message=f"Product {product.name} already exists in the cart",
            )
        if product.quantity == 0:
            raise InvalidArgument("quantity", f"{product.name} is not available")
        if product.quantity < command.quantity:
            raise InvalidArgument(
                "quantity",
                f"Please, make an order of the {product.name} less than or equal to the quantity {product.quantity}",
            )

        cart.add_item(
            product_id=product.id,
            product_name=product.name,
            image=product.image,
            product_price=product.special_price,
            discount=product.discount,
            quantity=command.quantity,
        )
        repo.add(cart)

        logger.info("Product added to cart", cart_id=str(cart.id), product_id=str(product.id))
        return str(cart.id)

    @handle(RemoveProductFromCart)
    def remove_product_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = get_or_raise(repo, "Cart", "cart_id", command.cart_id)
        if cart.line_for(command.product_id) is None:
            raise NotFound("Product", "product_id", command.product_id)

        cart.remove_item(command.product_id)
        repo.add(cart)
        return str(cart.id)
