"""Cart management — commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront


@storefront.command(part_of="Cart")
class CreateCart:
    """Open the cart of a user, or return the one they already have."""

    user_id: Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        repo = current_domain.repository_for(Cart)
        existing = repo.find_by_user(command.user_id)
        if existing is not None:
            return str(existing.id)

        cart = Cart.create(user_id=command.user_id)
        repo.add(cart)
        return str(cart.id)
