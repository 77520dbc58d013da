"""Application interface for shopping carts."""

from protean.utils.globals import current_domain

from storefront.api.mapping import to_cart_dto
from storefront.api.schemas import CartDTO
from storefront.cart.cart import Cart
from storefront.cart.items import AddProductToCart, RemoveProductFromCart
from storefront.cart.management import CreateCart
from storefront.domain import storefront
from storefront.shared.errors import NotFound, get_or_raise
from storefront.shared.locks import locked


class CartAPI:
    def __init__(self, domain=None):
        self.domain = domain if domain is not None else storefront

    def create_cart(self, user_id: str) -> CartDTO:
        """Open the user's cart. A user who already has one gets it back."""
        with self.domain.domain_context(), locked(f"user:{user_id}"):
            cart_id = current_domain.process(CreateCart(user_id=user_id), asynchronous=False)
            return self._load(cart_id)

    def add_product(self, cart_id: str, product_id: str, quantity: int) -> CartDTO:
        with self.domain.domain_context(), locked(f"product:{product_id}", f"cart:{cart_id}"):
            command = AddProductToCart(cart_id=cart_id, product_id=product_id, quantity=quantity)
            current_domain.process(command, asynchronous=False)
            return self._load(cart_id)

    def remove_product(self, cart_id: str, product_id: str) -> CartDTO:
        with self.domain.domain_context(), locked(f"cart:{cart_id}"):
            command = RemoveProductFromCart(cart_id=cart_id, product_id=product_id)
            current_domain.process(command, asynchronous=False)
            return self._load(cart_id)

    def get_cart(self, cart_id: str) -> CartDTO:
        with self.domain.domain_context():
            return self._load(cart_id)

    def get_cart_for_user(self, user_id: str) -> CartDTO:
        with self.domain.domain_context():
            cart = current_domain.repository_for(Cart).find_by_user(user_id)
            if cart is None:
                raise NotFound("Cart", "user_id", user_id)
            return to_cart_dto(cart)

    def _load(self, cart_id) -> CartDTO:
        return to_cart_dto(get_or_raise(current_domain.repository_for(Cart), "Cart", "cart_id", cart_id))
