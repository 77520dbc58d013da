"""Repository for the Cart aggregate."""

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart, CartItem
from storefront.domain import storefront
from storefront.shared.pagination import fetch_all


@storefront.repository(part_of=Cart)
class CartRepository:
    def find_by_user(self, user_id: str) -> Cart | None:
        return self._dao.query.filter(user_id=user_id).all().first

    def find_by_product(self, product_id: str) -> list[Cart]:
        """Every cart holding a line that references ``product_id``.

        Lines are looked up by product, so only the carts that own a matching
        line are loaded.
        """
        lines = fetch_all(current_domain.repository_for(CartItem)._dao.query.filter(product_id=product_id))
        cart_ids = dict.fromkeys(str(line.cart_id) for line in lines)
        return [self.get(cart_id) for cart_id in cart_ids]
