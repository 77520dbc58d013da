"""Special (post-discount) price calculation."""

from storefront.shared.errors import InvalidArgument


def compute_special_price(price: float, discount: float) -> float:
    """Return ``price`` reduced by ``discount`` percent.

    No rounding is applied. Carts copy the value computed here and never
    derive it themselves.
    """
    if price is None or price < 0:
        raise InvalidArgument("price", "Price must be zero or greater")
    if discount is None or not 0 <= discount <= 100:
        raise InvalidArgument("discount", "Discount must be between 0 and 100")

    return price * (1 - discount / 100)
