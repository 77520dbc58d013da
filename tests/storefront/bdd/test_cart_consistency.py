"""BDD tests for cart consistency after catalogue changes."""

import pytest
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from pytest_bdd import parsers, scenarios, then, when
from storefront.product.product import Product

scenarios("features/cart_consistency.feature")


def _product(catalogue, name):
    return current_domain.repository_for(Product).get(catalogue["products"][name].product_id)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the discount of "{name}" is changed to {discount:g}'))
def change_discount(api, catalogue, name, discount):
    product = _product(catalogue, name)
    api["products"].update_product(
        product.id,
        {
            "name": product.name,
            "description": product.description,
            "quantity": product.quantity,
            "price": product.price,
            "discount": discount,
        },
    )


@when(parsers.cfparse('the product "{name}" is deleted'))
def delete_product(api, catalogue, name):
    api["products"].delete_product(catalogue["products"][name].product_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the special price of "{name}" is {price:g}'))
def special_price_is(catalogue, name, price):
    assert _product(catalogue, name).special_price == pytest.approx(price)


@then(parsers.cfparse('the line for "{product}" in cart "{cart}" is priced {price:g}'))
def line_priced(api, catalogue, product, cart, price):
    dto = api["carts"].get_cart(catalogue["carts"][cart])
    line = next(i for i in dto.items if i.product_id == catalogue["products"][product].product_id)
    assert line.product_price == pytest.approx(price)


@then(parsers.cfparse('the total of cart "{cart}" is {total:g}'))
def cart_total_is(api, catalogue, cart, total):
    assert api["carts"].get_cart(catalogue["carts"][cart]).total_price == pytest.approx(total)


@then(parsers.cfparse('cart "{cart}" has no lines'))
def cart_is_empty(api, catalogue, cart):
    assert api["carts"].get_cart(catalogue["carts"][cart]).items == []


@then(parsers.cfparse('looking up "{name}" fails with not found'))
def product_is_gone(catalogue, name):
    with pytest.raises(ObjectNotFoundError):
        _product(catalogue, name)
