"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from pytest_bdd import given, parsers
from storefront.api import CartAPI, CategoryAPI, ProductAPI
from storefront.storage import FakeImageStorage


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def api():
    return {
        "categories": CategoryAPI(),
        "products": ProductAPI(image_storage=FakeImageStorage()),
        "carts": CartAPI(),
    }


@pytest.fixture()
def catalogue():
    """Names of created categories, products and carts mapped to their DTOs."""
    return {"categories": {}, "products": {}, "carts": {}}


@pytest.fixture()
def error():
    """Container for captured business errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a category "{name}"'))
def a_category(api, catalogue, name):
    catalogue["categories"][name] = api["categories"].create({"name": name})


@given(parsers.cfparse('a product "{name}" in "{category}" priced {price:g} with discount {discount:g}'))
def a_product(api, catalogue, name, category, price, discount):
    category_id = catalogue["categories"][category].category_id
    catalogue["products"][name] = api["products"].add_product(
        category_id, {"name": name, "quantity": 10, "price": price, "discount": discount}
    )


@given(parsers.cfparse('cart "{cart}" holds {quantity:d} of "{product}"'))
def cart_holds(api, catalogue, cart, quantity, product):
    created = api["carts"].create_cart(f"user-{cart}")
    catalogue["carts"][cart] = created.cart_id
    api["carts"].add_product(created.cart_id, catalogue["products"][product].product_id, quantity)
