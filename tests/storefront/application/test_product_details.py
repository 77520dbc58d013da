"""Application tests for the UpdateProduct handler and cart repricing."""

import pytest
from protean.utils.globals import current_domain
from storefront.cart.cart import Cart
from storefront.cart.items import AddProductToCart
from storefront.cart.management import CreateCart
from storefront.category.management import CreateCategory
from storefront.product.creation import AddProduct
from storefront.product.details import UpdateProduct
from storefront.product.product import Product
from storefront.shared.errors import NotFound


@pytest.fixture()
def product_id():
    category_id = current_domain.process(CreateCategory(name="Electronics"), asynchronous=False)
    return current_domain.process(
        AddProduct(category_id=category_id, name="Phone", quantity=25, price=1000.0, discount=10.0),
        asynchronous=False,
    )


def _cart_holding(product_id, user_id, quantity):
    cart_id = current_domain.process(CreateCart(user_id=user_id), asynchronous=False)
    current_domain.process(
        AddProductToCart(cart_id=cart_id, product_id=product_id, quantity=quantity), asynchronous=False
    )
    return cart_id


def _update(product_id, **overrides):
    defaults = {"product_id": product_id, "name": "Phone", "quantity": 25, "price": 1200.0, "discount": 25.0}
    defaults.update(overrides)
    return current_domain.process(UpdateProduct(**defaults), asynchronous=False)


class TestUpdateProductHandler:
    def test_update_overwrites_fields_and_recomputes_price(self, product_id):
        _update(product_id, name="Phone X", description="Newer", quantity=5)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Phone X"
        assert product.description == "Newer"
        assert product.quantity == 5
        assert product.price == 1200.0
        assert product.discount == 25.0
        assert product.special_price == 900.0

    def test_update_unknown_product(self):
        with pytest.raises(NotFound) as exc:
            _update("missing")
        assert exc.value.messages == {"_entity": ["Product not found with product_id: missing"]}

    def test_update_writes_to_event_store(self, product_id):
        _update(product_id)

        messages = current_domain.event_store.store.read("storefront::product")
        updated = [
            m
            for m in messages
            if m.metadata.headers.type == "Storefront.ProductUpdated.v1" and m.data.get("product_id") == product_id
        ]
        assert len(updated) == 1
        assert updated[0].data["special_price"] == 900.0


class TestUpdateRepricesCarts:
    def test_every_referencing_line_is_repriced(self, product_id):
        first = _cart_holding(product_id, "user-1", 2)
        second = _cart_holding(product_id, "user-2", 1)

        _update(product_id, price=800.0, discount=0.0)

        carts = current_domain.repository_for(Cart)
        assert carts.get(first).line_for(product_id).product_price == 800.0
        assert carts.get(first).total_price == 1600.0
        assert carts.get(second).line_for(product_id).product_price == 800.0
        assert carts.get(second).total_price == 800.0

    def test_line_snapshot_follows_name_and_discount(self, product_id):
        cart_id = _cart_holding(product_id, "user-1", 1)

        _update(product_id, name="Phone X", discount=50.0)

        line = current_domain.repository_for(Cart).get(cart_id).line_for(product_id)
        assert line.product_name == "Phone X"
        assert line.discount == 50.0
        assert line.product_price == 600.0

    def test_other_lines_are_preserved(self, product_id):
        category_id = current_domain.repository_for(Product).get(product_id).category_id
        case_id = current_domain.process(
            AddProduct(category_id=category_id, name="Case", quantity=10, price=20.0), asynchronous=False
        )
        cart_id = _cart_holding(product_id, "user-1", 1)
        current_domain.process(AddProductToCart(cart_id=cart_id, product_id=case_id, quantity=2), asynchronous=False)

        _update(product_id, price=1000.0, discount=0.0)

        cart = current_domain.repository_for(Cart).get(cart_id)
        assert cart.line_for(case_id).product_price == 20.0
        assert cart.total_price == 1040.0

    def test_carts_without_the_product_are_untouched(self, product_id):
        untouched = current_domain.process(CreateCart(user_id="user-9"), asynchronous=False)
        before = current_domain.repository_for(Cart).get(untouched).updated_at

        _update(product_id)

        assert current_domain.repository_for(Cart).get(untouched).updated_at == before
