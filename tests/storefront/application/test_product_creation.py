"""Application tests for the AddProduct handler."""

import pytest
from protean.utils.globals import current_domain
from storefront.category.management import CreateCategory
from storefront.product.creation import AddProduct
from storefront.product.product import Product
from storefront.shared.errors import Conflict, InvalidArgument, NotFound


@pytest.fixture()
def category_id():
    return current_domain.process(CreateCategory(name="Electronics"), asynchronous=False)


def _add_product(category_id, **overrides):
    defaults = {
        "category_id": category_id,
        "name": "Phone",
        "description": "6.1-inch smartphone",
        "quantity": 25,
        "price": 1000.0,
        "discount": 10.0,
    }
    defaults.update(overrides)
    return current_domain.process(AddProduct(**defaults), asynchronous=False)


class TestAddProductHandler:
    def test_add_product(self, category_id):
        product_id = _add_product(category_id)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Phone"
        assert product.category_id == category_id
        assert product.quantity == 25
        assert product.special_price == pytest.approx(900.0)

    def test_image_defaults_to_configured_placeholder(self, category_id):
        product = current_domain.repository_for(Product).get(_add_product(category_id))
        assert product.image == "default.png"

    def test_unknown_category(self):
        with pytest.raises(NotFound) as exc:
            _add_product("missing")
        assert exc.value.messages == {"_entity": ["Category not found with category_id: missing"]}

    def test_duplicate_name_in_category_conflicts(self, category_id):
        _add_product(category_id)
        with pytest.raises(Conflict) as exc:
            _add_product(category_id, price=10.0)
        assert exc.value.messages == {"name": ["Product 'Phone' already exists in category 'Electronics'"]}

    def test_same_name_in_another_category_is_allowed(self, category_id):
        other_id = current_domain.process(CreateCategory(name="Refurbished"), asynchronous=False)
        _add_product(category_id)
        _add_product(other_id)

        assert len(current_domain.repository_for(Product).find_all()) == 2

    def test_invalid_discount_is_rejected(self, category_id):
        with pytest.raises(InvalidArgument):
            _add_product(category_id, discount=101.0)
        assert current_domain.repository_for(Product).find_all() == []
