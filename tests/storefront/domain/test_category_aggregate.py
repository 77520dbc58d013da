"""Tests for the Category aggregate root."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields
from storefront.category.category import Category
from storefront.category.events import CategoryCreated, CategoryRenamed


class TestCategoryConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Category.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Category)
        assert "name" in fields
        assert "created_at" in fields
        assert "updated_at" in fields

    def test_create(self):
        category = Category.create(name="Electronics")
        assert category.name == "Electronics"
        assert category.id is not None
        assert category.created_at is not None
        assert category.updated_at == category.created_at

    def test_name_is_required(self):
        with pytest.raises(ValidationError) as exc:
            Category(name="")
        assert "name" in exc.value.messages

    def test_name_length_is_bounded(self):
        with pytest.raises(ValidationError):
            Category.create(name="x" * 256)

    def test_create_raises_event(self):
        category = Category.create(name="Electronics")
        assert len(category._events) == 1
        event = category._events[0]
        assert isinstance(event, CategoryCreated)
        assert event.category_id == category.id
        assert event.name == "Electronics"


class TestCategoryRename:
    def test_rename_overwrites_name(self):
        category = Category.create(name="Electronics")
        category.rename("Gadgets")
        assert category.name == "Gadgets"

    def test_rename_raises_event(self):
        category = Category.create(name="Electronics")
        category._events.clear()

        category.rename("Gadgets")

        assert len(category._events) == 1
        event = category._events[0]
        assert isinstance(event, CategoryRenamed)
        assert event.previous_name == "Electronics"
        assert event.name == "Gadgets"
