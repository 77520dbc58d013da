"""Storefront application interface."""

from storefront.api.carts import CartAPI
from storefront.api.catalogue import CategoryAPI, ProductAPI

__all__ = ["CartAPI", "CategoryAPI", "ProductAPI"]
