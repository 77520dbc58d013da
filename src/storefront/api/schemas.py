"""Pydantic request/response schemas for the storefront application interface."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Electronics"}]}}

    name: str = Field(..., min_length=1, max_length=255)


class ProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Phone",
                    "description": "6.1-inch smartphone",
                    "quantity": 25,
                    "price": 1000.0,
                    "discount": 10.0,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    quantity: int = Field(0, ge=0)
    price: float = Field(..., ge=0)
    discount: float = Field(0.0, ge=0, le=100)
    # Accepted for compatibility with clients that echo a product back; always recomputed.
    special_price: float | None = None


# --- Response Schemas ---


class CategoryDTO(BaseModel):
    category_id: str
    name: str


class ProductDTO(BaseModel):
    product_id: str
    category_id: str
    name: str
    description: str | None = None
    quantity: int = 0
    price: float
    discount: float = 0.0
    special_price: float
    image: str | None = None


class CartItemDTO(BaseModel):
    cart_item_id: str
    product_id: str
    product_name: str | None = None
    image: str | None = None
    product_price: float
    discount: float = 0.0
    quantity: int


class CartDTO(BaseModel):
    cart_id: str
    user_id: str
    total_price: float
    items: list[CartItemDTO] = Field(default_factory=list)


class PageMetadata(BaseModel):
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    last_page: bool


class CategoryResponse(PageMetadata):
    content: list[CategoryDTO] = Field(default_factory=list)


class ProductResponse(PageMetadata):
    content: list[ProductDTO] = Field(default_factory=list)
