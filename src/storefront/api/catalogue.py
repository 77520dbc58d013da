"""Application interface for the catalogue: categories and products.

Every call runs inside a context of the facade's domain, takes plain data
(pydantic request models or dicts) and answers with pydantic DTOs. Business
failures surface as the typed errors of ``storefront.shared.errors``.
"""

from contextlib import contextmanager

import structlog
from protean.utils.globals import current_domain

from storefront.api.mapping import (
    to_category_dto,
    to_category_response,
    to_product_dto,
    to_product_response,
)
from storefront.api.schemas import (
    CategoryDTO,
    CategoryRequest,
    CategoryResponse,
    ProductDTO,
    ProductRequest,
    ProductResponse,
)
from storefront.cart.cart import Cart
from storefront.category.category import Category
from storefront.category.listing import list_categories
from storefront.category.management import CreateCategory, DeleteCategory, UpdateCategory
from storefront.domain import storefront
from storefront.product.creation import AddProduct
from storefront.product.details import UpdateProduct
from storefront.product.images import UpdateProductImage
from storefront.product.product import Product
from storefront.product.removal import DeleteProduct
from storefront.product.search import list_products, search_by_category, search_by_keyword
from storefront.shared.errors import get_or_raise
from storefront.shared.locks import cart_keys, locked
from storefront.shared.settings import setting
from storefront.storage.port import ImageStorage

logger = structlog.get_logger(__name__)


def _page_args(page_number, page_size, sort_by, sort_order, sort_setting):
    return {
        "page_number": 0 if page_number is None else page_number,
        "page_size": page_size if page_size is not None else setting("page_size"),
        "sort_by": sort_by or setting(sort_setting),
        "sort_order": sort_order or setting("sort_order"),
    }


class CategoryAPI:
    def __init__(self, domain=None):
        self.domain = domain if domain is not None else storefront

    def list(self, page_number=None, page_size=None, sort_by=None, sort_order=None) -> CategoryResponse:
        with self.domain.domain_context():
            page = list_categories(**_page_args(page_number, page_size, sort_by, sort_order, "category_sort_by"))
            return to_category_response(page)

    def create(self, data: CategoryRequest | dict) -> CategoryDTO:
        request = CategoryRequest.model_validate(data)
        with self.domain.domain_context(), locked(f"category-name:{request.name}"):
            category_id = current_domain.process(CreateCategory(name=request.name), asynchronous=False)
            return to_category_dto(current_domain.repository_for(Category).get(category_id))

    def update(self, category_id: str, data: CategoryRequest | dict) -> CategoryDTO:
        request = CategoryRequest.model_validate(data)
        with self.domain.domain_context(), locked(f"category:{category_id}"):
            current_domain.process(UpdateCategory(category_id=category_id, name=request.name), asynchronous=False)
            return to_category_dto(current_domain.repository_for(Category).get(category_id))

    def delete(self, category_id: str) -> CategoryDTO:
        with self.domain.domain_context(), locked(f"category:{category_id}"):
            category = current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
            return to_category_dto(category)


class ProductAPI:
    """Product catalogue operations.

    ``image_storage`` receives uploaded image bytes; ``image_dir`` is the
    destination handed to it and defaults to the ``image_dir`` setting.
    """

    def __init__(self, image_storage: ImageStorage, image_dir: str | None = None, domain=None):
        self.image_storage = image_storage
        self.image_dir = image_dir
        self.domain = domain if domain is not None else storefront

    def add_product(self, category_id: str, data: ProductRequest | dict) -> ProductDTO:
        request = ProductRequest.model_validate(data)
        with self.domain.domain_context(), locked(f"category:{category_id}"):
            command = AddProduct(
                category_id=category_id,
                name=request.name,
                description=request.description,
                quantity=request.quantity,
                price=request.price,
                discount=request.discount,
            )
            product_id = current_domain.process(command, asynchronous=False)
            return to_product_dto(current_domain.repository_for(Product).get(product_id))

    def list(self, page_number=None, page_size=None, sort_by=None, sort_order=None) -> ProductResponse:
        with self.domain.domain_context():
            page = list_products(**_page_args(page_number, page_size, sort_by, sort_order, "product_sort_by"))
            return to_product_response(page)

    def search_by_category(
        self, category_id: str, page_number=None, page_size=None, sort_by=None, sort_order=None
    ) -> ProductResponse:
        with self.domain.domain_context():
            page = search_by_category(
                category_id, **_page_args(page_number, page_size, sort_by, sort_order, "product_sort_by")
            )
            return to_product_response(page)

    def search_by_keyword(
        self, keyword: str, page_number=None, page_size=None, sort_by=None, sort_order=None
    ) -> ProductResponse:
        with self.domain.domain_context():
            page = search_by_keyword(
                keyword, **_page_args(page_number, page_size, sort_by, sort_order, "product_sort_by")
            )
            return to_product_response(page)

    def update_product(self, product_id: str, data: ProductRequest | dict) -> ProductDTO:
        """Overwrite a product and reprice every cart holding it.

        A ``special_price`` in ``data`` is ignored; it is always recomputed
        from price and discount.
        """
        request = ProductRequest.model_validate(data)
        with self.domain.domain_context(), self._product_and_carts_locked(product_id):
            command = UpdateProduct(
                product_id=product_id,
                name=request.name,
                description=request.description,
                quantity=request.quantity,
                price=request.price,
                discount=request.discount,
            )
            current_domain.process(command, asynchronous=False)
            return to_product_dto(current_domain.repository_for(Product).get(product_id))

    def delete_product(self, product_id: str) -> ProductDTO:
        with self.domain.domain_context(), self._product_and_carts_locked(product_id):
            product = current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
            return to_product_dto(product)

    def update_product_image(self, product_id: str, image: bytes, filename: str) -> ProductDTO:
        """Store the image and point the product and its cart lines at it.

        The bytes are written before the product is updated. If the update
        fails, the stored image is discarded again and the error re-raised.
        """
        with self.domain.domain_context(), self._product_and_carts_locked(product_id):
            get_or_raise(current_domain.repository_for(Product), "Product", "product_id", product_id)

            destination = self.image_dir or setting("image_dir")
            reference = self.image_storage.store(destination, image, filename)
            logger.info("Product image stored", product_id=str(product_id), image=reference)

            try:
                current_domain.process(UpdateProductImage(product_id=product_id, image=reference), asynchronous=False)
            except Exception:
                logger.warning("Product image update failed, discarding image", product_id=str(product_id))
                self.image_storage.discard(destination, reference)
                raise

            return to_product_dto(current_domain.repository_for(Product).get(product_id))

    @contextmanager
    def _product_and_carts_locked(self, product_id):
        with locked(f"product:{product_id}"):
            # New lines for the product need its key, so the affected carts
            # cannot change while their keys are taken.
            carts = current_domain.repository_for(Cart).find_by_product(product_id)
            with locked(*cart_keys(cart.id for cart in carts)):
                yield
