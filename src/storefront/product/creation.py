"""Product creation — command and handler."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.errors import Conflict, get_or_raise

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class AddProduct:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: String()
    quantity: Integer(default=0)
    price: Float(required=True)
    discount: Float(default=0.0)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        category = get_or_raise(
            current_domain.repository_for(Category), "Category", "category_id", command.category_id
        )

        repo = current_domain.repository_for(Product)
        if repo.find_by_name_in_category(category.id, command.name) is not None:
            raise Conflict(
                "Product",
                "name",
                command.name,
                message=f"Product '{command.name}' already exists in category '{category.name}'",
            )

        product = Product.create(
            category_id=category.id,
            name=command.name,
            description=command.description,
            quantity=command.quantity,
            price=command.price,
            discount=command.discount,
        )
        repo.add(product)

        logger.info(
            "Product added",
            product_id=str(product.id),
            category_id=str(category.id),
            special_price=product.special_price,
        )
        return str(product.id)
