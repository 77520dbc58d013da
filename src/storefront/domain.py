"""Storefront bounded context — catalogue (categories, products) and the carts that snapshot it.

Carts live in the same domain as the catalogue so that a product mutation and
the repair of every cart line referencing the product share one unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="storefront")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
