"""Typed failures surfaced by the storefront application layer.

Every error carries a ``messages`` dict keyed by field (``_entity`` for
errors about the object as a whole), the same shape Protean uses for its
own ``ValidationError``, so callers can render precise messages without the
core depending on a presentation format.
"""

from protean.exceptions import ObjectNotFoundError


class StorefrontError(Exception):
    """Base class for storefront business errors."""

    def __init__(self, messages: dict[str, list[str]]) -> None:
        self.messages = messages
        super().__init__(messages)


class NotFound(StorefrontError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, field: str, value) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__({"_entity": [f"{entity} not found with {field}: {value}"]})


class Conflict(StorefrontError):
    """A uniqueness rule would be violated."""

    def __init__(self, entity: str, field: str, value, message: str | None = None) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__({field: [message or f"{entity} with {field} '{value}' already exists"]})


class EmptyResult(StorefrontError):
    """A query that must return data matched nothing."""

    def __init__(self, message: str) -> None:
        super().__init__({"_entity": [message]})


class InvalidArgument(StorefrontError):
    """Malformed pagination, sorting, pricing or quantity input."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__({field: [message]})


class PropagationIncomplete(StorefrontError):
    """Some carts referencing a product could not be repaired.

    The originating product mutation is reported as failed even when the
    product row itself was written.
    """

    def __init__(self, product_id: str, cart_ids: list[str]) -> None:
        self.product_id = product_id
        self.cart_ids = [str(cart_id) for cart_id in cart_ids]
        super().__init__(
            {"carts": [f"Could not propagate product {product_id} to carts: {', '.join(self.cart_ids)}"]}
        )


def get_or_raise(repository, entity: str, field: str, identifier):
    """Load an aggregate by identity, translating the repository miss into ``NotFound``."""
    try:
        return repository.get(identifier)
    except ObjectNotFoundError:
        raise NotFound(entity, field, identifier) from None
