"""
Domain exceptions shared by the repository, service and API layers.

Repositories raise these instead of returning sentinel values so the
HTTP layer can map each failure class onto a status code in one place.
"""


class KasirError(Exception):
    """Base class for all application errors."""


class ProductNotFoundError(KasirError):
    """No product exists with the requested identifier."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class StorageError(KasirError):
    """The backing store failed to complete an operation."""


class DatabaseUnavailableError(StorageError):
    """The database could not be opened or migrated at startup."""
