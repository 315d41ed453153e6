"""
Service layer for catalog products.

``ProductService`` receives its repository through the constructor
and forwards every call to it.  It adds logging for mutations and
nothing else; business rules, if any appear, belong here rather than
in the API handlers.
"""

from __future__ import annotations

import logging
from typing import List

from kasir_api.app.repositories.product_repository import ProductRepository
from kasir_api.app.schemas.product import Product, ProductIn

logger = logging.getLogger(__name__)


class ProductService:
    """Thin facade over a ``ProductRepository``."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    def create_product(self, data: ProductIn) -> Product:
        product = self.repository.create(data)
        logger.info("Created product %s", product.id)
        return product

    def list_products(self) -> List[Product]:
        return self.repository.list()

    def get_product(self, product_id: int) -> Product:
        return self.repository.get_by_id(product_id)

    def update_product(self, product_id: int, data: ProductIn) -> Product:
        product = self.repository.update(product_id, data)
        logger.info("Updated product %s", product_id)
        return product

    def delete_product(self, product_id: int) -> None:
        self.repository.delete(product_id)
        logger.info("Deleted product %s", product_id)
