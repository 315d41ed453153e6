"""
Storage backends for catalog products.

``ProductRepository`` is the interface the service layer depends on.
Two implementations are provided:

* ``InMemoryProductRepository`` keeps an ordered list inside the
  repository object, guarded by a lock because FastAPI runs sync
  endpoints on a thread pool.
* ``SQLiteProductRepository`` stores rows in the ``products`` table
  created by ``core.db.init_db``.  Every call opens its own
  connection; all statements are parameterised.

Both raise ``ProductNotFoundError`` for unknown identifiers.  SQLite
failures are re-raised as ``StorageError``.
"""

from __future__ import annotations

import sqlite3
import threading
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from kasir_api.app.core.db import get_cursor
from kasir_api.app.core.exceptions import ProductNotFoundError, StorageError
from kasir_api.app.schemas.product import Product, ProductIn

DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="Indomie Godog", price=3500, stock=10),
    Product(id=2, name="Vit 1000ml", price=3000, stock=40),
    Product(id=3, name="Kecap", price=12000, stock=20),
)


class ProductRepository(ABC):
    """Abstract product store."""

    @abstractmethod
    def create(self, data: ProductIn) -> Product:
        """Store a new product and return it with its assigned id."""

    @abstractmethod
    def list(self) -> List[Product]:
        """Return every product."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product:
        """Return one product or raise ``ProductNotFoundError``."""

    @abstractmethod
    def update(self, product_id: int, data: ProductIn) -> Product:
        """Replace name, price and stock of an existing product."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product or raise ``ProductNotFoundError``."""


class InMemoryProductRepository(ProductRepository):
    """Thread-safe list-backed store.

    Identifiers come from a counter that only moves forward, so an id
    is never handed out twice even after deletions.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        seed = DEFAULT_PRODUCTS if products is None else tuple(products)
        self._lock = threading.Lock()
        self._products: List[Product] = [p.model_copy() for p in seed]
        self._next_id = max((p.id for p in self._products), default=0) + 1

    def create(self, data: ProductIn) -> Product:
        with self._lock:
            product = Product(id=self._next_id, name=data.name, price=data.price, stock=data.stock)
            self._next_id += 1
            self._products.append(product)
            return product.model_copy()

    def list(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def get_by_id(self, product_id: int) -> Product:
        with self._lock:
            return self._products[self._index_of(product_id)].model_copy()

    def update(self, product_id: int, data: ProductIn) -> Product:
        with self._lock:
            index = self._index_of(product_id)
            product = Product(id=product_id, name=data.name, price=data.price, stock=data.stock)
            self._products[index] = product
            return product.model_copy()

    def delete(self, product_id: int) -> None:
        with self._lock:
            del self._products[self._index_of(product_id)]

    def _index_of(self, product_id: int) -> int:
        # Caller must hold the lock.
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise ProductNotFoundError(product_id)


class SQLiteProductRepository(ProductRepository):
    """Product store backed by the ``products`` table."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def create(self, data: ProductIn) -> Product:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "INSERT INTO products (name, price, stock) VALUES (?, ?, ?)",
                    (data.name, data.price, data.stock),
                )
                product_id = cursor.lastrowid
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to create product: {exc}") from exc
        return Product(id=product_id, name=data.name, price=data.price, stock=data.stock)

    def list(self) -> List[Product]:
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute("SELECT id, name, price, stock FROM products ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to list products: {exc}") from exc
        return [self._row_to_product(row) for row in rows]

    def get_by_id(self, product_id: int) -> Product:
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute(
                    "SELECT id, name, price, stock FROM products WHERE id = ?",
                    (product_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to fetch product {product_id}: {exc}") from exc
        if row is None:
            raise ProductNotFoundError(product_id)
        return self._row_to_product(row)

    def update(self, product_id: int, data: ProductIn) -> Product:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "UPDATE products SET name = ?, price = ?, stock = ? WHERE id = ?",
                    (data.name, data.price, data.stock, product_id),
                )
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to update product {product_id}: {exc}") from exc
        if not affected:
            raise ProductNotFoundError(product_id)
        return Product(id=product_id, name=data.name, price=data.price, stock=data.stock)

    def delete(self, product_id: int) -> None:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute("DELETE FROM products WHERE id = ?", (product_id,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to delete product {product_id}: {exc}") from exc
        if not affected:
            raise ProductNotFoundError(product_id)

    @staticmethod
    def _row_to_product(row: sqlite3.Row) -> Product:
        """Convert a database row to a ``Product``."""
        return Product(id=row["id"], name=row["name"], price=row["price"], stock=row["stock"])
