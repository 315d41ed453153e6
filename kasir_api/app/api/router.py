"""
Top-level routers.

``router`` serves the product catalog; ``degraded_router`` keeps the
health check and answers 503 on every catalog path.  ``create_app``
picks one at startup.
"""

from fastapi import APIRouter

from .endpoints import health, products, unavailable

PRODUCTS_PREFIX = "/api/produk"

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(products.router, prefix=PRODUCTS_PREFIX, tags=["produk"])

degraded_router = APIRouter()
degraded_router.include_router(health.router, tags=["health"])
degraded_router.include_router(unavailable.router, prefix=PRODUCTS_PREFIX, tags=["produk"])
