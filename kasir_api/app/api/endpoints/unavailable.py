"""
Catalog routes used while the database is unavailable.

When the database cannot be initialised and the application is allowed
to keep running, these routes replace the product router.  Every method
on ``/api/produk`` and anything below it answers 503 without touching
the request body or path.
"""

from fastapi import APIRouter, HTTPException, status

from . import ALL_METHODS

UNAVAILABLE_DETAIL = "Database tidak tersedia"

router = APIRouter()


@router.api_route("", methods=ALL_METHODS, include_in_schema=False)
@router.api_route("/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
def database_unavailable() -> None:
    raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=UNAVAILABLE_DETAIL)
