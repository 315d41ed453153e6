"""Liveness endpoint, independent of storage state and request method."""

from fastapi import APIRouter

from kasir_api.app.schemas.product import HealthResponse

from . import ALL_METHODS

router = APIRouter()


@router.api_route("/health", methods=ALL_METHODS, response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="OK", message="API Running")
