"""
Product endpoints.

These routes expose CRUD operations on the product catalog under
``/api/produk``.  Path identifiers and request bodies are validated by
FastAPI before the handler runs, so malformed input never reaches the
store; the application's validation handler turns those failures into
HTTP 400.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status

from kasir_api.app.core.error_handlers import INVALID_ID_DETAIL
from kasir_api.app.core.exceptions import ProductNotFoundError
from kasir_api.app.schemas.product import INT64_MAX, INT64_MIN, MessageResponse, Product, ProductIn
from kasir_api.app.services.product_service import ProductService

NOT_FOUND_DETAIL = "Produk belum ada"

# Ids outside the 64-bit range cannot exist in any store.
ProductId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]

router = APIRouter()


def get_product_service(request: Request) -> ProductService:
    """Return the service wired into the application at startup."""
    return request.app.state.product_service


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)


@router.get("", response_model=List[Product])
def list_products(service: ProductService = Depends(get_product_service)) -> List[Product]:
    """Return every product in the catalog."""
    return service.list_products()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product_in: ProductIn,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a product.  Any ``id`` in the body is ignored."""
    return service.create_product(product_in)


@router.api_route("/", methods=["GET", "PUT", "DELETE"], include_in_schema=False)
def missing_product_id() -> None:
    # ``/api/produk/`` addresses an item without naming one.
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID_DETAIL)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Retrieve a single product by ID.

    Returns HTTP 404 if the product does not exist.
    """
    try:
        return service.get_product(product_id)
    except ProductNotFoundError:
        raise _not_found()


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: ProductId,
    product_in: ProductIn,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Replace name, price and stock of an existing product.

    The identifier in the path always wins over one in the body.
    """
    try:
        return service.update_product(product_id, product_in)
    except ProductNotFoundError:
        raise _not_found()


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Delete a product and confirm with a message."""
    try:
        service.delete_product(product_id)
    except ProductNotFoundError:
        raise _not_found()
    return MessageResponse(message="sukses delete")
