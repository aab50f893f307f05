"""
Product endpoints mounted under ``/api/products``.

Routes are declared in the ``ROUTES`` table and bound to a ``ProductHandler``
instance by ``build_router``. Every endpoint goes through ``translate_error``,
so callers only ever see 404 (unknown id) or 500 (anything else) on failure,
both with an empty body.
"""

import functools
import logging
from typing import Annotated, Callable

from fastapi import APIRouter, Path, status
from fastapi.responses import JSONResponse, Response

from productapi.db.models import ID_MAX, ID_MIN, Product
from productapi.repositories.sql_repository import ProductRepository
from productapi.schemas.product import ProductIn, ProductOut

logger = logging.getLogger(__name__)

API_PREFIX = "/api/products"

# ids outside the column range get FastAPI's 422 instead of reaching the store
ProductId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]

# (method, path, handler attribute, documented status code)
# "" routes are also served at "/" so both forms of the collection URL answer
ROUTES = (
    ("GET", "", "list_all", status.HTTP_200_OK),
    ("POST", "", "create", status.HTTP_201_CREATED),
    ("DELETE", "", "delete_all", status.HTTP_204_NO_CONTENT),
    ("GET", "/{product_id}", "get_by_id", status.HTTP_200_OK),
    ("PUT", "/{product_id}", "update", status.HTTP_200_OK),
    ("DELETE", "/{product_id}", "delete", status.HTTP_204_NO_CONTENT),
)


class ProductError(Exception):
    """Base exception for product requests."""


class ProductNotFoundError(ProductError):
    """Raised when no row exists for the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


def translate_error(exc: Exception) -> Response:
    if isinstance(exc, ProductNotFoundError):
        logger.debug("Product %s not found", exc.product_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    logger.error("Product request failed: %s", exc, exc_info=exc)
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _translated(endpoint: Callable[..., Response]) -> Callable[..., Response]:
    @functools.wraps(endpoint)
    def wrapper(*args, **kwargs) -> Response:
        try:
            return endpoint(*args, **kwargs)
        except Exception as exc:
            return translate_error(exc)

    return wrapper


def _to_json(product: Product) -> dict:
    return ProductOut.model_validate(product).model_dump(mode="json")


class ProductHandler:
    """Maps product requests onto repository calls and status codes."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    def _require(self, product_id: int) -> Product:
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def list_all(self) -> Response:
        products = self.repository.find_all()
        if not products:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return JSONResponse([_to_json(p) for p in products])

    def get_by_id(self, product_id: ProductId) -> Response:
        return JSONResponse(_to_json(self._require(product_id)))

    def create(self, payload: ProductIn) -> Response:
        product = Product(name=payload.name, quantity=payload.quantity, price=payload.price)
        saved = self.repository.save(product)
        return JSONResponse(_to_json(saved), status_code=status.HTTP_201_CREATED)

    def update(self, product_id: ProductId, payload: ProductIn) -> Response:
        # payload.id is ignored; the stored row keeps its own id
        product = self._require(product_id)
        product.name = payload.name
        product.quantity = payload.quantity
        product.price = payload.price
        return JSONResponse(_to_json(self.repository.save(product)))

    def delete(self, product_id: ProductId) -> Response:
        if not self.repository.exists_by_id(product_id):
            raise ProductNotFoundError(product_id)
        self.repository.delete_by_id(product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def delete_all(self) -> Response:
        self.repository.delete_all()
        return Response(status_code=status.HTTP_204_NO_CONTENT)


def build_router(handler: ProductHandler, prefix: str = API_PREFIX) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["products"])
    for method, path, attr, status_code in ROUTES:
        endpoint = _translated(getattr(handler, attr))
        router.add_api_route(
            path,
            endpoint,
            methods=[method],
            status_code=status_code,
            response_model=None,
            name=f"products_{attr}",
        )
        if path == "":
            router.add_api_route(
                "/",
                endpoint,
                methods=[method],
                status_code=status_code,
                response_model=None,
                name=f"products_{attr}_slash",
                include_in_schema=False,
            )
    return router
