"""Product endpoints.

A thin translation over ProductService: each route deserializes the
request, awaits one service operation and maps the Result. ``Ok``
becomes the success response; ``Err`` goes through ``error_response``.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, List, TypeVar

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from catalog.application.product_service import ProductService
from catalog.application.result import Err, Result
from catalog.infrastructure.api.dependencies import get_product_service, get_settings
from catalog.infrastructure.api.errors import error_response
from catalog.infrastructure.api.schemas import ErrorBody, ProductRead, ProductWrite
from catalog.infrastructure.config import Settings

T = TypeVar("T")

router = APIRouter(prefix="/api/products", tags=["products"])


async def _run(operation: Awaitable[Result[T]], settings: Settings) -> Result[T]:
    """Await a service call, cancelling it after the configured timeout."""
    if settings.operation_timeout is None:
        return await operation
    return await asyncio.wait_for(operation, timeout=settings.operation_timeout)


@router.get("", response_model=List[ProductRead])
async def list_products(
    service: ProductService = Depends(get_product_service),
    settings: Settings = Depends(get_settings),
):
    result = await _run(service.list_products(), settings)
    if isinstance(result, Err):
        return error_response(result.error, settings)
    return [ProductRead.model_validate(p) for p in result.value]


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    responses={404: {"model": ErrorBody}},
)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
    settings: Settings = Depends(get_settings),
):
    result = await _run(service.get_product(product_id), settings)
    if isinstance(result, Err):
        return error_response(result.error, settings)
    if result.value is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": f"No entity for id {product_id}"},
        )
    return ProductRead.model_validate(result.value)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorBody}},
)
async def create_product(
    payload: ProductWrite,
    response: Response,
    service: ProductService = Depends(get_product_service),
    settings: Settings = Depends(get_settings),
):
    candidate = payload.to_product()
    result = await _run(service.create_product(candidate), settings)
    if isinstance(result, Err):
        return error_response(result.error, settings)

    product_id = result.value
    response.headers["Location"] = f"/api/products/{product_id}"
    return ProductRead(
        id=product_id,
        name=candidate.name,
        price=candidate.price,
        description=candidate.description,
    )


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    responses={400: {"model": ErrorBody}},
)
async def update_product(
    product_id: int,
    payload: ProductWrite,
    service: ProductService = Depends(get_product_service),
    settings: Settings = Depends(get_settings),
):
    result = await _run(service.update_product(product_id, payload.to_product()), settings)
    if isinstance(result, Err):
        return error_response(result.error, settings)
    return ProductRead.model_validate(result.value)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorBody}},
)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
    settings: Settings = Depends(get_settings),
):
    result = await _run(service.delete_product(product_id), settings)
    if isinstance(result, Err):
        return error_response(result.error, settings)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
