"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Request

from catalog.application.product_service import ProductService
from catalog.infrastructure.bootstrap import product_service
from catalog.infrastructure.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_product_service(request: Request) -> AsyncIterator[ProductService]:
    """Yield a service bound to a fresh store; uncommitted changes are dropped."""
    store = request.app.state.store_factory()
    try:
        yield product_service(store)
    finally:
        store.rollback()
