"""Application settings.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field. Values are read
when this module is imported, so set the environment first. Tests and
embedding code can build their own ``Settings`` and pass it to
``create_app``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str | None = os.getenv("LOG_FILE") or None

    # "memory" keeps the catalog for the lifetime of the process; "json"
    # persists it to ``product_data_file``.
    product_store: str = os.getenv("PRODUCT_STORE", "memory")
    product_data_file: str = os.getenv("PRODUCT_DATA_FILE", "data/products.json")

    # Status returned when an update or delete names an unknown id.
    not_found_status: int = int(os.getenv("NOT_FOUND_STATUS", "400"))

    # Seconds a single service operation may take before it is cancelled.
    operation_timeout: float | None = _optional_float(os.getenv("OPERATION_TIMEOUT"))

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))


settings = Settings()
