"""Dependency injection for FastAPI endpoints"""

from typing import Tuple

from fastapi import Request

from autofinance.domain.models import Vehicle
from autofinance.infrastructure.catalog import load_catalog


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_catalog() -> Tuple[Vehicle, ...]:
    """Provide the vehicle catalog used when a request doesn't bring its own"""
    return load_catalog()
