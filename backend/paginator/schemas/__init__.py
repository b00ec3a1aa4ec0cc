"""
Schema Exports

Centralized export of the Pydantic models used across the application.
"""

from paginator.schemas.pagination import (
    PaginationEnvelope,
    PaginationSource,
    coerce_number,
)

__all__ = [
    "PaginationEnvelope",
    "PaginationSource",
    "coerce_number",
]
