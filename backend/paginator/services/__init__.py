"""
Pagination services.
"""

from paginator.services.pagination import PaginationBuilder, PaginationFactory

__all__ = [
    "PaginationBuilder",
    "PaginationFactory",
]
