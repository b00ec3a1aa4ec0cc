"""
Shared test fixtures and configuration.

Environment variables are set BEFORE any app imports so the settings
singleton is built from known values.
"""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Override settings before any app code imports the settings singleton
os.environ["HOST"] = "localhost"
os.environ["PORT"] = "3333"
os.environ["PAGE_QUERY_PARAM"] = "page"

import pytest  # noqa: E402

from paginator.services.pagination import PaginationFactory  # noqa: E402
from tests.mocks.asgi import make_request  # noqa: E402

BASE_URL = "http://localhost:3333"


@pytest.fixture
def factory():
    """Factory bound to the test base URL."""
    return PaginationFactory(BASE_URL)


@pytest.fixture
def visitors_request():
    """Request for the first page of /visitors."""
    return make_request("/visitors", "page=1")


@pytest.fixture
def visitor_rows():
    """Ten visitor rows, as returned for one page by the query layer."""
    return [{"id": i, "name": f"visitor-{i}"} for i in range(1, 11)]


@pytest.fixture
def paginated_result(visitor_rows):
    """Result of a query builder paginate() call."""
    return {
        "total": 25,
        "perPage": 10,
        "page": 1,
        "lastPage": 3,
        "data": visitor_rows,
    }
