import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from paginator.api import health
from paginator.core.config import settings
from paginator.services.pagination import PaginationFactory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Resolve the pagination base URL once at startup."""
    app.state.pagination_factory = PaginationFactory.from_settings(settings)
    logger.info(f"{settings.PROJECT_NAME} started")
    yield
    logger.info(f"{settings.PROJECT_NAME} shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    Pagination metadata and page links for paginated API responses.

    ## Features
    * **Envelope building**: total, per_page, current/last page, item range and page data.
    * **Page links**: next/prev URLs built by rewriting the `page` query parameter of the current request.
    """,
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

app.include_router(health.router, prefix="/health", tags=["health"])


@app.get("/")
async def root():
    return {"message": "Welcome to Paginator API"}
