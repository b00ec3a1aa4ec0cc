import logging
from typing import Optional

from fastapi import Depends, Query, Request
from pydantic import BaseModel

from paginator.core.config import Settings, settings
from paginator.schemas.pagination import coerce_number
from paginator.services.pagination import PaginationFactory

logger = logging.getLogger(__name__)


class PageParams(BaseModel):
    page: int = 1
    per_page: int


def get_settings() -> Settings:
    return settings


async def get_pagination_factory(
    request: Request, app_settings: Settings = Depends(get_settings)
) -> PaginationFactory:
    factory = getattr(request.app.state, "pagination_factory", None)
    if factory is None:
        # App was started without the lifespan handler
        factory = PaginationFactory.from_settings(app_settings)
        request.app.state.pagination_factory = factory
    return factory


async def get_page_params(
    page: Optional[str] = Query(None, description="Page number (1-indexed)"),
    per_page: Optional[str] = Query(None, description="Number of items per page"),
    app_settings: Settings = Depends(get_settings),
) -> PageParams:
    """
    Read page and per_page from the query string.

    Invalid values fall back to defaults instead of failing the request.
    """
    page_number = coerce_number(page)
    if not isinstance(page_number, int) or page_number < 1:
        page_number = 1

    size = coerce_number(per_page)
    if not isinstance(size, int) or size < 1:
        if per_page is not None:
            logger.debug(f"Ignoring invalid per_page value {per_page!r}")
        size = app_settings.DEFAULT_PER_PAGE
    size = min(size, app_settings.MAX_PER_PAGE)

    return PageParams(page=page_number, per_page=size)
