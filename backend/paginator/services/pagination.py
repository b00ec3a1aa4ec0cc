"""
Pagination Builder

Normalizes a paginated query result (or a raw total/page/per-page triple)
into a flat pagination envelope with item ranges and next/prev links.
"""

import copy
import logging
import math
from collections.abc import Mapping
from typing import Any, Optional

from fastapi import Request
from pydantic import ValidationError

from paginator.core.config import Settings
from paginator.core.constants import PAGE_QUERY_KEY
from paginator.core.url_utils import get_request_path, update_query_string
from paginator.schemas.pagination import (
    Number,
    PaginationEnvelope,
    PaginationSource,
    coerce_number,
)

logger = logging.getLogger(__name__)


def _read_source(source: Any) -> PaginationSource:
    """Read pagination metadata from a mapping or object, empty for row sets."""
    if source is None or isinstance(source, (list, tuple, str, bytes)):
        return PaginationSource()
    try:
        if isinstance(source, Mapping):
            return PaginationSource.model_validate(dict(source))
        return PaginationSource.model_validate(source, from_attributes=True)
    except ValidationError as e:
        logger.debug(f"Could not read pagination fields from {type(source).__name__}: {e}")
        return PaginationSource()


class PaginationBuilder:
    """
    Builds pagination metadata for a single request.

    In the default mode the metadata already present on the source
    (total, perPage, page, lastPage, data) is trusted. With
    ``custom_build=True`` the last page is derived from total and
    per_page, and the whole source is treated as the page data.

    Usage:
        builder = PaginationBuilder(result, request, base_url="http://localhost:3333")
        return builder.paginate
    """

    def __init__(
        self,
        source: Any,
        request: Optional[Request],
        *,
        custom_build: bool = False,
        per_page: Any = None,
        page: Any = None,
        total: Any = None,
        base_url: str,
        page_key: str = PAGE_QUERY_KEY,
    ):
        parsed = _read_source(source)

        self.total = parsed.total or coerce_number(total) or None
        self.per_page = parsed.per_page or coerce_number(per_page) or None
        self.current_page = parsed.current_page or coerce_number(page) or None
        self.last_page = parsed.last_page
        self.data = parsed.data
        self.source = source
        self.request = request
        self.custom_build = custom_build
        self.base_url = base_url
        self.page_key = page_key

    def get_total(self) -> Optional[Number]:
        return self.total if self.total else None

    def get_per_page(self) -> Optional[Number]:
        return self.per_page if self.per_page else None

    def get_current_page(self) -> Number:
        if not self.current_page or self.current_page <= 1:
            return 1
        return self.current_page

    def get_last_page(self) -> Optional[Number]:
        """
        Get the last page number.

        Trusts the stored value unless in custom build mode, where it is
        computed as full pages plus one for any remainder. Without a
        per_page the result is NaN (no total) or infinity.
        """
        if not self.custom_build:
            return self.last_page

        total = self.get_total() or 0
        per_page = self.get_per_page()
        if not per_page:
            logger.debug("Cannot compute last page without per_page")
            if not total:
                return math.nan
            return math.copysign(math.inf, total)

        full_pages = math.floor(total / per_page)
        remainder = math.fmod(total, per_page)
        return full_pages + 1 if remainder else full_pages

    def get_data(self) -> Any:
        if self.custom_build:
            return copy.deepcopy(self.source)
        return self.data

    def get_base_url(self) -> str:
        return self.base_url

    def get_api_url(self) -> str:
        """Current request path with its query string."""
        return get_request_path(self.request)

    def _page_url(self, page: Number) -> str:
        return self.get_base_url() + update_query_string(
            self.get_api_url(), self.page_key, page
        )

    def get_next_page_url(self) -> Optional[str]:
        # Equality only: a current page past the last page still gets a link
        if self.get_last_page() == self.get_current_page():
            return None
        return self._page_url(self.get_current_page() + 1)

    def get_prev_page_url(self) -> Optional[str]:
        if self.get_current_page() == 1:
            return None
        return self._page_url(self.get_current_page() - 1)

    def get_from(self) -> Number:
        current_page = self.get_current_page()
        if current_page == 1:
            return 1
        return (self.get_per_page() or 0) * (current_page - 1) + 1

    def get_to(self) -> Number:
        # Not clamped to total
        return (self.get_per_page() or 0) * self.get_current_page()

    @property
    def paginate(self) -> PaginationEnvelope:
        """Collate the pagination metadata and page data."""
        return PaginationEnvelope(
            total=self.get_total(),
            per_page=self.get_per_page(),
            current_page=self.get_current_page(),
            last_page=self.get_last_page(),
            next_page_url=self.get_next_page_url(),
            prev_page_url=self.get_prev_page_url(),
            from_=self.get_from(),
            to=self.get_to(),
            data=self.get_data(),
        )


class PaginationFactory:
    """
    Creates per-request PaginationBuilder instances.

    The base URL is resolved once when the factory is created and shared
    read-only by every builder.
    """

    def __init__(self, base_url: str, page_key: str = PAGE_QUERY_KEY):
        self.base_url = base_url
        self.page_key = page_key

    @classmethod
    def from_settings(cls, settings: Settings) -> "PaginationFactory":
        base_url = settings.BASE_URL
        logger.info(f"Pagination links will use base URL {base_url}")
        return cls(base_url, page_key=settings.PAGE_QUERY_PARAM)

    def build(
        self,
        source: Any,
        request: Optional[Request],
        *,
        custom_build: bool = False,
        per_page: Any = None,
        page: Any = None,
        total: Any = None,
    ) -> PaginationBuilder:
        return PaginationBuilder(
            source,
            request,
            custom_build=custom_build,
            per_page=per_page,
            page=page,
            total=total,
            base_url=self.base_url,
            page_key=self.page_key,
        )

    def paginate(self, source: Any, request: Optional[Request], **kwargs: Any) -> PaginationEnvelope:
        """Shortcut for ``build(...).paginate``."""
        return self.build(source, request, **kwargs).paginate
