"""Page request parameters for FastAPI endpoints.

Both parameters are optional: a request without page or page_size asks for
every item on one page.
"""

from dataclasses import dataclass

from fastapi import Query

from simple_pagination.core.config import settings


@dataclass(frozen=True)
class PageRequest:
    """Caller-supplied page request.

    Attributes:
        page_number: Requested page number (1-indexed), or None.
        page_size: Requested page size, or None. 0 means "everything".
    """

    page_number: int | None = None
    page_size: int | None = None


def page_request_params(
    page: int | None = Query(
        default=None, ge=0, description="Page number (1-indexed)"
    ),
    page_size: int | None = Query(
        default=None, ge=0, description="Items per page (0 = all)"
    ),
) -> PageRequest:
    """FastAPI dependency for optional page query parameters.

    Applies PAGINATION_DEFAULT_PAGE_SIZE when page_size is omitted. When
    PAGINATION_MAX_PAGE_SIZE is configured, page_size is capped (an omitted
    or 0 page_size becomes the maximum). Whenever either setting supplies or
    caps the page size, an omitted page defaults to 1.

    Usage:
        @router.get("/items")
        async def list_items(
            request: PageRequest = Depends(page_request_params),
        ):
            page = paginate(items, request.page_number, request.page_size)
            ...

    Args:
        page: Page number (optional, must be >= 0).
        page_size: Items per page (optional, must be >= 0).

    Returns:
        PageRequest with the effective query parameters.
    """
    configured = False
    if page_size is None and settings.default_page_size is not None:
        page_size = settings.default_page_size
        configured = True
    if settings.max_page_size is not None:
        if page_size is None or page_size == 0 or page_size > settings.max_page_size:
            page_size = settings.max_page_size
        configured = True
    # A missing page number would otherwise mean "everything"
    if configured and page is None:
        page = 1
    return PageRequest(page_number=page, page_size=page_size)
