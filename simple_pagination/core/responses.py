"""Response envelope models for paginated collections.

Serializes a Page as {"data": [...], "meta": {...}} for API layers.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, computed_field

from simple_pagination.core.page import Page

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata for a collection response.

    Attributes:
        total: Total number of items across all pages.
        page: Current page number (1-indexed).
        page_size: Normalized number of items per page.
    """

    total: int
    page: int
    page_size: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """Calculate total number of pages.

        Returns:
            Number of pages needed to display all items.
            Returns 0 if page_size is 0.
        """
        if self.page_size == 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class PageResponse(BaseModel, Generic[T]):
    """Standard response envelope for one page of a collection.

    Usage:
        @router.get("/orders")
        async def list_orders(
            request: PageRequest = Depends(page_request_params),
            db: AsyncSession = Depends(get_db),
        ) -> PageResponse[OrderSchema]:
            page = await paginate_async(
                SQLAlchemyQuery(db, select(Order).order_by(Order.id)),
                request.page_number,
                request.page_size,
            )
            return PageResponse[OrderSchema].from_page(page)
    """

    data: list[T]
    meta: PageMeta

    @classmethod
    def from_page(cls, page: Page[Any]) -> "PageResponse[Any]":
        """Build a response envelope from a Page.

        Args:
            page: Page returned by paginate() or paginate_async().

        Returns:
            PageResponse carrying the page items and metadata.
        """
        return cls(
            data=list(page.items),
            meta=PageMeta(
                total=page.total_count,
                page=page.page_number,
                page_size=page.page_size,
            ),
        )
