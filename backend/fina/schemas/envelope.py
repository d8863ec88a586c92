"""Response Envelope — the {data, code, message} wrapper every handler returns.

Invariants:
    - code defaults to 200; handlers override it for 201/404/500
    - data is None on every non-success path
    - PagedResponse.total_count ignores pagination

Design Decisions:
    - Plain generic Pydantic models: one shape serialized directly by routes,
      no polymorphism
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, computed_field

from fina.core.pagination import total_pages as _total_pages

DataT = TypeVar("DataT")

DEFAULT_STATUS_CODE = 200


class Response(BaseModel, Generic[DataT]):
    """Single-result envelope."""
    data: DataT | None = None
    code: int = DEFAULT_STATUS_CODE
    message: str | None = None

    @computed_field
    @property
    def is_success(self) -> bool:
        return 200 <= self.code <= 299


class PagedResponse(Response[DataT], Generic[DataT]):
    """List envelope with paging metadata."""
    total_count: int = 0
    page_number: int = 1
    page_size: int = 25

    @computed_field
    @property
    def total_pages(self) -> int:
        return _total_pages(self.total_count, self.page_size)
