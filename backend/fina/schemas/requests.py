"""Request Bases — user scoping and paging shared by every operation.

Invariants:
    - user_id is non-empty; handlers scope every query by it
    - 1 <= page_number <= MAX_PAGE_NUMBER, 1 <= page_size <= MAX_PAGE_SIZE
    - (MAX_PAGE_NUMBER - 1) * MAX_PAGE_SIZE fits a signed 64-bit OFFSET
"""

from pydantic import BaseModel, Field

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100
MAX_PAGE_NUMBER = 1_000_000_000


class Request(BaseModel):
    """Base for all handler requests."""
    user_id: str = Field(min_length=1, max_length=160)


class PageFilter(BaseModel):
    """Paging parameters — also used directly as a query-string model."""
    page_number: int = Field(DEFAULT_PAGE_NUMBER, ge=1, le=MAX_PAGE_NUMBER)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class PagedRequest(Request, PageFilter):
    """User-scoped paged request."""
