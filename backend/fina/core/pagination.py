"""Pagination — offset/limit math for 1-based page numbers."""

import math


def page_offset(page_number: int, page_size: int) -> int:
    """Rows to skip before ``page_number`` (1-based)."""
    return (page_number - 1) * page_size


def total_pages(total_count: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return math.ceil(total_count / page_size)
