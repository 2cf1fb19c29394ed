"""Pagination — page count math for list responses."""

import math


def compute_total_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size); 0 when there are no rows."""
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    if total <= 0:
        return 0
    return math.ceil(total / page_size)
