"""Offset/limit pagination metadata."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationInfo:
    """Page metadata derived from an offset/limit request and its response."""

    current_page: int
    page_size: int
    total_results: int
    total_pages: int
    has_more: bool
    has_previous: bool
    next_offset: int | None = None
    previous_offset: int | None = None


def get_pagination_info(offset: int, limit: int, total: int, more: bool) -> PaginationInfo:
    """Derive page metadata from raw pagination fields.

    ``more`` is taken from the service as-is rather than recomputed from
    ``offset + limit < total``. ``limit`` must be positive.
    """
    has_previous = offset > 0
    return PaginationInfo(
        current_page=offset // limit + 1,
        page_size=limit,
        total_results=total,
        total_pages=math.ceil(total / limit),
        has_more=more,
        has_previous=has_previous,
        next_offset=offset + limit if more else None,
        previous_offset=max(0, offset - limit) if has_previous else None,
    )
