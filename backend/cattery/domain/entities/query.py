"""Domain entities for gallery queries: search, tag filter and pagination."""

import math
from dataclasses import dataclass, field
from typing import Any

from .cat import Cat

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 8


def _parse_int(raw: Any, default: int) -> int:
    """Parse a query-string integer, falling back to ``default`` when non-numeric."""
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class CatQuery:
    """A normalised list request.

    ``search_text`` matches name, tag and description as a case-insensitive
    substring; ``tag_filter`` matches the tag exactly. Both are ``None``
    when blank so the repository can skip the predicate entirely.
    """

    search_text: str | None = None
    tag_filter: str | None = None
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_params(
        cls,
        *,
        search: str | None = None,
        tag_filter: str | None = None,
        page: Any = None,
        limit: Any = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int | None = None,
    ) -> "CatQuery":
        """Build a query from raw request parameters.

        Non-numeric ``page``/``limit`` fall back to 1 and ``default_page_size``.
        A page below 1 is treated as the first page and a page size below 1
        as the default; ``max_page_size`` caps oversized requests.
        """
        page_num = _parse_int(page, DEFAULT_PAGE)
        if page_num < 1:
            page_num = DEFAULT_PAGE

        page_size = _parse_int(limit, default_page_size)
        if page_size < 1:
            page_size = default_page_size
        if max_page_size is not None:
            page_size = min(page_size, max_page_size)

        return cls(
            search_text=(search or "").strip() or None,
            tag_filter=(tag_filter or "").strip() or None,
            page=page_num,
            page_size=page_size,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class CatPage:
    """One page of a filtered, newest-first result set."""

    items: list[Cat] = field(default_factory=list)
    total_count: int = 0
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size > 0 else 0
