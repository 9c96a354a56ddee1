# This file handles pagination and sort parsing for the paged truck listing.
# Pages are zero-based and sort input takes the form `field,direction`.
# The helpers validate user input and produce stable offset/limit behavior.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

MAX_STORE_INT = 2**63 - 1


@dataclass(frozen=True)
class SortSpec:
    field: str
    order: str

    @property
    def as_text(self) -> str:
        return f"{self.field},{self.order}"


@dataclass(frozen=True)
class PaginationSpec:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size


def normalize_pagination(
    *,
    page: int | None,
    size: int | None,
    default_page_size: int,
    max_page_size: int,
) -> PaginationSpec:
    """Validate and normalize page/size values."""

    resolved_page = 0 if page is None else page
    resolved_size = default_page_size if size is None else size
    if resolved_page < 0:
        raise ValueError("page must be >= 0")
    if resolved_size < 1:
        raise ValueError("size must be >= 1")
    if resolved_size > max_page_size:
        raise ValueError(f"size must be <= {max_page_size}")
    if resolved_page * resolved_size > MAX_STORE_INT:
        raise ValueError(f"page is too large for size {resolved_size}")
    return PaginationSpec(page=resolved_page, size=resolved_size)


def parse_sort(
    *,
    requested_sort: str | None,
    default_sort: str,
    allowed_fields: set[str],
) -> SortSpec:
    """Parse sort input in the form `field,asc|desc`."""

    raw_sort = (requested_sort or default_sort).strip().lower()
    if not raw_sort:
        raise ValueError("sort cannot be empty")

    if "," in raw_sort:
        field, order = (part.strip() for part in raw_sort.split(",", 1))
    else:
        field, order = raw_sort, "asc"

    if field not in allowed_fields:
        supported = ", ".join(sorted(allowed_fields))
        raise ValueError(f"Unsupported sort field '{field}'. Supported fields: {supported}")
    if order not in {"asc", "desc"}:
        raise ValueError("sort order must be 'asc' or 'desc'")
    return SortSpec(field=field, order=order)


def compute_total_pages(*, total_count: int, page_size: int) -> int:
    """Compute deterministic total page count."""

    if total_count <= 0:
        return 0
    return ((total_count - 1) // page_size) + 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of an ordered collection plus its count metadata."""

    items: list[T]
    page: int
    size: int
    total_count: int
    sort: SortSpec

    @property
    def total_pages(self) -> int:
        return compute_total_pages(total_count=self.total_count, page_size=self.size)

    def map(self, func: Callable[[T], U]) -> Page[U]:
        return Page(
            items=[func(item) for item in self.items],
            page=self.page,
            size=self.size,
            total_count=self.total_count,
            sort=self.sort,
        )
