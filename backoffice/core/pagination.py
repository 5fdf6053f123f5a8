"""Pagination — clamping page requests and computing page counts. Pure, no IO.

Invariants:
    - PageRequest.number >= 1, 1 <= PageRequest.size <= MAX_PAGE_SIZE
    - A size below 1 falls back to DEFAULT_PAGE_SIZE, a size above the max is capped
    - A number above MAX_PAGE_NUMBER is capped (an empty page), so the offset
      always binds
    - total_pages is 0 for an empty result set

Design Decisions:
    - Clamping lives here, independent of endpoint validation (core/enforce_listing.py):
      the store layer never receives an out-of-range page even when called directly
"""

from dataclasses import dataclass

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Keeps (number - 1) * size inside a 32-bit OFFSET on every store
MAX_PAGE_NUMBER = 10_000_000


@dataclass(frozen=True)
class PageRequest:
    number: int = DEFAULT_PAGE_NUMBER
    size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.size


def clamp_page(page_number: int | None, page_size: int | None) -> PageRequest:
    """Normalize optional page parameters into a valid PageRequest."""
    number = page_number if page_number is not None else DEFAULT_PAGE_NUMBER
    if number < 1:
        number = DEFAULT_PAGE_NUMBER
    if number > MAX_PAGE_NUMBER:
        number = MAX_PAGE_NUMBER
    size = page_size if page_size is not None else DEFAULT_PAGE_SIZE
    if size < 1:
        size = DEFAULT_PAGE_SIZE
    if size > MAX_PAGE_SIZE:
        size = MAX_PAGE_SIZE
    return PageRequest(number=number, size=size)


def total_pages(total_count: int, page_size: int) -> int:
    if total_count <= 0 or page_size <= 0:
        return 0
    return -(-total_count // page_size)


def slice_page(items: list, page: PageRequest) -> list:
    """Take one page out of an in-memory, already-sorted list."""
    return items[page.offset:page.offset + page.size]
