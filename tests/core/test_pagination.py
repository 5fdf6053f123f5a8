"""Pagination — tests for page clamping, page counts and in-memory slicing."""

import pytest

from backoffice.core.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_NUMBER,
    MAX_PAGE_SIZE,
    PageRequest,
    clamp_page,
    slice_page,
    total_pages,
)


def test_defaults_when_absent():
    assert clamp_page(None, None) == PageRequest(1, DEFAULT_PAGE_SIZE)


@pytest.mark.parametrize("number,size,expected", [
    (0, 10, PageRequest(1, 10)),
    (-4, 10, PageRequest(1, 10)),
    (3, 0, PageRequest(3, DEFAULT_PAGE_SIZE)),
    (1, 101, PageRequest(1, MAX_PAGE_SIZE)),
    (2, 25, PageRequest(2, 25)),
])
def test_clamp_page(number, size, expected):
    assert clamp_page(number, size) == expected


def test_offset():
    assert PageRequest(1, 10).offset == 0
    assert PageRequest(3, 20).offset == 40


@pytest.mark.parametrize("total,size,expected", [
    (0, 10, 0),
    (1, 10, 1),
    (10, 10, 1),
    (11, 10, 2),
    (250, 100, 3),
])
def test_total_pages(total, size, expected):
    assert total_pages(total, size) == expected


def test_slice_page_past_end_is_empty():
    items = list(range(5))
    assert slice_page(items, PageRequest(1, 2)) == [0, 1]
    assert slice_page(items, PageRequest(3, 2)) == [4]
    assert slice_page(items, PageRequest(4, 2)) == []


def test_huge_page_number_capped():
    page = clamp_page(10**19, MAX_PAGE_SIZE)
    assert page.number == MAX_PAGE_NUMBER
    assert page.offset < 2**31
