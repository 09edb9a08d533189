"""Unit tests for gallery query normalisation and page math."""

import pytest

from cattery.domain.entities import Cat, CatPage, CatQuery


def test_defaults_when_nothing_supplied():
    query = CatQuery.from_params()
    assert query.page == 1
    assert query.page_size == 8
    assert query.search_text is None
    assert query.tag_filter is None
    assert query.offset == 0


def test_blank_search_and_filter_become_none():
    query = CatQuery.from_params(search="   ", tag_filter="")
    assert query.search_text is None
    assert query.tag_filter is None


def test_search_and_filter_are_trimmed():
    query = CatQuery.from_params(search="  tab ", tag_filter=" Tabby ")
    assert query.search_text == "tab"
    assert query.tag_filter == "Tabby"


@pytest.mark.parametrize(
    "page, limit, expected_page, expected_size",
    [
        ("2", "8", 2, 8),
        ("abc", "xyz", 1, 8),
        ("0", "0", 1, 8),
        ("-3", "-1", 1, 8),
        (3, 5, 3, 5),
        (" 4 ", None, 4, 8),
    ],
)
def test_page_and_limit_parsing(page, limit, expected_page, expected_size):
    query = CatQuery.from_params(page=page, limit=limit)
    assert query.page == expected_page
    assert query.page_size == expected_size


def test_page_size_is_capped():
    query = CatQuery.from_params(limit="5000", max_page_size=100)
    assert query.page_size == 100


def test_custom_default_page_size():
    query = CatQuery.from_params(limit="nope", default_page_size=12)
    assert query.page_size == 12


def test_offset_follows_page():
    assert CatQuery.from_params(page=3, limit=8).offset == 16


@pytest.mark.parametrize(
    "total, size, pages",
    [(0, 8, 0), (1, 8, 1), (8, 8, 1), (9, 8, 2), (17, 8, 3)],
)
def test_total_pages_rounds_up(total, size, pages):
    assert CatPage(items=[], total_count=total, page_size=size).total_pages == pages


def test_page_keeps_items():
    page = CatPage(items=[Cat(name="Tom", tag="Tabby")], total_count=1)
    assert page.items[0].name == "Tom"
