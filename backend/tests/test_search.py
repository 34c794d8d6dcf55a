import pytest

from app.core.constants import QueryKind
from app.processing.canonical import AdvocateRecord
from app.processing.search import (
    classify_query,
    matches,
    parse_limit,
    parse_offset,
    search,
)


def _rec(last_name, years="", **kwargs):
    return AdvocateRecord(last_name=last_name, years_of_experience=years, **kwargs)


def _last_names(records):
    return [r.last_name for r in records]


def test_numeric_exact_years_match_ranks_before_substring_match():
    records = [_rec("Zed", years="5"), _rec("Adams", years="15")]
    page, total = search(records, "5", 50, 0)
    assert _last_names(page) == ["Zed", "Adams"]
    assert total == 2


def test_numeric_tiers_are_each_sorted_by_last_name():
    records = [
        _rec("Young", years="15"),
        _rec("Baker", years="5"),
        _rec("Allen", years="25"),
        _rec("Mills", years="5"),
        _rec("Cole", years="8"),
    ]
    page, total = search(records, "5", 50, 0)
    assert _last_names(page) == ["Baker", "Mills", "Allen", "Young"]
    assert total == 4


def test_numeric_query_matches_digits_in_text_fields():
    records = [_rec("Smith", city="District 9", years="3"), _rec("Jones", years="4")]
    page, _ = search(records, "9", 50, 0)
    assert _last_names(page) == ["Smith"]


def test_numeric_query_ignores_phone_number():
    records = [_rec("Smith", years="3", phone_number="5551234567")]
    assert search(records, "1234", 50, 0) == ([], 0)


def test_numeric_exact_match_tolerates_leading_zeros_and_whitespace():
    records = [_rec("Doe", years=" 07 ")]
    assert matches(records[0], "7", QueryKind.NUMERIC)


def test_very_long_numeric_query_is_matched_without_error():
    records = [_rec("Zed", years="5"), _rec("Ames", city="1" * 6000)]
    page, total = search(records, "1" * 5000, 50, 0)
    assert _last_names(page) == ["Ames"]
    assert total == 1


def test_long_query_equal_to_years_is_an_exact_match():
    years = "7" * 5000
    records = [_rec("Zed", years="000" + years)]
    assert matches(records[0], years, QueryKind.NUMERIC)


def test_non_numeric_years_never_exact_match():
    records = [_rec("Doe", years="ten"), _rec("Roe", years="10")]
    page, _ = search(records, "10", 50, 0)
    assert _last_names(page) == ["Roe"]


def test_text_query_is_case_insensitive_across_fields():
    records = [
        _rec("Doe", city="New York"),
        _rec("Lee", specialties=("Pediatrics", "Sleep issues")),
        _rec("Kim", degree="MD"),
        _rec("Ray", phone_number="(555) 123-4567"),
    ]
    assert _last_names(search(records, "new york", 50, 0)[0]) == ["Doe"]
    assert _last_names(search(records, "PEDIATRICS", 50, 0)[0]) == ["Lee"]
    assert _last_names(search(records, "pediatrics, sleep", 50, 0)[0]) == ["Lee"]
    assert _last_names(search(records, "(555)", 50, 0)[0]) == ["Ray"]


def test_text_query_matches_first_and_last_name():
    records = [_rec("Walker", first_name="Joshua"), _rec("Josh", first_name="Ann")]
    page, total = search(records, "jos", 50, 0)
    assert _last_names(page) == ["Josh", "Walker"]
    assert total == 2


def test_text_query_with_no_matches():
    assert search([_rec("Doe")], "zzz", 50, 0) == ([], 0)


def test_empty_query_sorts_by_last_name_case_insensitively():
    records = [_rec("smith"), _rec("Adams"), _rec("brown")]
    page, total = search(records, "", 50, 0)
    assert _last_names(page) == ["Adams", "brown", "smith"]
    assert total == 3


def test_blank_and_none_queries_behave_like_empty():
    records = [_rec("B"), _rec("A")]
    assert search(records, "   ", 50, 0) == search(records, None, 50, 0)
    assert classify_query("   ") is QueryKind.EMPTY


def test_equal_last_names_keep_input_order():
    first = _rec("Doe", first_name="John")
    second = _rec("Doe", first_name="Jane")
    page, _ = search([first, second], "", 50, 0)
    assert page == [first, second]


@pytest.mark.parametrize("offset", [0, 1, 3, 7, 20])
@pytest.mark.parametrize("limit", [1, 2, 5, 50])
def test_page_is_slice_of_full_ordering(limit, offset):
    records = [_rec(name, years=str(i)) for i, name in enumerate("QWERTYUIOP")]
    full, full_total = search(records, "", 1000, 0)
    page, total = search(records, "", limit, offset)
    assert len(page) <= limit
    assert page == full[offset:offset + limit]
    assert total == full_total == len(records)


def test_total_counts_matches_before_pagination():
    records = [_rec(f"Name{i}", city="Austin") for i in range(5)] + [_rec("Other")]
    page, total = search(records, "austin", 2, 1)
    assert total == 5
    assert _last_names(page) == ["Name1", "Name2"]


@pytest.mark.parametrize(
    ("query", "kind"),
    [
        ("5", QueryKind.NUMERIC),
        (" 42 ", QueryKind.NUMERIC),
        ("4.5", QueryKind.TEXT),
        ("-3", QueryKind.TEXT),
        ("md", QueryKind.TEXT),
        ("", QueryKind.EMPTY),
    ],
)
def test_classify_query(query, kind):
    assert classify_query(query) is kind


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, 50),
        ("abc", 50),
        ("", 50),
        ("10.5", 50),
        ("20", 20),
        (" 7 ", 7),
        (0, 1),
        ("-3", 1),
        ("5000", 1000),
        (1000, 1000),
        ("1_000", 50),
        ("\uff12\uff10", 50),
        ("+5", 50),
        ("9" * 5000, 50),
    ],
)
def test_parse_limit(value, expected):
    assert parse_limit(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, 0), ("x", 0), ("-5", 0), ("7", 7), (3, 3)],
)
def test_parse_offset(value, expected):
    assert parse_offset(value) == expected


def test_search_clamps_its_parameters():
    records = [_rec(str(i)) for i in range(3)]
    page, total = search(records, "", "nope", "-1")
    assert len(page) == 3
    assert total == 3
