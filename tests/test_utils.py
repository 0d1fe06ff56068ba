import pytest

from gerrymander.utils import join_search_terms, parse_count, split_line


def test_split_line_on_every_delimiter():
    assert split_line("Texas,1,600,400", ",") == ["Texas", "1", "600", "400"]


def test_split_line_keeps_empty_and_untrimmed_fields():
    assert split_line(",a, b,", ",") == ["", "a", " b", ""]


def test_split_line_without_delimiter_returns_whole_line():
    assert split_line("Vermont", ",") == ["Vermont"]
    assert split_line("", ",") == [""]


def test_split_line_multi_character_delimiter():
    assert split_line("a::b::::c", "::") == ["a", "b", "", "c"]


def test_split_line_rejects_empty_delimiter():
    with pytest.raises(ValueError):
        split_line("abc", "")


@pytest.mark.parametrize("field, expected", [("0", 0), ("600", 600), (" 42 ", 42), ("+7", 7)])
def test_parse_count(field, expected):
    assert parse_count(field) == expected


@pytest.mark.parametrize("field", ["", "abc", "-5", "1.5", "1,000"])
def test_parse_count_rejects_bad_fields(field):
    with pytest.raises(ValueError):
        parse_count(field)


def test_join_search_terms():
    assert join_search_terms(["new", "york"]) == "new york"
    assert join_search_terms([]) == ""
