import pytest

from coursekit.labs import (
    Route,
    blank_every_third,
    count_digits,
    filter_file,
    filter_lines_ending_with_digit,
    join_without_spaces,
    sort_by_digit_count,
    sort_routes_by_cost,
)


def test_join_without_spaces():
    assert join_without_spaces("a b", " c d ") == "abcd"
    assert " " not in join_without_spaces("hello world", "foo bar")


def test_blank_every_third_invariants():
    text = "abcdefghij"
    result = blank_every_third(text)
    assert len(result) == len(text)
    for index, (old, new) in enumerate(zip(text, result)):
        assert new == (" " if index % 3 == 2 else old)


def test_blank_every_third_short_text_unchanged():
    assert blank_every_third("ab") == "ab"


def test_count_digits():
    digits = "0123456789"
    assert count_digits(digits) == len(digits)
    assert count_digits("abc") == 0
    assert count_digits("x" + digits + "y") == len(digits)


def test_sort_by_digit_count_order_and_swaps():
    steps = sort_by_digit_count(["a", "1", "22", "333"])
    assert [s for s, _, _ in steps] == ["333", "22", "1", "a"]
    counts = [c for _, c, _ in steps]
    assert counts == sorted(counts, reverse=True)
    assert steps[-1][2] == 2


def test_sort_by_digit_count_keeps_items():
    items = ["x1y2", "nope", "9", "12345", "a1"]
    steps = sort_by_digit_count(items)
    assert sorted(s for s, _, _ in steps) == sorted(items)
    swaps = [n for _, _, n in steps]
    assert swaps == sorted(swaps)


def test_sort_already_sorted_makes_no_swaps():
    steps = sort_by_digit_count(["111", "22", "3"])
    assert all(n == 0 for _, _, n in steps)


def test_sort_routes_by_cost():
    routes = [
        Route("north", 10, 2, 30),
        Route("south", 5, 1, 90),
        Route("east", 7, 3, 60),
        Route("west", 2, 1, 10),
    ]
    ordered = sort_routes_by_cost(routes)
    costs = [r.cost for r in ordered]
    assert costs == sorted(costs, reverse=True)
    assert sorted(r.name for r in ordered) == sorted(r.name for r in routes)
    assert routes[0].name == "north"


def test_filter_lines_keeps_digit_endings():
    lines = ["abc1\n", "abc\n", "9", "\n"]
    assert list(filter_lines_ending_with_digit(lines, 10)) == ["abc1\n", "9"]


def test_filter_lines_splits_long_lines():
    assert list(filter_lines_ending_with_digit(["abcd12\n"], 3)) == ["d12"]


def test_filter_lines_rejects_non_positive_length():
    with pytest.raises(ValueError):
        list(filter_lines_ending_with_digit(["a1"], 0))


def test_filter_file_writes_out_file(tmp_path):
    source = tmp_path / "data.txt"
    source.write_text("line 1\nno digit\nend 42\n", encoding="utf-8")
    target = filter_file(source, 80)
    assert target.name == "data.txt.out"
    assert target.read_text(encoding="utf-8") == "line 1\nend 42\n"