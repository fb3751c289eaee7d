from dataclasses import dataclass

import pytest

from ajisai.sequences import contains_any, remove_zero_values


@pytest.mark.parametrize(
    ("source", "values", "expected"),
    [
        ([], [1, 2, 3], False),
        ([1, 2, 3], [], False),
        ([1, 2, 3], [3, 4, 5], True),
        ([1, 2, 3], [4, 5, 6], False),
        ([1, 2, 3, 4], [2, 4, 6], True),
        (["apple", "banana", "cherry"], ["cherry", "date", "fig"], True),
        (["apple", "banana", "cherry"], ["date", "fig", "grape"], False),
    ],
)
def test_contains_any(source, values, expected):
    assert contains_any(source, values) is expected


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ([0, 1, 0, 2, 0, 3], [1, 2, 3]),
        ([1, 2, 3], [1, 2, 3]),
        ([0, 0, 0], []),
        ([], []),
        (["", "hello", "", "world", ""], ["hello", "world"]),
        (["hello", "world"], ["hello", "world"]),
    ],
)
def test_remove_zero_values(source, expected):
    assert remove_zero_values(source) == expected


@dataclass
class Record:
    value: int = 0
    name: str = ""


def test_remove_zero_values_structs():
    source = [Record(0, ""), Record(1, "one"), Record(0, ""), Record(2, "two")]
    assert remove_zero_values(source) == [Record(1, "one"), Record(2, "two")]