import io

import pytest

from algodrills.sorting import bubble_sort, main, merge, merge_sort

SAMPLES = [
    [],
    [1],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 1, 4, 0],
    [-3, 10, -7, 0, 2],
    list(range(10, 0, -1)),
]


@pytest.mark.parametrize("values", SAMPLES)
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_sorts_do_not_modify_input():
    values = [3, 1, 2]
    bubble_sort(values)
    merge_sort(values)
    assert values == [3, 1, 2]


def test_merge_combines_sorted_lists():
    left, right = [1, 4, 9], [2, 3, 10, 11]
    assert merge(left, right) == sorted(left + right)


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([3, 5], []) == [3, 5]


def test_merge_sort_accepts_iterables():
    assert merge_sort(iter([3, 2, 1])) == [1, 2, 3]


def test_merge_sort_incomparable_values():
    with pytest.raises(TypeError):
        merge_sort([1, "a"])


def test_main_merge(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n9 2 7 1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\nSorted array is \n1 2 7 9 \n")


def test_main_bubble(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n3 1 2\n"))
    assert main(["--algorithm", "bubble"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("Sorted array: \n1 2 3 ")


def test_main_short_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err