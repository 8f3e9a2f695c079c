import io

import pytest

from algodrills.patterns import inverted_pyramid, main


@pytest.mark.parametrize("rows", [1, 2, 5, 9])
def test_line_count_matches_rows(rows):
    lines = inverted_pyramid(rows).splitlines()
    assert len(lines) == rows


@pytest.mark.parametrize("rows", [1, 4, 7])
def test_each_row_has_indent_and_stars(rows):
    lines = inverted_pyramid(rows).splitlines()
    for offset, line in enumerate(lines):
        stars = rows - offset
        assert line == " " * offset + "* " * stars


def test_every_line_ends_with_newline():
    text = inverted_pyramid(3)
    assert text.endswith("\n")
    assert text.count("\n") == 3


@pytest.mark.parametrize("rows", [0, -3])
def test_non_positive_rows_give_nothing(rows):
    assert inverted_pyramid(rows) == ""


def test_single_row():
    assert inverted_pyramid(1) == "* \n"


def test_main_with_argument(capsys):
    assert main(["4"]) == 0
    assert capsys.readouterr().out == inverted_pyramid(4)


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "Enter no. of rows " + inverted_pyramid(3)


def test_main_rejects_bad_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err