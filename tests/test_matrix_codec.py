"""Tests for parsing and rendering matrix text."""

from __future__ import annotations

import pytest

from matrix_codec import decode, encode, format_number, parse_number
from matrix_errors import (
    ColCountMismatchError,
    EmptyInputError,
    InvalidNumberError,
    MatrixError,
    RowCountMismatchError,
)


class TestParseNumber:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("12", 12.0),
            ("-3.5", -3.5),
            (".5", 0.5),
            ("4.", 4.0),
            ("1e-3", 0.001),
            ("+2E+10", 2e10),
        ],
    )
    def test_valid_literals(self, token: str, expected: float) -> None:
        assert parse_number(token) == expected

    @pytest.mark.parametrize(
        "token",
        ["", "x", "nan", "inf", "Infinity", "0x10", "1_000", "1.2.3", "--1", "e5", ".", "+", "1e999", "1 2"],
    )
    def test_rejected_literals(self, token: str) -> None:
        assert parse_number(token) is None


class TestDecode:
    def test_square_with_expected_dimensions(self) -> None:
        assert decode("1,2; 3,4", 2, 2) == [[1.0, 2.0], [3.0, 4.0]]

    def test_whitespace_and_trailing_separator(self) -> None:
        assert decode("  1 , 2 ;\n 3,4 ;  ; ") == [[1.0, 2.0], [3.0, 4.0]]

    def test_single_row(self) -> None:
        assert decode("1.5, -2, 3e2", 1, 3) == [[1.5, -2.0, 300.0]]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_input(self, text: str) -> None:
        with pytest.raises(EmptyInputError, match="Matrix is empty"):
            decode(text)

    def test_only_separators_is_not_empty_input(self) -> None:
        with pytest.raises(RowCountMismatchError):
            decode(" ; ; ", 2, 2)

    def test_row_count_mismatch(self) -> None:
        with pytest.raises(RowCountMismatchError, match="Expected 3 rows, got 2") as exc_info:
            decode("1,2; 3,4", 3, 2)
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_row_count_checked_before_numbers(self) -> None:
        with pytest.raises(RowCountMismatchError):
            decode("1,2; 3,x; 5,6", 2, 2)

    def test_invalid_number_names_row(self) -> None:
        with pytest.raises(InvalidNumberError, match="Invalid number at row 2") as exc_info:
            decode("1,2; 3,x", 2, 2)
        assert exc_info.value.row == 2
        assert exc_info.value.token == "x"

    def test_empty_token_is_invalid(self) -> None:
        with pytest.raises(InvalidNumberError) as exc_info:
            decode("1,,2")
        assert exc_info.value.row == 1
        assert exc_info.value.token == ""

    def test_col_count_mismatch(self) -> None:
        with pytest.raises(ColCountMismatchError, match="Row 2: expected 2 cols, got 1") as exc_info:
            decode("1,2; 3", 2, 2)
        assert exc_info.value.row == 2

    def test_numbers_checked_before_col_count(self) -> None:
        with pytest.raises(InvalidNumberError):
            decode("1,2,x", 1, 2)

    def test_ragged_rows_rejected_without_expected_cols(self) -> None:
        with pytest.raises(ColCountMismatchError) as exc_info:
            decode("1,2; 3,4,5; 6,7")
        assert exc_info.value.row == 2
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_unconstrained_columns(self) -> None:
        assert decode("7,8,9; 10,11,12", 2) == [[7.0, 8.0, 9.0], [10.0, 11.0, 12.0]]

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            decode("a")
        assert issubclass(InvalidNumberError, MatrixError)


class TestEncode:
    def test_integral_values(self) -> None:
        assert encode([[6.0, 8.0], [10.0, 12.0]]) == "6\t8\n10\t12"

    def test_fractional_values(self) -> None:
        assert encode([[0.5, -1.25]]) == "0.5\t-1.25"

    def test_empty_grid(self) -> None:
        assert encode([]) == ""

    def test_large_values_keep_exponent(self) -> None:
        assert format_number(1e20) == "1e+20"
        assert format_number(-0.0) == "0"

    @pytest.mark.parametrize(
        "grid",
        [
            [[1.0, 2.0], [3.0, 4.0]],
            [[0.1, -2.5e-07, 1e20]],
            [[1 / 3], [2 / 3], [-7.0]],
        ],
    )
    def test_round_trip(self, grid: list) -> None:
        assert decode(encode(grid)) == grid
