"""
Matrix Codec

Converts between the delimited text form of a matrix ("1,2; 3,4") and a
grid (list of rows of floats), and renders grids back to tab separated text.
"""

import math
import re

from matrix_errors import (
    ColCountMismatchError,
    EmptyInputError,
    InvalidNumberError,
    RowCountMismatchError,
)

ROW_SEPARATOR = ';'
VALUE_SEPARATOR = ','

# Optionally signed decimal literal with optional exponent
NUMBER_PATTERN = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

# Integral values below this magnitude are rendered without a fraction
INTEGER_RENDER_LIMIT = 1e16


def parse_number(token):
    """
    Parse a single numeric literal.

    Args:
        token: Already trimmed token text

    Returns:
        The value as a float, or None if the token is not a finite decimal literal
    """
    if not NUMBER_PATTERN.fullmatch(token):
        return None

    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def decode(text, expected_rows=None, expected_cols=None):
    """
    Parse delimited text into a rectangular grid.

    Rows are separated by ';' and values by ','. Whitespace around any token
    is ignored and empty rows are skipped. Validation stops at the first
    failure.

    Args:
        text: Raw matrix text
        expected_rows: Required number of rows, or None for any
        expected_cols: Required number of values per row, or None to only
            require that every row matches the first one

    Returns:
        List of rows, each a list of floats

    Raises:
        EmptyInputError: If the text is blank
        RowCountMismatchError: If the row count differs from expected_rows
        InvalidNumberError: If a token in a row is not a valid number
        ColCountMismatchError: If a row has the wrong number of values
    """
    if not text.strip():
        raise EmptyInputError()

    rows = [row.strip() for row in text.split(ROW_SEPARATOR)]
    rows = [row for row in rows if row]

    if expected_rows is not None and len(rows) != expected_rows:
        raise RowCountMismatchError(expected_rows, len(rows))

    grid = []
    required_cols = expected_cols
    for row_number, row in enumerate(rows, start=1):
        values = []
        for token in row.split(VALUE_SEPARATOR):
            token = token.strip()
            value = parse_number(token)
            if value is None:
                raise InvalidNumberError(row_number, token)
            values.append(value)

        if required_cols is None:
            # First row fixes the width for the rest
            required_cols = len(values)
        elif len(values) != required_cols:
            raise ColCountMismatchError(row_number, required_cols, len(values))

        grid.append(values)

    return grid


def format_number(value):
    """Render a value the way a person would type it back in."""
    value = float(value)
    if value.is_integer() and abs(value) < INTEGER_RENDER_LIMIT:
        return str(int(value))
    return repr(value)


def encode(grid):
    """Render a grid as tab separated values, one row per line."""
    return '\n'.join('\t'.join(format_number(value) for value in row) for row in grid)
