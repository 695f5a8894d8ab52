"""
Matrix Arithmetic Engine

Addition, subtraction and multiplication of two grids using SymPy matrices.
Operands are never modified; every operation returns a new grid of floats.
"""

import math

import sympy

from matrix_errors import DimensionMismatchError, InvalidGridError, UnknownOperationError


def shape(grid):
    """
    Return the (rows, cols) shape of a grid.

    Args:
        grid: 2D list of numbers

    Returns:
        Tuple of row count and column count

    Raises:
        InvalidGridError: If the grid is empty, ragged or holds non-numbers or
            non-finite values
    """
    if not grid or not isinstance(grid, list):
        raise InvalidGridError("Matrix must be a non-empty 2D array (list of lists)")

    if not all(isinstance(row, list) for row in grid):
        raise InvalidGridError("Matrix must be a 2D array (each row must be a list)")

    cols = len(grid[0])
    if cols == 0:
        raise InvalidGridError("Matrix rows must not be empty")

    # Check that all rows have the same length
    for row_number, row in enumerate(grid, start=1):
        if len(row) != cols:
            raise InvalidGridError(f"Row {row_number}: expected {cols} cols, got {len(row)}")
        for value in row:
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not _is_finite(value):
                raise InvalidGridError(f"Invalid number at row {row_number}")

    return len(grid), cols


def _is_finite(value):
    # Integers too large for a float overflow in the conversion
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _to_sympy(grid):
    return sympy.Matrix(grid)


def _to_grid(matrix):
    return [[float(matrix[i, j]) for j in range(matrix.cols)] for i in range(matrix.rows)]


def _require_same_shape(matrix_a, matrix_b, operation):
    shape_a = shape(matrix_a)
    shape_b = shape(matrix_b)
    if shape_a != shape_b:
        raise DimensionMismatchError(operation, shape_a, shape_b)


def add(matrix_a, matrix_b):
    """Elementwise sum of two grids of identical shape."""
    _require_same_shape(matrix_a, matrix_b, 'addition')
    return _to_grid(_to_sympy(matrix_a) + _to_sympy(matrix_b))


def subtract(matrix_a, matrix_b):
    """Elementwise difference A - B of two grids of identical shape."""
    _require_same_shape(matrix_a, matrix_b, 'subtraction')
    return _to_grid(_to_sympy(matrix_a) - _to_sympy(matrix_b))


def multiply(matrix_a, matrix_b):
    """
    Matrix product A * B.

    Products and sums are carried out on SymPy Floats, whose exponent is
    unbounded, so intermediate values that would overflow a double do not
    become inf; [[1e200, 1e200]] * [[1e200], [-1e200]] gives [[0.0]]. Only a
    final entry beyond the double range comes back as inf.

    Args:
        matrix_a: Grid of shape (n, m)
        matrix_b: Grid of shape (m, p)

    Returns:
        New grid of shape (n, p)

    Raises:
        DimensionMismatchError: If A's column count differs from B's row count
    """
    shape_a = shape(matrix_a)
    shape_b = shape(matrix_b)
    if shape_a[1] != shape_b[0]:
        raise DimensionMismatchError('multiplication', shape_a, shape_b)

    return _to_grid(_to_sympy(matrix_a) * _to_sympy(matrix_b))


OPERATIONS = {
    'add': add,
    'subtract': subtract,
    'multiply': multiply,
}

OPERATION_ALIASES = {
    'sub': 'subtract',
    'mul': 'multiply',
}


def resolve_operation(name):
    """Return the canonical operation name for a name or alias."""
    if isinstance(name, str):
        name = name.strip().lower()
        name = OPERATION_ALIASES.get(name, name)
        if name in OPERATIONS:
            return name
    raise UnknownOperationError(name)


def apply(operation, matrix_a, matrix_b):
    """Run the named operation on two grids."""
    return OPERATIONS[resolve_operation(operation)](matrix_a, matrix_b)
