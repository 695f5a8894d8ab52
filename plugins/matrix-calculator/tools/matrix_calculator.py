"""
Matrix Calculator

Shared logic for the matrix calculator tools. Decodes both operands with the
expected dimensions, runs the requested operation and encodes the result.
Validation errors are reported as result dictionaries rather than raised, so
tools can print them directly.

Tools receive JSON via stdin and output JSON via stdout. Diagnostics are
written to stderr.
"""

import json
import sys

import matrix_codec
import matrix_engine
from matrix_errors import (
    ColCountMismatchError,
    InvalidDimensionsError,
    MatrixError,
    RowCountMismatchError,
)

# Size limit for performance
MAX_DIMENSION = 10

SAMPLE_ROWS = 2
SAMPLE_COLS = 2
SAMPLE_MATRIX_A = "1,2; 3,4"
SAMPLE_MATRIX_B = "5,6; 7,8"


def log(message):
    print(f"[MatrixCalculator] {message}", file=sys.stderr)


def sample_inputs():
    """Return the built-in example operands."""
    return {
        'rows': SAMPLE_ROWS,
        'cols': SAMPLE_COLS,
        'matrix_a': SAMPLE_MATRIX_A,
        'matrix_b': SAMPLE_MATRIX_B,
    }


def format_size(grid):
    rows, cols = matrix_engine.shape(grid)
    return f"{rows}×{cols}"


def to_dimension(value):
    # Number fields and JSON numbers may come back as floats
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def validate_dimensions(rows=None, cols=None):
    """
    Check the configured row and column counts.

    Args:
        rows: Row count or None
        cols: Column count or None

    Raises:
        InvalidDimensionsError: If a count is not a positive integer up to MAX_DIMENSION
    """
    for name, value in (('rows', rows), ('cols', cols)):
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidDimensionsError(f"{name} must be a positive integer")
        if value > MAX_DIMENSION:
            raise InvalidDimensionsError(
                f"Matrix dimensions limited to {MAX_DIMENSION}×{MAX_DIMENSION} for performance reasons"
            )


def operand_b_dimensions(operation, a_rows, a_cols):
    """
    Expected (rows, cols) for the second operand.

    Multiplication only constrains B's row count to A's column count; addition
    and subtraction require B to have A's exact shape.
    """
    if matrix_engine.resolve_operation(operation) == 'multiply':
        return a_cols, None
    return a_rows, a_cols


def load_operand(value, expected_rows=None, expected_cols=None):
    """
    Turn an operand given as text or as a 2D array into a grid.

    Raises:
        MatrixError: If the operand fails validation
    """
    if isinstance(value, str):
        return matrix_codec.decode(value, expected_rows, expected_cols)

    rows, cols = matrix_engine.shape(value)
    if expected_rows is not None and rows != expected_rows:
        raise RowCountMismatchError(expected_rows, rows)
    if expected_cols is not None and cols != expected_cols:
        raise ColCountMismatchError(1, expected_cols, cols)
    return [[float(v) for v in row] for row in value]


def calculate(matrix_a, matrix_b, operation, rows=None, cols=None):
    """
    Decode both operands, apply the operation and encode the result.

    Args:
        matrix_a: First operand as delimited text or a 2D array
        matrix_b: Second operand as delimited text or a 2D array
        operation: 'add', 'subtract' or 'multiply' (or 'sub'/'mul')
        rows: Expected row count of A, or None
        cols: Expected column count of A, or None

    Returns:
        Dictionary containing success status and result grid, or the error
    """
    try:
        operation = matrix_engine.resolve_operation(operation)
        validate_dimensions(rows, cols)

        grid_a = load_operand(matrix_a, rows, cols)
        a_rows, a_cols = matrix_engine.shape(grid_a)
        grid_b = load_operand(matrix_b, *operand_b_dimensions(operation, a_rows, a_cols))

        result = matrix_engine.apply(operation, grid_a, grid_b)

        return {
            "success": True,
            "operation": operation,
            "result": result,
            "formatted": matrix_codec.encode(result),
            "matrix_a_size": format_size(grid_a),
            "matrix_b_size": format_size(grid_b),
            "result_size": format_size(result)
        }

    except MatrixError as e:
        return {
            "success": False,
            "error": str(e),
            "error_type": e.error_type
        }


def run_tool(operation=None):
    """Main entry point for the tools - reads JSON from stdin, outputs JSON to stdout."""
    try:
        # Read input from stdin
        input_data = json.load(sys.stdin)

        if operation is None:
            operation = input_data.get('operation')

        matrix_a = input_data.get('matrix_a')
        matrix_b = input_data.get('matrix_b')

        # Validate inputs
        if operation is None:
            result = {
                "success": False,
                "error": "Missing required parameter 'operation'",
                "error_type": "validation_error"
            }
        elif matrix_a is None or matrix_b is None:
            result = {
                "success": False,
                "error": "Missing required parameters 'matrix_a' and 'matrix_b'",
                "error_type": "validation_error"
            }
        else:
            result = calculate(
                matrix_a,
                matrix_b,
                operation,
                rows=to_dimension(input_data.get('rows')),
                cols=to_dimension(input_data.get('cols'))
            )

        # Return result
        print(json.dumps(result))

        # Exit with error code if computation failed
        if not result.get("success", False):
            log(f"{operation} failed: {result['error']}")
            sys.exit(1)

    except json.JSONDecodeError as e:
        print(json.dumps({
            "success": False,
            "error": f"Invalid JSON input: {str(e)}",
            "error_type": "input_error"
        }))
        sys.exit(1)

    except Exception as e:
        print(json.dumps({
            "success": False,
            "error": f"Unexpected error: {str(e)}",
            "error_type": "system_error"
        }))
        sys.exit(1)
