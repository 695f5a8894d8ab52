"""
Matrix Calculator Errors

Every validation failure raised by the codec, the engine and the calculator
shell derives from MatrixError. Each error carries a stable error_type tag
so tool results can report the failure kind alongside the message.
"""


class MatrixError(ValueError):
    """Base class for all matrix calculator validation errors."""

    error_type = 'matrix_error'


class EmptyInputError(MatrixError):
    error_type = 'empty_input'

    def __init__(self):
        super().__init__("Matrix is empty")


class RowCountMismatchError(MatrixError):
    error_type = 'row_count_mismatch'

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} rows, got {actual}")


class ColCountMismatchError(MatrixError):
    error_type = 'col_count_mismatch'

    def __init__(self, row, expected, actual):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row}: expected {expected} cols, got {actual}")


class InvalidNumberError(MatrixError):
    error_type = 'invalid_number'

    def __init__(self, row, token):
        self.row = row
        self.token = token
        super().__init__(f"Invalid number at row {row}")


class DimensionMismatchError(MatrixError):
    error_type = 'dimension_mismatch'

    def __init__(self, operation, shape_a, shape_b):
        self.operation = operation
        self.shape_a = shape_a
        self.shape_b = shape_b
        if operation == 'multiplication':
            message = "A.cols must equal B.rows for multiplication"
        else:
            message = f"A and B must have same dimensions for {operation}"
        super().__init__(message)


class InvalidGridError(MatrixError):
    """Raised when an operand is not a non-empty rectangular grid of numbers."""

    error_type = 'invalid_grid'


class UnknownOperationError(MatrixError):
    error_type = 'unknown_operation'

    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"Unsupported operation: {operation}")


class InvalidDimensionsError(MatrixError):
    error_type = 'invalid_dimensions'
