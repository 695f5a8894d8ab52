#!/usr/bin/env python3
"""
Multiply two matrices given as delimited text ("1,2,3; 4,5,6").

Input: {"matrix_a": "...", "matrix_b": "...", "rows": 2, "cols": 3}
rows/cols describe matrix A; matrix B must have cols rows and any number of columns.
"""
import json
import sys

try:
    from matrix_calculator import run_tool
except ImportError as e:
    print(json.dumps({
        "success": False,
        "error": f"SymPy is not installed ({e}). Please install it using: pip install sympy"
    }))
    sys.exit(1)


if __name__ == "__main__":
    run_tool('multiply')
