#!/usr/bin/env python3
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
    run_tool('subtract')
