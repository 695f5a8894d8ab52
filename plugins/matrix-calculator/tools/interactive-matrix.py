#!/usr/bin/env python3
"""
Interactive Matrix Calculator Tool

Presents a form to the user to enter the matrix dimensions, both matrices
and the operation, then computes and returns the result. Fields are
prefilled with the agent's arguments, or with a sample when none are given.

Uses the plugin form request protocol:
1. Output JSON with __ally_form_request to stdout
2. Read form response from stdin
3. Process and return result
"""
import json
import sys

try:
    from matrix_calculator import MAX_DIMENSION, calculate, log, sample_inputs, to_dimension
except ImportError as e:
    print(json.dumps({
        "success": False,
        "error": f"SymPy is not installed ({e}). Please install it using: pip install sympy"
    }))
    sys.exit(1)

FORM_FIELDS = ('rows', 'cols', 'matrix_a', 'matrix_b', 'operation')


def request_form(initial_values=None):
    """
    Request a form from the user via the plugin form protocol.

    Outputs a JSON form request to stdout and reads the response from stdin.
    """
    form_request = {
        "__ally_form_request": True,
        "schema": {
            "title": "Matrix Calculator",
            "description": "Enter two matrices as rows separated by ';' and values separated by ','.",
            "fields": [
                {
                    "name": "rows",
                    "type": "number",
                    "label": "Rows",
                    "description": "Number of rows in matrix A",
                    "default": 2,
                    "validation": {
                        "min": 1,
                        "max": MAX_DIMENSION
                    }
                },
                {
                    "name": "cols",
                    "type": "number",
                    "label": "Columns",
                    "description": "Number of columns in matrix A",
                    "default": 2,
                    "validation": {
                        "min": 1,
                        "max": MAX_DIMENSION
                    }
                },
                {
                    "name": "matrix_a",
                    "type": "string",
                    "label": "Matrix A",
                    "description": "e.g., '1,2; 3,4'",
                    "required": True
                },
                {
                    "name": "matrix_b",
                    "type": "string",
                    "label": "Matrix B",
                    "description": "e.g., '5,6; 7,8'",
                    "required": True
                },
                {
                    "name": "operation",
                    "type": "choice",
                    "label": "Operation",
                    "choices": [
                        {"value": "add", "label": "A + B"},
                        {"value": "subtract", "label": "A − B"},
                        {"value": "multiply", "label": "A × B"}
                    ],
                    "default": "add"
                }
            ]
        },
        "initialValues": initial_values or {}
    }

    # Send form request to stdout
    print(json.dumps(form_request), flush=True)

    # Read response from stdin
    response_line = sys.stdin.readline()
    if not response_line:
        raise RuntimeError("No response received from form")

    response = json.loads(response_line)

    if not response.get("__ally_form_response"):
        raise RuntimeError("Invalid form response")

    if not response.get("success"):
        if response.get("cancelled"):
            return None  # User cancelled
        raise RuntimeError(response.get("error", "Form submission failed"))

    return response.get("data", {})


def main():
    try:
        # Use readline() instead of json.load() because stdin stays open for form responses
        input_line = sys.stdin.readline()
        input_data = json.loads(input_line) if input_line.strip() else {}

        initial_values = {name: input_data[name] for name in FORM_FIELDS if input_data.get(name)}
        if not initial_values:
            initial_values = sample_inputs()

        form_data = request_form(initial_values)

        if form_data is None:
            print(json.dumps({
                "success": False,
                "error": "Calculation cancelled by user"
            }))
            sys.exit(0)

        operation = form_data.get('operation', 'add')
        response = calculate(
            form_data.get('matrix_a', ''),
            form_data.get('matrix_b', ''),
            operation,
            rows=to_dimension(form_data.get('rows')),
            cols=to_dimension(form_data.get('cols'))
        )

        if response["success"]:
            response["message"] = (
                f"{response['matrix_a_size']} {operation} {response['matrix_b_size']} "
                f"= {response['result_size']}\n{response['formatted']}"
            )
        else:
            log(f"{operation} failed: {response['error']}")
            response["message"] = response["error"]

        print(json.dumps(response))

        if not response["success"]:
            sys.exit(1)

    except json.JSONDecodeError as e:
        print(json.dumps({
            "success": False,
            "error": f"Invalid JSON: {str(e)}"
        }))
        sys.exit(1)

    except Exception as e:
        print(json.dumps({
            "success": False,
            "error": f"Error: {str(e)}"
        }))
        sys.exit(1)


if __name__ == "__main__":
    main()
