"""simplecalc — interactive two-operand console calculator.

Reads a number, an operator (+, -, *, /) and a second number, prints the
result or an error, then asks whether to go again.

Usage:
    python -m simplecalc        # Start the calculator
    python -m simplecalc -v     # Same, with a diagnostic trace on stderr
"""
