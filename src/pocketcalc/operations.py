"""Binary arithmetic and display formatting of results."""

import math
from decimal import Decimal

from pocketcalc.exceptions import DivisionByZeroError
from pocketcalc.state import Operator

# Results are rounded to this many decimal places to hide binary noise
DECIMAL_PLACES = 8

# Decimal exponents (value == 0.ddd * 10**n) printed without exponent notation:
# 1e-6 <= abs(value) < 1e21
POSITIONAL_MIN_EXPONENT = -6
POSITIONAL_MAX_EXPONENT = 21


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    The divisor is checked before dividing, so no float division by zero
    is ever attempted.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)
    return a / b


_OPERATIONS = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def apply_operator(op: Operator, a: float, b: float) -> float:
    """Apply ``op`` to the operands ``a`` and ``b``."""
    return _OPERATIONS[op](a, b)


def round_result(value: float, places: int = DECIMAL_PLACES) -> float:
    """
    Round a computed value to ``places`` decimal places.

    Uses the builtin ``round``, which rounds halves to even on the exact
    binary value. ``round_result(0.1 + 0.2) == 0.3``.
    """
    return round(value, places)


def format_number(value: float) -> str:
    """
    Render a number the way the display shows it.

    Uses the shortest digits that round-trip (those of ``repr``) and lays
    them out positionally while the decimal exponent lies in
    ``(POSITIONAL_MIN_EXPONENT, POSITIONAL_MAX_EXPONENT]``, so ``1e-05``
    prints as ``0.00001`` and ``1e20`` prints without exponent. Outside
    that range the exponent form has no zero padding: ``1e-8``, ``1e+21``.
    Negative zero prints as ``"0"``.
    """
    value = float(value)
    if value == 0:
        return "0"
    if not math.isfinite(value):
        return repr(value)

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    # value == 0.<digits> * 10**point
    point = exponent + len(digits)
    prefix = "-" if sign else ""

    if len(digits) <= point <= POSITIONAL_MAX_EXPONENT:
        return prefix + digits + "0" * (point - len(digits))
    if 0 < point <= POSITIONAL_MAX_EXPONENT:
        return prefix + digits[:point] + "." + digits[point:]
    if POSITIONAL_MIN_EXPONENT < point <= 0:
        return prefix + "0." + "0" * -point + digits

    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    power = point - 1
    return f"{prefix}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
