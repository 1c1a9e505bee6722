"""Input token validation and operand parsing."""

from pocketcalc.exceptions import InvalidInputError
from pocketcalc.state import Operator

DIGITS = frozenset("0123456789")
DECIMAL_POINT = "."


def validate_digit(token: str) -> str:
    """
    Validate a single digit key.

    Args:
        token: A character from ``0`` to ``9`` or the decimal point

    Returns:
        The validated token

    Raises:
        InvalidInputError: If the token is not a digit or decimal point
    """
    if not isinstance(token, str):
        raise InvalidInputError(token, f"Expected str, got {type(token).__name__}")
    if token not in DIGITS and token != DECIMAL_POINT:
        raise InvalidInputError(token, "Expected a digit or decimal point")
    return token


def validate_operator(token: Operator | str) -> Operator:
    """
    Validate an operator given either as an ``Operator`` or its token.

    Raises:
        InvalidInputError: If the token names no known operator
    """
    if isinstance(token, Operator):
        return token
    try:
        return Operator(token)
    except ValueError as e:
        raise InvalidInputError(token, "Unknown operator") from e


def parse_operand(text: str) -> float:
    """
    Parse operand text into a float.

    A bare decimal point reads as zero and a trailing point is ignored, so
    ``"."`` gives ``0.0`` and ``"5."`` gives ``5.0``. Empty or malformed
    text gives NaN rather than raising; callers check with ``math.isnan``.
    """
    if text == DECIMAL_POINT:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return float("nan")
