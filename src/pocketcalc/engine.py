"""
State-transition engine for the calculator.

Every operation here is a pure function: it takes a ``CalculatorState`` and
returns the successor state without touching the one it was given. The engine
keeps nothing between calls; a caller that wants a running calculator holds
the latest state itself (see ``pocketcalc.core.Calculator``).

Two logical states exist. Entry is the default and accepts every operation.
Error is reached only when evaluating a pending division by zero; in Error
only ``clear`` and ``delete_digit`` act, and both reset to the default state.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from pocketcalc.exceptions import DivisionByZeroError, InvalidInputError
from pocketcalc.operations import DECIMAL_PLACES, apply_operator, format_number, round_result
from pocketcalc.result import Err, EvalResult, Ok
from pocketcalc.state import DEFAULT_STATE, CalculatorState, Operator
from pocketcalc.validators import DECIMAL_POINT, parse_operand, validate_digit, validate_operator

logger = logging.getLogger(__name__)

DIVIDE_BY_ZERO_MESSAGE = "Cannot divide by zero"


def clear() -> CalculatorState:
    """Return the default state."""
    return DEFAULT_STATE


def delete_digit(state: CalculatorState) -> CalculatorState:
    """
    Remove the last typed character of the current operand.

    In the error state this is a full reset. Right after an operator or a
    result it turns the display back into a ``"0"`` placeholder.
    """
    if state.is_error:
        return clear()
    if state.overwrite:
        return replace(state, current_value="0", overwrite=False)
    if state.current_value == "0":
        return state
    return replace(state, current_value=state.current_value[:-1] or "0")


def append_digit(state: CalculatorState, digit: str) -> CalculatorState:
    """
    Append a digit or the decimal point to the current operand.

    Args:
        state: The state to extend
        digit: ``"0"`` through ``"9"`` or ``"."``

    Returns:
        The successor state

    Raises:
        InvalidInputError: If ``digit`` is anything else
    """
    validate_digit(digit)
    if state.is_error:
        return state
    if state.overwrite:
        # A fresh operand started with the point reads as "0."
        fresh = "0." if digit == DECIMAL_POINT else digit
        return replace(state, current_value=fresh, overwrite=False)

    current = state.current_value
    if digit == "0" and current == "0":
        return state
    if digit == DECIMAL_POINT and DECIMAL_POINT in current:
        return state
    if current == "0" and digit != DECIMAL_POINT:
        return replace(state, current_value=digit)
    return replace(state, current_value=current + digit)


def choose_operator(state: CalculatorState, op: Operator | str) -> CalculatorState:
    """
    Select the pending operator.

    With no operand pending the current operand moves to ``previous_value``.
    With an operator already pending and a new right-hand operand typed, the
    pending expression is evaluated first and its result becomes the left
    operand of ``op``. Otherwise the pending operator is simply replaced.

    Raises:
        InvalidInputError: If ``op`` is not a known operator
    """
    op = validate_operator(op)
    if state.is_error:
        return state
    if state.current_value == "0" and state.previous_value == "":
        return state

    if state.previous_value == "":
        return replace(
            state,
            operator=op,
            previous_value=state.current_value,
            current_value="0",
            history=f"{state.current_value} {op.value}",
        )

    if state.operator is not None and not state.overwrite:
        result = evaluate(state)
        if isinstance(result, Err):
            logger.info("Entering error state while chaining %s: %s", op.value, result.message)
            return replace(state, error=result.message, current_value="0")
        text = format_number(result.value)
        return replace(
            state,
            operator=op,
            previous_value=text,
            current_value="0",
            history=f"{text} {op.value}",
        )

    return replace(state, operator=op, history=f"{state.previous_value} {op.value}")


def evaluate(state: CalculatorState, places: int = DECIMAL_PLACES) -> EvalResult:
    """
    Evaluate the pending expression without changing any state.

    If either operand fails to parse, or no operator is pending, the parsed
    current operand is returned unchanged. A division whose right operand is
    zero yields ``Err`` and the division is never performed.

    Args:
        state: State holding the operands and pending operator
        places: Decimal places the result is rounded to

    Returns:
        ``Ok`` with the rounded value, or ``Err`` with the display message
    """
    previous = parse_operand(state.previous_value)
    current = parse_operand(state.current_value)
    if math.isnan(previous) or math.isnan(current) or state.operator is None:
        return Ok(current)

    try:
        value = apply_operator(state.operator, previous, current)
    except DivisionByZeroError:
        return Err(DIVIDE_BY_ZERO_MESSAGE)
    return Ok(round_result(value, places))


def compute_result(state: CalculatorState) -> CalculatorState:
    """
    Apply the pending operator ("=").

    Does nothing without a complete pending expression, and nothing when the
    display already shows a result, so repeated presses are harmless. Also
    does nothing in the error state.
    """
    if state.is_error:
        return state
    if state.operator is None or state.previous_value == "" or state.overwrite:
        return state

    result = evaluate(state)
    if isinstance(result, Err):
        logger.info("Entering error state: %s", result.message)
        return replace(state, error=result.message, current_value="0", history="")

    return replace(
        state,
        overwrite=True,
        operator=None,
        previous_value="",
        current_value=format_number(result.value),
        history=f"{state.previous_value} {state.operator.value} {state.current_value} =",
    )


class EventKind(Enum):
    """Kinds of input event the engine understands."""

    DIGIT = "digit"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    DELETE = "delete"


@dataclass(frozen=True)
class Event:
    """A single input event; ``arg`` carries the digit or operator token."""

    kind: EventKind
    arg: str | None = None


def dispatch(state: CalculatorState, event: Event) -> CalculatorState:
    """
    Reduce ``state`` by one input event.

    Raises:
        InvalidInputError: If the event kind is unknown or its argument is
            not accepted by the target operation
    """
    logger.debug("Dispatching %s %r", event.kind, event.arg)
    if event.kind is EventKind.DIGIT:
        return append_digit(state, event.arg)
    if event.kind is EventKind.OPERATOR:
        return choose_operator(state, event.arg)
    if event.kind is EventKind.EQUALS:
        return compute_result(state)
    if event.kind is EventKind.CLEAR:
        return clear()
    if event.kind is EventKind.DELETE:
        return delete_digit(state)
    raise InvalidInputError(event.kind, "Unknown event kind")
