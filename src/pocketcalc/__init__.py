"""
Four-function pocket calculator.

The heart of the package is a pure state-transition engine:
- Immutable ``CalculatorState`` snapshots
- Operator chaining with a pending left operand
- Division by zero contained in state as an error display
- Results rounded to hide floating-point noise
"""

from pocketcalc.core import Calculator
from pocketcalc.display import Display, present
from pocketcalc.engine import (
    DIVIDE_BY_ZERO_MESSAGE,
    Event,
    EventKind,
    append_digit,
    choose_operator,
    clear,
    compute_result,
    delete_digit,
    dispatch,
    evaluate,
)
from pocketcalc.exceptions import (
    CalculatorError,
    ConfigError,
    DivisionByZeroError,
    InvalidInputError,
)
from pocketcalc.keys import apply_key, apply_keys, event_for_key, tokenize
from pocketcalc.operations import (
    add,
    apply_operator,
    divide,
    format_number,
    multiply,
    round_result,
    subtract,
)
from pocketcalc.result import Err, EvalResult, Ok
from pocketcalc.state import DEFAULT_STATE, CalculatorState, Operator
from pocketcalc.validators import parse_operand, validate_digit, validate_operator

__all__ = [
    "DEFAULT_STATE",
    "DIVIDE_BY_ZERO_MESSAGE",
    "Calculator",
    "CalculatorError",
    "CalculatorState",
    "ConfigError",
    "Display",
    "DivisionByZeroError",
    "Err",
    "EvalResult",
    "Event",
    "EventKind",
    "InvalidInputError",
    "Ok",
    "Operator",
    "add",
    "append_digit",
    "apply_key",
    "apply_keys",
    "apply_operator",
    "choose_operator",
    "clear",
    "compute_result",
    "delete_digit",
    "dispatch",
    "divide",
    "evaluate",
    "event_for_key",
    "format_number",
    "multiply",
    "parse_operand",
    "present",
    "round_result",
    "subtract",
    "tokenize",
    "validate_digit",
    "validate_operator",
]

__version__ = "0.1.0"
