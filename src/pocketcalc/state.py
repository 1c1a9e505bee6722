"""Calculator state record and operator enumeration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    """Binary operators, keyed by the token used in keyboard input and history."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def glyph(self) -> str:
        """Symbol printed on the keypad button."""
        return _GLYPHS[self]

    def __str__(self) -> str:
        return self.value


_GLYPHS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "−",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}


@dataclass(frozen=True)
class CalculatorState:
    """
    Immutable snapshot of the calculator.

    Every engine operation returns a new instance; nothing updates a state
    in place.

    Attributes:
        current_value: Operand being entered. Never empty, ``"0"`` when
            nothing has been typed, at most one decimal point.
        previous_value: Operand captured before the pending operator,
            ``""`` when no operand is pending.
        operator: Pending binary operator, or None.
        overwrite: When set, the next digit starts a fresh operand.
        history: Display-only trace of the expression so far.
        error: Error message; set only in the error state.
    """

    current_value: str = "0"
    previous_value: str = ""
    operator: Operator | None = None
    overwrite: bool = False
    history: str = ""
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


DEFAULT_STATE = CalculatorState()
