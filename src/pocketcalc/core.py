"""Calculator class holding the latest state between key presses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pocketcalc import engine
from pocketcalc.display import Display, present
from pocketcalc.keys import apply_key
from pocketcalc.state import DEFAULT_STATE, CalculatorState, Operator

if TYPE_CHECKING:
    from collections.abc import Iterable


class Calculator:
    """
    A stateful shell around the pure engine.

    Each method replaces the held state with the engine's successor and
    returns self, so presses chain.

    Example:
        >>> calc = Calculator()
        >>> calc.digit("2").operator("+").digit("3").equals().state.current_value
        '5'
        >>> calc.display.history
        '2 + 3 ='
    """

    def __init__(self, state: CalculatorState = DEFAULT_STATE) -> None:
        self._state = state

    @property
    def state(self) -> CalculatorState:
        """Most recently produced state."""
        return self._state

    @property
    def display(self) -> Display:
        """Display projection of the current state."""
        return present(self._state)

    def digit(self, digit: str) -> Calculator:
        """Type a digit or the decimal point."""
        self._state = engine.append_digit(self._state, digit)
        return self

    def operator(self, op: Operator | str) -> Calculator:
        """Choose the pending operator."""
        self._state = engine.choose_operator(self._state, op)
        return self

    def equals(self) -> Calculator:
        self._state = engine.compute_result(self._state)
        return self

    def delete(self) -> Calculator:
        self._state = engine.delete_digit(self._state)
        return self

    def clear(self) -> Calculator:
        self._state = engine.clear()
        return self

    def press(self, key: str) -> Calculator:
        """Press a named key such as ``"7"``, ``"Enter"`` or ``"Escape"``."""
        self._state = apply_key(self._state, key)
        return self

    def press_all(self, keys: Iterable[str]) -> Calculator:
        for key in keys:
            self.press(key)
        return self

    def __repr__(self) -> str:
        return f"Calculator(display={self.display.primary!r}, history={self._state.history!r})"
