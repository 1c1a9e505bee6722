"""What the display shows for a given state."""

from __future__ import annotations

from dataclasses import dataclass

from pocketcalc.state import CalculatorState


@dataclass(frozen=True)
class Display:
    """The two display lines plus the flag that switches on error styling."""

    history: str
    primary: str
    is_error: bool


def present(state: CalculatorState) -> Display:
    """Project a state onto the display: the error replaces the operand."""
    return Display(
        history=state.history,
        primary=state.error or state.current_value,
        is_error=state.is_error,
    )
