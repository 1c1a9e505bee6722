"""Routing of key presses onto engine events."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pocketcalc.engine import Event, EventKind, dispatch
from pocketcalc.exceptions import InvalidInputError
from pocketcalc.state import CalculatorState

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, Event] = {
    **{d: Event(EventKind.DIGIT, d) for d in "0123456789."},
    **{op: Event(EventKind.OPERATOR, op) for op in "+-*/"},
    # Keypad glyphs
    "×": Event(EventKind.OPERATOR, "*"),
    "÷": Event(EventKind.OPERATOR, "/"),
    "−": Event(EventKind.OPERATOR, "-"),
    "Enter": Event(EventKind.EQUALS),
    "=": Event(EventKind.EQUALS),
    "Escape": Event(EventKind.CLEAR),
    "AC": Event(EventKind.CLEAR),
    "Backspace": Event(EventKind.DELETE),
    "⌫": Event(EventKind.DELETE),
}

# Single characters typed on a terminal line that stand for named keys
TEXT_ALIASES = {
    "c": "Escape",
    "C": "Escape",
    "<": "Backspace",
    "x": "*",
}


def event_for_key(key: str) -> Event | None:
    """Return the event bound to ``key``, or None for unbound keys."""
    return KEY_BINDINGS.get(key)


def apply_key(state: CalculatorState, key: str) -> CalculatorState:
    """Apply one key press; unbound keys leave the state unchanged."""
    event = event_for_key(key)
    if event is None:
        logger.debug("Ignoring unbound key %r", key)
        return state
    return dispatch(state, event)


def apply_keys(state: CalculatorState, keys: Iterable[str]) -> CalculatorState:
    for key in keys:
        state = apply_key(state, key)
    return state


def tokenize(text: str) -> list[str]:
    """
    Split a typed line such as ``"12+3="`` into key names.

    Whitespace is skipped.

    Raises:
        InvalidInputError: If a character maps to no key
    """
    keys = []
    for char in text:
        if char.isspace():
            continue
        key = TEXT_ALIASES.get(char, char)
        if key not in KEY_BINDINGS:
            raise InvalidInputError(char, "Unknown key")
        keys.append(key)
    return keys
