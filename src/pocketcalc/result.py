"""Tagged result of evaluating a pending expression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Ok:
    """Successful evaluation carrying the rounded numeric value."""

    value: float


@dataclass(frozen=True)
class Err:
    """Failed evaluation carrying the message shown on the display."""

    message: str


EvalResult = Union[Ok, Err]
