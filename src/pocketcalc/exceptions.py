"""Custom exceptions for the pocketcalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class InvalidInputError(CalculatorError):
    """Raised when an input token is not something the engine accepts."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class ConfigError(CalculatorError):
    """Raised when a setting read from the environment is unusable."""

    def __init__(self, name: str, value: Any) -> None:
        super().__init__(f"Invalid value for {name}", value)
        self.name = name
