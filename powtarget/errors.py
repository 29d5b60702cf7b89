"""Exception classes for difficulty/target conversions."""

from typing import Any, Optional


class TargetConversionError(ValueError):
    """Base exception for rejected conversion input."""

    def __init__(self, message: str, value: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.value = value

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message} (got {self.value!r})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', value={self.value!r})"


class InvalidDifficulty(TargetConversionError):
    """Difficulty is negative, NaN, infinite or too small to yield a 256-bit target."""
    pass


class InvalidTargetFormat(TargetConversionError):
    """Target string is empty, not hexadecimal or wider than 256 bits."""
    pass


class DivisionByZero(TargetConversionError, ZeroDivisionError):
    """Target parses to zero."""
    pass


class BadHexCharacter(InvalidTargetFormat):
    """Hex decoding hit a character outside the hexadecimal alphabet."""

    def __init__(self, message: str, value: Optional[Any] = None, char: Optional[str] = None):
        super().__init__(message, value)
        self.char = char
