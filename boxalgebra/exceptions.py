"""Custom exceptions for boxalgebra."""

from typing import Optional


class BoxAlgebraError(Exception):
    """Base exception for all library errors.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class InvalidArgumentError(BoxAlgebraError):
    """A required input is missing, an option is unknown, or a number is out of range.

    Attributes:
        argument: Name of the offending argument (if applicable)
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message, error_code="INVALID_ARGUMENT")
        self.argument = argument

    def __str__(self) -> str:
        if self.argument:
            return f"{super().__str__()} (argument: {self.argument})"
        return super().__str__()


class SizeMismatchError(BoxAlgebraError):
    """Paired collections do not have the lengths the operation requires.

    Attributes:
        sizes: The offending collection sizes (if applicable)
    """

    def __init__(self, message: str, sizes: Optional[tuple[int, ...]] = None):
        super().__init__(message, error_code="SIZE_MISMATCH")
        self.sizes = sizes
