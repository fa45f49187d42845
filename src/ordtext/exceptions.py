"""Exceptions raised by ordtext.

The library raises a single error class for programming-contract
violations. Operations that merely fail to match (out-of-range substring
bounds, an affix longer than the value) return a defined result instead.
"""


class InvalidArgumentError(ValueError):
    """Raised when a required argument is absent or out of range.

    Subclasses ValueError so callers can handle it like any other bad
    argument.

    Attributes:
        argument: Name of the offending parameter.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        """Initialize the exception.

        Args:
            argument: Name of the offending parameter.
            message: Optional custom message describing the violation.
        """
        self.argument = argument
        super().__init__(message or f"Invalid argument: {argument}")
