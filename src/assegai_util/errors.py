"""Error definitions shared by every helper module."""

# ============================================================================
#                               Base errors
# ============================================================================


class UtilError(Exception):
    """Base class for assegai-util errors."""


class ArgumentError(UtilError, TypeError):
    """Raised when a helper is called with arguments that break its contract."""


# ============================================================================
#                           Path engine errors
# ============================================================================


class InvalidPathTypeError(ArgumentError):
    """Raised when a path or path fragment is not a string."""

    def __init__(self, argument: str, value: object) -> None:
        super().__init__(
            f"Argument '{argument}' must be a str, got {type(value).__name__}."
        )
        self.argument = argument
        self.value_type = type(value)


class MissingPathFieldError(ArgumentError):
    """Raised when `format` is given parts without a required field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Path parts are missing the required field '{field}'.")
        self.field = field
