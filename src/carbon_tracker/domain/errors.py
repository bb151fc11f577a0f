"""Domain errors for the carbon tracker."""


class InvalidInputError(ValueError):
    """Raised when a proposed entry field is outside its allowed domain."""

    def __init__(self, field_name: str, value: float) -> None:
        super().__init__(
            f"{field_name} must be a finite non-negative number, got {value}"
        )
        self.field_name = field_name
        self.value = value


class LogStorageError(RuntimeError):
    """Raised when storage cannot be opened, created or written."""
