"""Construction-time validation errors."""

from typing import Any, Iterable


class ValidationError(ValueError):
    """Raised when a Rating cannot be constructed from its input."""


class MissingRatingKeysError(ValidationError):
    """One or more canonical rating keys are absent after normalization."""

    def __init__(self, missing_keys: Iterable[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(
            f"Missing required rating keys: {', '.join(self.missing_keys)}"
        )


class InvalidRatingValueError(ValidationError):
    """A rating count is not a non-negative number."""

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        super().__init__(
            f"Invalid value for {key}: must be a non-negative number (got {value!r})"
        )


class InvalidOptionError(ValidationError):
    """A render option has the wrong type."""
