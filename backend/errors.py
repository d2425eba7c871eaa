"""
Calculation error taxonomy.

Calculators raise these internally and convert them into an ErrorDetail on the
CalculationResult at their boundary. Callers never see them raised.
Missing measurements are not errors at all, see CalculationResult.missing.
"""

from typing import Optional


class ComputationError(Exception):
    code = "computation_error"

    def __init__(self, message: str, field: Optional[str] = None, value=None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def detail(self):
        from .schemas import ErrorDetail
        return ErrorDetail(
            code=self.code,
            message=self.message,
            field=self.field,
            value=None if self.value is None else str(self.value),
        )


class InvalidInputError(ComputationError):
    """Input is present but unusable, e.g. fullness ratio <= 0."""
    code = "invalid_input"

    @classmethod
    def from_validation(cls, error):
        """Wrap a pydantic ValidationError, naming the first offending field."""
        first = error.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        return cls(
            "Malformed calculation input: %d validation error(s)" % error.error_count(),
            field=field,
            value=first.get("input"),
        )


class CalculationFailedError(ComputationError):
    """Unexpected failure inside the arithmetic."""
    code = "calculation_failed"
