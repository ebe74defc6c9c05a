"""Exceptions raised while turning raw inputs into scenarios."""

from __future__ import annotations


class AffordabilityError(ValueError):
    """Base class for scenario resolution failures."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class MissingRequiredInput(AffordabilityError):
    """A mandatory input was not supplied."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing required input: {field}")


class InvalidInputFormat(AffordabilityError):
    """A supplied value could not be parsed as the expected kind."""

    def __init__(self, field: str, value: str, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(field, f"{field} must be {expected}, got {value!r}")


class InvalidScenario(AffordabilityError):
    """A parsed scenario violates a cross-field constraint."""
