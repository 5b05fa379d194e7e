"""Exception types raised by the advisor engine."""

from typing import Any


class DomainError(ValueError):
    """An input lies outside its physically valid range.

    Raised before any computation so a bad snapshot never turns into
    NaN/Infinity further down the pipeline.
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")


class UnknownScenarioError(KeyError):
    """Requested preset scenario does not exist."""

    def __init__(self, name: str, known):
        self.name = name
        self.known = list(known)
        super().__init__(f"Unknown scenario: {name!r}. Valid: {self.known}")

    def __str__(self) -> str:
        return self.args[0]
