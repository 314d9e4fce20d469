"""Exception hierarchy for POST policy generation."""

from typing import Sequence


class PolicyError(Exception):
    """Base class for every error raised while generating a POST policy."""


class InvalidOption(PolicyError, ValueError):
    """
    A caller-supplied option is missing, empty, or of the wrong type.

    Attributes:
        field: Option name (snake_case, e.g. "bucket")
        reason: Human-readable expectation that was not met
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid option '{field}': {reason}")


class InvalidOptions(InvalidOption):
    """
    Several options failed validation at once.

    ``field`` and ``reason`` mirror the first violation so callers that only
    look at a single field keep working; ``errors`` holds all of them.
    """

    def __init__(self, errors: Sequence[InvalidOption]):
        if not errors:
            raise ValueError("InvalidOptions requires at least one error")
        self.errors = list(errors)
        first = self.errors[0]
        self.field = first.field
        self.reason = first.reason
        summary = "; ".join(f"{e.field}: {e.reason}" for e in self.errors)
        PolicyError.__init__(self, f"Invalid options ({len(self.errors)}): {summary}")

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


class ClockError(PolicyError):
    """The wall clock could not be read. Not recoverable."""


class EncodingError(PolicyError):
    """The policy document could not be serialized."""
