"""Domain exceptions for vsbridge.

These exceptions represent rule violations at the domain level. They are
caught at the application boundary (orchestrator, CLI) and logged; the
bridge never surfaces them to its caller.
"""


class BridgeDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: Human-readable error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class UnknownVariantError(BridgeDomainError):
    """Raised when a variant year has no profile."""

    pass


class InvalidConfigError(BridgeDomainError):
    """Raised when configuration values fail validation."""

    pass
