"""Core exception types shared across layers."""


class SkillError(Exception):
    """Base error for failures surfaced to the voice platform."""


class InvalidIntentError(SkillError):
    """Raised when an intent request names an intent this skill does not handle."""

    def __init__(self, message: str = "Invalid Intent") -> None:
        super().__init__(message)


class UnsupportedRequestTypeError(SkillError):
    """Raised when the platform sends a request type the skill does not understand."""


__all__ = [
    "SkillError",
    "InvalidIntentError",
    "UnsupportedRequestTypeError",
]
