"""
Error taxonomy shared by the fetcher, the extractor and the orchestration layer.
"""


class PilotageError(Exception):
    """Base class for every failure raised by the pilotage pipeline."""


class ConfigurationError(PilotageError):
    """The fetcher was given a malformed URL or invalid settings.

    Retrying cannot fix this, so it is surfaced on the first attempt.
    """


class TransientFetchError(PilotageError):
    """The remote site stayed unreachable for every allowed attempt."""

    def __init__(self, attempts, cause):
        self.attempts = attempts
        self.cause = cause
        super().__init__(f"Failed to connect after {attempts} attempts: {cause}")


class StructuralError(PilotageError):
    """The movement table, or one of its essential columns, is gone."""
