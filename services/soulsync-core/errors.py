"""Exception types shared across the service.

Only ``ValidationError`` and ``ServerError`` ever reach a caller; the
rest are recovered inside the component that raises them, or converted
to ``ServerError`` by the dispatcher.
"""


class SoulSyncError(Exception):
    """Base class for all service errors."""

    status_code = 500
    public_message = "Unexpected server error"


class ValidationError(SoulSyncError):
    """The request is unusable as sent (e.g. an empty transcript)."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.public_message = message


class ServerError(SoulSyncError):
    """Generic internal failure. Never carries internal detail to the caller."""


class UpstreamModelError(SoulSyncError):
    """The language model call failed or timed out."""


class MalformedModelOutput(SoulSyncError):
    """The model answered, but not in the required JSON structure."""


class PersistenceError(SoulSyncError):
    """The message store rejected or could not receive a write."""


class ConfigurationError(SoulSyncError):
    """Static configuration is unusable (e.g. an empty joke corpus)."""
