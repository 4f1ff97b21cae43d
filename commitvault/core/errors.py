"""
Exception types for the commitment store.
"""


class CommitmentError(Exception):
    """Base for errors returned to the invoker of a store operation."""

    code = "commitment-error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.code)
        self.message = message or self.code


class EntityConflict(CommitmentError):
    """Raised when a Vault entry already exists for the target identity."""

    code = "entity-conflict"


class InvalidParameters(CommitmentError):
    """Raised when an input fails a validation rule."""

    code = "invalid-parameters"


class ResourceMissing(CommitmentError):
    """Raised when a required Vault (or satellite) entry is absent."""

    code = "resource-missing"


class DeterminismError(Exception):
    """Raised when the height counter moves backwards."""
    pass


class BackendError(Exception):
    """Raised when the underlying record backend fails."""
    pass


class ConfigError(Exception):
    """Raised when environment configuration is invalid."""
    pass


class UnknownOperation(Exception):
    """Raised when the host is asked to dispatch an unregistered operation."""
    pass
