"""Application error types."""


class WellnessTrackerError(Exception):
    """Base class for application errors."""


class ValidationError(WellnessTrackerError):
    """Raised when user input fails validation."""


class AuthenticationError(WellnessTrackerError):
    """Raised when a request cannot be tied to a user."""


class RepositoryError(WellnessTrackerError):
    """Raised when the data store does not return an expected row."""
