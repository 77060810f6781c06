"""
Exception hierarchy for SkillSwap Pro.

Services raise these; the remote store router turns them into JSON
``{"error": ...}`` responses.
"""


class SkillSwapError(Exception):
    """Base exception for all SkillSwap Pro errors."""
    pass


class ValidationMissing(SkillSwapError):
    """A required field is absent or malformed."""
    pass


class SchedulingConflict(SkillSwapError):
    """The requested slot overlaps an active session of the same user."""
    pass


class SessionNotFound(SkillSwapError):
    """No session with the given identifier exists in state."""
    pass


class AuthFailure(SkillSwapError):
    """Invalid credentials or rejected registration."""
    pass


class PermissionDenied(SkillSwapError):
    """The signed-in user lacks the role required for the operation."""
    pass


class RemoteUnavailable(SkillSwapError):
    """The remote store could not be reached."""
    pass


class RemoteSyncFailure(SkillSwapError):
    """A mirror call to the remote store failed."""
    pass


class RemoteRejected(RemoteSyncFailure):
    """The remote store answered with an error body or status."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class DuplicateReview(SkillSwapError):
    """This side of the session has already submitted its review."""
    pass
