"""Domain exceptions raised by the stores and services.

Each class carries the HTTP status the API layer answers with, so the
exception handlers in ``invite_app.main`` stay a single mapping.
"""


class InvitationAppError(Exception):
    """Base exception for all invitation / RSVP errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(InvitationAppError):
    """Raised when a required field is missing or an enumerated value is invalid."""

    status_code = 400


class InvitationNotFoundError(InvitationAppError):
    """Raised when an operation needs an invitation that does not exist."""

    status_code = 404

    def __init__(self, slug: str):
        """Initialize the exception.

        Args:
            slug: The slug that matched no invitation.
        """
        self.slug = slug
        super().__init__(f"Invitation '{slug}' not found")


class DuplicateSlugError(InvitationAppError):
    """Raised when a slug collides with an existing invitation."""

    status_code = 409

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Slug '{slug}' already exists")


class SlugExhaustionError(InvitationAppError):
    """Raised when every generated slug candidate was already taken."""

    status_code = 503

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Failed to generate a unique slug after {attempts} attempts")


class StorageError(InvitationAppError):
    """Raised when the underlying database operation fails."""

    status_code = 500
