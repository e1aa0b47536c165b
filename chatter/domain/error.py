"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input (content bounds, missing required field, bad paging)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is absent or soft-deleted."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Raised when an authenticated user modifies content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class AuthenticationError(DomainError):
    """Raised when no valid identity can be established."""

    pass


class ConflictError(DomainError):
    """Raised when a unique field (email, username) is already taken."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)
