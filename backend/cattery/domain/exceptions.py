"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ValidationFailedError(Exception):
    """Raised when caller input is missing or malformed."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AuthenticationError(Exception):
    """Raised when no valid identity backs the request."""

    def __init__(self, message: str = "Authentication required. Please log in."):
        self.message = message
        super().__init__(message)


class PermissionDeniedError(Exception):
    """Raised when an authenticated identity may not touch a record."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"You do not have permission to modify {entity_type} with id '{entity_id}'"
        )


class ConcurrentModificationError(Exception):
    """Raised when a record keeps changing underneath a guarded write."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' was modified concurrently")
