"""
Exception classes for the member service.

Validation errors are raised by the request mappers before any domain call;
lookup and duplicate errors are raised by the member service and propagate
to the HTTP layer unchanged.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when a request payload fails validation"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when an entity id does not resolve to a stored record"""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} {entity_id} not found",
            {"entity": entity, "id": entity_id},
        )


class DuplicateMemberError(ApplicationError):
    """Raised when joining a member whose name is already taken"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Member '{name}' already exists", {"name": name})
