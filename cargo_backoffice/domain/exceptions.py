"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, field: str = "id"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type} with {field} '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidRequestError(Exception):
    """Raised when caller input is rejected before any storage access."""


class ConfigurationError(Exception):
    """Raised when required reference data is missing; a setup defect rather than a user error."""

    def __init__(self, message: str, status_type: str | None = None):
        self.status_type = status_type
        super().__init__(message)


class StorageError(Exception):
    """Raised when the underlying store fails.

    ``operation`` names the repository call (e.g. ``cargo_manifest.insert``)
    so callers can tell a failed read from a failed write.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")
