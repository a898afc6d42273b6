"""Domain and repository errors"""


class DomainError(Exception):
    """Base class for errors raised by the domain and repository layers"""


class ValidationError(DomainError):
    """Input failed a field constraint before reaching storage"""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Validation error on '{field}': {reason}")


class RepositoryError(DomainError):
    """Base class for storage errors"""


class NotFoundError(RepositoryError):
    """Entity with the given ID does not exist"""

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__(f"NotFound, id is {entity_id}")


class UnexpectedError(RepositoryError):
    """Storage or I/O failure not otherwise classified"""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"Unexpected Error: [{description}]")
