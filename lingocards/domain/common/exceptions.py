"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
Use cases let them propagate to the caller, who is expected to
re-prompt the user; nothing is written when one is raised.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: empty deck name, blank word, card pointing at a missing deck.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a deck by an ID that doesn't exist in the partition.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: Rating a review card before its answer has been revealed.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class StorageUnavailableError(DomainError):
    """
    Raised by a partition store backend when the durable store cannot be reached.

    Outside a transaction the unit of work converts it into empty reads and
    dropped writes. Reads made inside a transaction let it through, and the
    mutating use cases turn it into a no-op.
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        message = f"Storage unavailable during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, {"operation": operation})
        self.operation = operation
        self.reason = reason


class CorruptStorageError(StorageUnavailableError):
    """
    Raised when a stored value is not the list it should be.

    Nothing in it can be kept on a rewrite, so writes built on it are abandoned.
    """

    def __init__(self, key: str, found: str) -> None:
        super().__init__("read", f"{key} holds a {found}, not a list")
        self.key = key
