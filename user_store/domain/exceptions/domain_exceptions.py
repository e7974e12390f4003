"""Domain layer exceptions for invalid entities and failed lookups."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions are raised when an entity invariant is broken or a
    store operation is asked to act on a record that does not exist.
    Storage failures (connectivity, timeouts) are NOT domain exceptions;
    they reach the caller as the storage library raised them.
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class BusinessRuleViolationException(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, error_code="BUSINESS_RULE_VIOLATION")


class EntityNotFoundException(DomainException):
    """Raised when a write targets an identity the store does not hold."""

    def __init__(self, entity_name: str, entity_id: int):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(
            f"{entity_name} with ID {entity_id} not found",
            error_code="ENTITY_NOT_FOUND",
        )
