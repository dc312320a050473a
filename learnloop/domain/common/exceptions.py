"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
Every error carries a stable machine-readable ``code`` so callers can
translate it into a user-facing result without parsing messages.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Raised for operations that are illegal given the current state,
    e.g. deducting a heart when none are left (``NO_HEARTS``).
    """

    default_code = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"[{self.code}] {self.message} - {self.details}"
        return f"[{self.code}] {self.message}"


class ValidationError(DomainError):
    """
    Raised when a value violates its invariants on construction or mutation.

    Example: negative XP, hearts outside 0..5, a non-integer interval.
    """

    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details=details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: submitting an answer for a lesson that was never started.
    """

    default_code = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: object, code: str | None = None) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, code, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a use-case level business rule is violated.

    Example: completing a lesson below the minimum passing accuracy.
    """

    default_code = "BUSINESS_RULE_VIOLATION"

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, rule, {"rule": rule})
        self.rule = rule


class ConcurrencyError(DomainError):
    """
    Raised when an aggregate was modified by another writer since it was loaded.

    Repositories raise it on an optimistic version mismatch; the caller
    may re-load the aggregate and re-apply the operation.
    """

    default_code = "CONCURRENT_MODIFICATION"

    def __init__(self, aggregate: str, expected_version: int, actual_version: int) -> None:
        message = (
            f"{aggregate} was modified concurrently "
            f"(expected version {expected_version}, found {actual_version})"
        )
        super().__init__(
            message,
            details={
                "aggregate": aggregate,
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
        )
        self.aggregate = aggregate
        self.expected_version = expected_version
        self.actual_version = actual_version
