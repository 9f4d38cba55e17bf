"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or persisted history cannot be trusted.
They should be caught and translated to appropriate responses
by the infrastructure layer.

Note that a command whose preconditions are not met is not an error:
it simply produces no events.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
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
    Raised when input cannot be turned into a meaningful operation.

    Example: Opening an issue with a blank title.
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

    Example: Loading an issue by an ID that has no recorded events.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConcurrencyError(DomainError):
    """
    Raised when an aggregate was modified by someone else since it was loaded.

    The stored version no longer matches the version the aggregate
    was loaded at, so its pending events cannot be appended.
    """

    def __init__(
        self, aggregate_id: object, expected_version: int, actual_version: int | None = None
    ) -> None:
        message = f"Aggregate {aggregate_id} was modified concurrently"
        details: dict[str, object] = {
            "aggregate_id": str(aggregate_id),
            "expected_version": expected_version,
        }
        if actual_version is not None:
            details["actual_version"] = actual_version
        super().__init__(message, details)
        self.aggregate_id = aggregate_id
        self.expected_version = expected_version
        self.actual_version = actual_version


class UnknownEventTypeError(DomainError):
    """Raised when a stored event names a type that is not registered."""

    def __init__(self, event_type: str) -> None:
        super().__init__(f"Unknown event type: {event_type}", {"event_type": event_type})
        self.event_type = event_type


class AggregateMismatchError(DomainError):
    """
    Raised when a command is executed on an aggregate it does not target.

    Example: Executing CommentIssue(issue_a.id, ...) on issue_b.
    """

    def __init__(self, command_type: str, target_id: object, aggregate_id: object) -> None:
        message = f"{command_type} targets {target_id}, not {aggregate_id}"
        super().__init__(
            message,
            {
                "command_type": command_type,
                "target_id": str(target_id),
                "aggregate_id": str(aggregate_id),
            },
        )
        self.command_type = command_type
        self.target_id = target_id
        self.aggregate_id = aggregate_id
