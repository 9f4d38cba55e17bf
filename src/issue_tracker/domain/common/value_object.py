"""
Base class for Value Objects.

Value Objects are immutable and defined by their attributes rather than
by identity. Subclasses are frozen dataclasses, so equality, hashing and
repr come from the dataclass machinery and compare all fields.

Example:
    @dataclass(frozen=True)
    class IssueId(EntityId):
        pass
"""


class ValueObject:
    """
    Marker base for Value Objects in the domain model.

    Subclasses must be decorated with @dataclass(frozen=True) and
    validate their fields in __post_init__.
    """

    __slots__ = ()
