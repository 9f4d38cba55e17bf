from .domain_event_mapper import ISSUE_EVENT_TYPES, DomainEventMapper

__all__ = [
    "ISSUE_EVENT_TYPES",
    "DomainEventMapper",
]
