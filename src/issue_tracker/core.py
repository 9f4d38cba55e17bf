from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from issue_tracker.application.common.command import AggregateCommandHandler
from issue_tracker.application.issues.use_cases.issue_use_case import IssueUseCase
from issue_tracker.infrastructure.issues.repositories import IssueRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    issue_repository = providers.Factory(IssueRepository, db=db)

    # Command handlers (one generic handler per aggregate type)
    issue_command_handler = providers.Factory(
        AggregateCommandHandler,
        repository=issue_repository,
    )

    # Use cases
    issue_use_case = providers.Factory(
        IssueUseCase,
        issue_repository=issue_repository,
        command_handler=issue_command_handler,
    )


# Initialize container
container = Container()
