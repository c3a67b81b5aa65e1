"""Review service factory.

Provides get_query_service() / get_command_service() / set_review_services()
to swap implementations:
- Protean-backed services (repository and command handlers) by default
- FakeReviewService for development and testing
"""

from reviews.services.port import ReviewCommandService, ReviewQueryService
from reviews.services.protean_adapter import DomainReviewCommandService, RepositoryReviewQueryService

_query_service: ReviewQueryService | None = None
_command_service: ReviewCommandService | None = None


def get_query_service() -> ReviewQueryService:
    """Return the current query service. Defaults to the repository-backed one."""
    global _query_service
    if _query_service is None:
        _query_service = RepositoryReviewQueryService()
    return _query_service


def get_command_service() -> ReviewCommandService:
    """Return the current command service. Defaults to the domain-backed one."""
    global _command_service
    if _command_service is None:
        _command_service = DomainReviewCommandService()
    return _command_service


def set_review_services(query_service: ReviewQueryService, command_service: ReviewCommandService) -> None:
    """Override the active review services (useful for tests)."""
    global _query_service, _command_service
    _query_service = query_service
    _command_service = command_service


def reset_review_services() -> None:
    """Reset to the default services."""
    global _query_service, _command_service
    _query_service = None
    _command_service = None
