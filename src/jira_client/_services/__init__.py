from .groups_service import GroupsService
from .issue_bulk_operations_service import IssueBulkOperationsService
from .issue_priorities_service import IssuePrioritiesService
from .issue_resolutions_service import IssueResolutionsService
from .issue_security_schemes_service import IssueSecuritySchemesService
from .request_service import RequestService
from .screens_service import ScreensService
from .sprint_service import SprintService
from .user_search_service import UserSearchService

__all__ = [
    "GroupsService",
    "IssueBulkOperationsService",
    "IssuePrioritiesService",
    "IssueResolutionsService",
    "IssueSecuritySchemesService",
    "RequestService",
    "ScreensService",
    "SprintService",
    "UserSearchService",
]
