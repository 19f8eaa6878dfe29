from .bulk_operations import (
    BulkEditableFields,
    BulkOperationProgress,
    BulkTransitions,
    SubmittedBulkOperation,
)
from .common import EntityProperty, PagedDto, PageBean, PropertyKeys, User, UserDetails
from .errors import (
    BaseUrlMissingError,
    CredentialsMissingError,
    JiraApiError,
    JiraClientError,
    MissingPathParameterError,
    ResponseDecodeError,
    TransportError,
)
from .groups import FoundGroups, Group, GroupDetails
from .priorities import Priority, PriorityId
from .requests import (
    Approval,
    Comment,
    CsatFeedback,
    CustomerRequest,
    CustomerRequestStatus,
    CustomerTransition,
    RequestNotificationSubscription,
    SlaInformation,
)
from .resolutions import Resolution, ResolutionId
from .results import ErrorKind, JiraError, JiraResult
from .screens import Screen, ScreenableField, ScreenWithTab
from .security_schemes import (
    SecurityLevel,
    SecurityScheme,
    SecuritySchemeId,
    SecuritySchemes,
    SecuritySchemeWithProjects,
)
from .sprints import SearchResults, Sprint
from .users import FoundUsers, UserKey, UserPickerUser

__all__ = [
    "Approval",
    "BaseUrlMissingError",
    "BulkEditableFields",
    "BulkOperationProgress",
    "BulkTransitions",
    "Comment",
    "CredentialsMissingError",
    "CsatFeedback",
    "CustomerRequest",
    "CustomerRequestStatus",
    "CustomerTransition",
    "EntityProperty",
    "ErrorKind",
    "FoundGroups",
    "FoundUsers",
    "Group",
    "GroupDetails",
    "JiraApiError",
    "JiraClientError",
    "JiraError",
    "JiraResult",
    "MissingPathParameterError",
    "PageBean",
    "PagedDto",
    "Priority",
    "PriorityId",
    "PropertyKeys",
    "RequestNotificationSubscription",
    "Resolution",
    "ResolutionId",
    "ResponseDecodeError",
    "Screen",
    "ScreenWithTab",
    "ScreenableField",
    "SearchResults",
    "SecurityLevel",
    "SecurityScheme",
    "SecuritySchemeId",
    "SecuritySchemeWithProjects",
    "SecuritySchemes",
    "SlaInformation",
    "Sprint",
    "SubmittedBulkOperation",
    "TransportError",
    "User",
    "UserDetails",
    "UserKey",
    "UserPickerUser",
]
