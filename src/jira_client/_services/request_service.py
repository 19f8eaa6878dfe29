from typing import Any, Dict, List, Literal, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, comma_separated, expect_json, expect_no_content
from .._utils.constants import SERVICE_DESK_API
from ..models import (
    Approval,
    Comment,
    CsatFeedback,
    CustomerRequest,
    CustomerRequestStatus,
    CustomerTransition,
    PagedDto,
    RequestNotificationSubscription,
    SlaInformation,
    UserDetails,
)
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions

_REQUESTS = f"{SERVICE_DESK_API}/request"
_REQUEST = f"{_REQUESTS}/{{issueIdOrKey}}"
_FEEDBACK = f"{_REQUESTS}/{{requestIdOrKey}}/feedback"

ApprovalDecision = Literal["approve", "decline"]


class RequestService(BaseService):
    """Service for Jira Service Management customer requests.

    The service desk API pages with ``start``/``limit`` and returns
    ``PagedDto`` pages. Each operation accepts exactly the statuses Jira
    documents for it: creations succeed on ``201`` only and calls that
    return nothing succeed on ``204`` only.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def create_customer_request(
        self,
        service_desk_id: str,
        request_type_id: str,
        request_field_values: Dict[str, Any],
        *,
        raise_on_behalf_of: Optional[str] = None,
        request_participants: Optional[List[str]] = None,
        channel: Optional[str] = None,
        is_adf_request: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[CustomerRequest]:
        """Raise a customer request.

        Args:
            service_desk_id (str): The service desk the request is raised in.
            request_type_id (str): The request type.
            request_field_values (Dict[str, Any]): Field values keyed by field
                ID, e.g. ``{"summary": "Request JSD help", "description": "..."}``.
            raise_on_behalf_of (Optional[str]): Account ID of the customer the
                request is raised for.
            request_participants (Optional[List[str]]): Account IDs to add as
                participants.
            channel (Optional[str]): The channel the request is raised through.
            is_adf_request (Optional[bool]): Whether text fields are in Atlassian
                Document Format.

        Returns:
            JiraResult[CustomerRequest]: The created request.

        Examples:
            ```python
            from jira_client import JiraClient

            client = JiraClient()

            result = client.requests.create_customer_request(
                "10", "25", {"summary": "Request JSD help via REST"}
            )
            if not result.success:
                print(result.status, result.error.message)
            ```
        """
        spec = self._create_customer_request_spec(
            service_desk_id,
            request_type_id,
            request_field_values,
            raise_on_behalf_of=raise_on_behalf_of,
            request_participants=request_participants,
            channel=channel,
            is_adf_request=is_adf_request,
        )
        return self.execute(spec, **options)

    async def create_customer_request_async(
        self,
        service_desk_id: str,
        request_type_id: str,
        request_field_values: Dict[str, Any],
        *,
        raise_on_behalf_of: Optional[str] = None,
        request_participants: Optional[List[str]] = None,
        channel: Optional[str] = None,
        is_adf_request: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[CustomerRequest]:
        spec = self._create_customer_request_spec(
            service_desk_id,
            request_type_id,
            request_field_values,
            raise_on_behalf_of=raise_on_behalf_of,
            request_participants=request_participants,
            channel=channel,
            is_adf_request=is_adf_request,
        )
        return await self.execute_async(spec, **options)

    def get_customer_requests(
        self,
        *,
        search_term: Optional[str] = None,
        request_ownership: Optional[List[str]] = None,
        request_status: Optional[str] = None,
        approval_status: Optional[str] = None,
        organization_id: Optional[int] = None,
        service_desk_id: Optional[int] = None,
        request_type_id: Optional[int] = None,
        expand: Optional[List[str]] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[CustomerRequest]]:
        """Return a page of the customer requests visible to the caller.

        Args:
            search_term (Optional[str]): Filter on summary and description.
            request_ownership (Optional[List[str]]): ``OWNED_REQUESTS``,
                ``PARTICIPATED_REQUESTS``, ``ORGANIZATION`` and so on.
            request_status (Optional[str]): ``CLOSED_REQUESTS``,
                ``OPEN_REQUESTS`` or ``ALL_REQUESTS``.
            approval_status (Optional[str]): ``MY_PENDING_APPROVAL`` or
                ``MY_HISTORY_APPROVAL``.
            organization_id (Optional[int]): Only requests shared with this
                organization.
            service_desk_id (Optional[int]): Only requests from this service desk.
            request_type_id (Optional[int]): Only requests of this type.
            expand (Optional[List[str]]): Entities to expand, sent comma separated.
            start (Optional[int]): Index of the first item to return.
            limit (Optional[int]): Maximum number of items per page.
        """
        spec = self._get_customer_requests_spec(
            search_term=search_term,
            request_ownership=request_ownership,
            request_status=request_status,
            approval_status=approval_status,
            organization_id=organization_id,
            service_desk_id=service_desk_id,
            request_type_id=request_type_id,
            expand=expand,
            start=start,
            limit=limit,
        )
        return self.execute(spec, **options)

    async def get_customer_requests_async(
        self,
        *,
        search_term: Optional[str] = None,
        request_ownership: Optional[List[str]] = None,
        request_status: Optional[str] = None,
        approval_status: Optional[str] = None,
        organization_id: Optional[int] = None,
        service_desk_id: Optional[int] = None,
        request_type_id: Optional[int] = None,
        expand: Optional[List[str]] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[CustomerRequest]]:
        spec = self._get_customer_requests_spec(
            search_term=search_term,
            request_ownership=request_ownership,
            request_status=request_status,
            approval_status=approval_status,
            organization_id=organization_id,
            service_desk_id=service_desk_id,
            request_type_id=request_type_id,
            expand=expand,
            start=start,
            limit=limit,
        )
        return await self.execute_async(spec, **options)

    def get_customer_request_by_id_or_key(
        self,
        issue_id_or_key: str,
        *,
        expand: Optional[List[str]] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[CustomerRequest]:
        spec = self._get_customer_request_by_id_or_key_spec(
            issue_id_or_key, expand=expand
        )
        return self.execute(spec, **options)

    async def get_customer_request_by_id_or_key_async(
        self,
        issue_id_or_key: str,
        *,
        expand: Optional[List[str]] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[CustomerRequest]:
        spec = self._get_customer_request_by_id_or_key_spec(
            issue_id_or_key, expand=expand
        )
        return await self.execute_async(spec, **options)

    def get_customer_request_status(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[CustomerRequestStatus]]:
        """Return the status history of a request, most recent first."""
        spec = self._paged_spec(
            f"{_REQUEST}/status", issue_id_or_key, CustomerRequestStatus, start, limit
        )
        return self.execute(spec, **options)

    async def get_customer_request_status_async(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[CustomerRequestStatus]]:
        spec = self._paged_spec(
            f"{_REQUEST}/status", issue_id_or_key, CustomerRequestStatus, start, limit
        )
        return await self.execute_async(spec, **options)

    def get_customer_transitions(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[CustomerTransition]]:
        """Return the transitions the customer can perform on a request."""
        spec = self._paged_spec(
            f"{_REQUEST}/transition", issue_id_or_key, CustomerTransition, start, limit
        )
        return self.execute(spec, **options)

    async def get_customer_transitions_async(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[CustomerTransition]]:
        spec = self._paged_spec(
            f"{_REQUEST}/transition", issue_id_or_key, CustomerTransition, start, limit
        )
        return await self.execute_async(spec, **options)

    def perform_customer_transition(
        self,
        issue_id_or_key: str,
        transition_id: str,
        *,
        additional_comment: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Transition a request as the customer.

        Args:
            issue_id_or_key (str): The request to transition.
            transition_id (str): One of the IDs from :meth:`get_customer_transitions`.
            additional_comment (Optional[str]): Comment added with the transition.
        """
        spec = self._perform_customer_transition_spec(
            issue_id_or_key, transition_id, additional_comment=additional_comment
        )
        return self.execute(spec, **options)

    async def perform_customer_transition_async(
        self,
        issue_id_or_key: str,
        transition_id: str,
        *,
        additional_comment: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._perform_customer_transition_spec(
            issue_id_or_key, transition_id, additional_comment=additional_comment
        )
        return await self.execute_async(spec, **options)

    def create_request_comment(
        self,
        issue_id_or_key: str,
        body: str,
        *,
        public: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Comment]:
        """Add a public or internal comment to a request."""
        spec = self._create_request_comment_spec(issue_id_or_key, body, public=public)
        return self.execute(spec, **options)

    async def create_request_comment_async(
        self,
        issue_id_or_key: str,
        body: str,
        *,
        public: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Comment]:
        spec = self._create_request_comment_spec(issue_id_or_key, body, public=public)
        return await self.execute_async(spec, **options)

    def get_request_comments(
        self,
        issue_id_or_key: str,
        *,
        public: Optional[bool] = None,
        internal: Optional[bool] = None,
        expand: Optional[List[str]] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[Comment]]:
        spec = self._get_request_comments_spec(
            issue_id_or_key,
            public=public,
            internal=internal,
            expand=expand,
            start=start,
            limit=limit,
        )
        return self.execute(spec, **options)

    async def get_request_comments_async(
        self,
        issue_id_or_key: str,
        *,
        public: Optional[bool] = None,
        internal: Optional[bool] = None,
        expand: Optional[List[str]] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[Comment]]:
        spec = self._get_request_comments_spec(
            issue_id_or_key,
            public=public,
            internal=internal,
            expand=expand,
            start=start,
            limit=limit,
        )
        return await self.execute_async(spec, **options)

    def get_request_participants(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[UserDetails]]:
        spec = self._paged_spec(
            f"{_REQUEST}/participant", issue_id_or_key, UserDetails, start, limit
        )
        return self.execute(spec, **options)

    async def get_request_participants_async(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[UserDetails]]:
        spec = self._paged_spec(
            f"{_REQUEST}/participant", issue_id_or_key, UserDetails, start, limit
        )
        return await self.execute_async(spec, **options)

    def add_request_participants(
        self,
        issue_id_or_key: str,
        account_ids: List[str],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[UserDetails]]:
        """Add participants to a request; returns the updated participants."""
        spec = self._participants_spec("POST", issue_id_or_key, account_ids)
        return self.execute(spec, **options)

    async def add_request_participants_async(
        self,
        issue_id_or_key: str,
        account_ids: List[str],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[UserDetails]]:
        spec = self._participants_spec("POST", issue_id_or_key, account_ids)
        return await self.execute_async(spec, **options)

    def remove_request_participants(
        self,
        issue_id_or_key: str,
        account_ids: List[str],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[UserDetails]]:
        """Remove participants from a request; returns the remaining ones."""
        spec = self._participants_spec("DELETE", issue_id_or_key, account_ids)
        return self.execute(spec, **options)

    async def remove_request_participants_async(
        self,
        issue_id_or_key: str,
        account_ids: List[str],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[UserDetails]]:
        spec = self._participants_spec("DELETE", issue_id_or_key, account_ids)
        return await self.execute_async(spec, **options)

    def get_approvals(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[Approval]]:
        spec = self._paged_spec(
            f"{_REQUEST}/approval", issue_id_or_key, Approval, start, limit
        )
        return self.execute(spec, **options)

    async def get_approvals_async(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[Approval]]:
        spec = self._paged_spec(
            f"{_REQUEST}/approval", issue_id_or_key, Approval, start, limit
        )
        return await self.execute_async(spec, **options)

    def answer_approval(
        self,
        issue_id_or_key: str,
        approval_id: int,
        decision: ApprovalDecision,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Approval]:
        """Approve or decline an approval as the calling user."""
        spec = self._answer_approval_spec(issue_id_or_key, approval_id, decision)
        return self.execute(spec, **options)

    async def answer_approval_async(
        self,
        issue_id_or_key: str,
        approval_id: int,
        decision: ApprovalDecision,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Approval]:
        spec = self._answer_approval_spec(issue_id_or_key, approval_id, decision)
        return await self.execute_async(spec, **options)

    def get_sla_information(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[SlaInformation]]:
        spec = self._paged_spec(
            f"{_REQUEST}/sla", issue_id_or_key, SlaInformation, start, limit
        )
        return self.execute(spec, **options)

    async def get_sla_information_async(
        self,
        issue_id_or_key: str,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PagedDto[SlaInformation]]:
        spec = self._paged_spec(
            f"{_REQUEST}/sla", issue_id_or_key, SlaInformation, start, limit
        )
        return await self.execute_async(spec, **options)

    def get_subscription_status(
        self, issue_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[RequestNotificationSubscription]:
        """Whether the calling user receives notifications for a request."""
        return self.execute(
            self._get_subscription_status_spec(issue_id_or_key), **options
        )

    async def get_subscription_status_async(
        self, issue_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[RequestNotificationSubscription]:
        return await self.execute_async(
            self._get_subscription_status_spec(issue_id_or_key), **options
        )

    def subscribe(
        self, issue_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return self.execute(self._notification_spec("PUT", issue_id_or_key), **options)

    async def subscribe_async(
        self, issue_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(
            self._notification_spec("PUT", issue_id_or_key), **options
        )

    def unsubscribe(
        self, issue_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return self.execute(
            self._notification_spec("DELETE", issue_id_or_key), **options
        )

    async def unsubscribe_async(
        self, issue_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(
            self._notification_spec("DELETE", issue_id_or_key), **options
        )

    def get_feedback(
        self, request_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[CsatFeedback]:
        """Return the customer satisfaction feedback of a request.

        Experimental in Jira; the ``X-ExperimentalApi`` opt-in header is sent.
        """
        return self.execute(self._get_feedback_spec(request_id_or_key), **options)

    async def get_feedback_async(
        self, request_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[CsatFeedback]:
        return await self.execute_async(
            self._get_feedback_spec(request_id_or_key), **options
        )

    def post_feedback(
        self,
        request_id_or_key: str,
        rating: int,
        *,
        comment: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[CsatFeedback]:
        """Leave customer satisfaction feedback on a request (experimental).

        Args:
            request_id_or_key (str): The request to rate.
            rating (int): A rating from 1 to 5.
            comment (Optional[str]): Free text to go with the rating.
        """
        spec = self._post_feedback_spec(request_id_or_key, rating, comment=comment)
        return self.execute(spec, **options)

    async def post_feedback_async(
        self,
        request_id_or_key: str,
        rating: int,
        *,
        comment: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[CsatFeedback]:
        spec = self._post_feedback_spec(request_id_or_key, rating, comment=comment)
        return await self.execute_async(spec, **options)

    def delete_feedback(
        self, request_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return self.execute(self._delete_feedback_spec(request_id_or_key), **options)

    async def delete_feedback_async(
        self, request_id_or_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(
            self._delete_feedback_spec(request_id_or_key), **options
        )

    def _create_customer_request_spec(
        self,
        service_desk_id: str,
        request_type_id: str,
        request_field_values: Dict[str, Any],
        *,
        raise_on_behalf_of: Optional[str],
        request_participants: Optional[List[str]],
        channel: Optional[str],
        is_adf_request: Optional[bool],
    ) -> RequestSpec:
        body: Dict[str, Any] = {
            "serviceDeskId": service_desk_id,
            "requestTypeId": request_type_id,
            "requestFieldValues": request_field_values,
        }
        if raise_on_behalf_of is not None:
            body["raiseOnBehalfOf"] = raise_on_behalf_of
        if request_participants is not None:
            body["requestParticipants"] = request_participants
        if channel is not None:
            body["channel"] = channel
        if is_adf_request is not None:
            body["isAdfRequest"] = is_adf_request
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(_REQUESTS),
            json=body,
            expectations=expect_json(CustomerRequest, statuses=(201,)),
        )

    def _get_customer_requests_spec(
        self,
        *,
        search_term: Optional[str],
        request_ownership: Optional[List[str]],
        request_status: Optional[str],
        approval_status: Optional[str],
        organization_id: Optional[int],
        service_desk_id: Optional[int],
        request_type_id: Optional[int],
        expand: Optional[List[str]],
        start: Optional[int],
        limit: Optional[int],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(_REQUESTS),
            params={
                "searchTerm": search_term,
                "requestOwnership": request_ownership,
                "requestStatus": request_status,
                "approvalStatus": approval_status,
                "organizationId": organization_id,
                "serviceDeskId": service_desk_id,
                "requestTypeId": request_type_id,
                "expand": comma_separated(expand),
                "start": start,
                "limit": limit,
            },
            expectations=expect_json(PagedDto[CustomerRequest], statuses=(200,)),
        )

    def _get_customer_request_by_id_or_key_spec(
        self, issue_id_or_key: str, *, expand: Optional[List[str]]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(_REQUEST),
            path_params={"issueIdOrKey": issue_id_or_key},
            params={"expand": comma_separated(expand)},
            expectations=expect_json(CustomerRequest, statuses=(200,)),
        )

    def _paged_spec(
        self,
        template: str,
        issue_id_or_key: str,
        model: Any,
        start: Optional[int],
        limit: Optional[int],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(template),
            path_params={"issueIdOrKey": issue_id_or_key},
            params={"start": start, "limit": limit},
            expectations=expect_json(PagedDto[model], statuses=(200,)),
        )

    def _perform_customer_transition_spec(
        self,
        issue_id_or_key: str,
        transition_id: str,
        *,
        additional_comment: Optional[str],
    ) -> RequestSpec:
        body: Dict[str, Any] = {"id": transition_id}
        if additional_comment is not None:
            body["additionalComment"] = {"body": additional_comment}
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{_REQUEST}/transition"),
            path_params={"issueIdOrKey": issue_id_or_key},
            json=body,
            expectations=expect_no_content(statuses=(204,)),
        )

    def _create_request_comment_spec(
        self, issue_id_or_key: str, body: str, *, public: Optional[bool]
    ) -> RequestSpec:
        payload: Dict[str, Any] = {"body": body}
        if public is not None:
            payload["public"] = public
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{_REQUEST}/comment"),
            path_params={"issueIdOrKey": issue_id_or_key},
            json=payload,
            expectations=expect_json(Comment, statuses=(201,)),
        )

    def _get_request_comments_spec(
        self,
        issue_id_or_key: str,
        *,
        public: Optional[bool],
        internal: Optional[bool],
        expand: Optional[List[str]],
        start: Optional[int],
        limit: Optional[int],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_REQUEST}/comment"),
            path_params={"issueIdOrKey": issue_id_or_key},
            params={
                "public": public,
                "internal": internal,
                "expand": comma_separated(expand),
                "start": start,
                "limit": limit,
            },
            expectations=expect_json(PagedDto[Comment], statuses=(200,)),
        )

    def _participants_spec(
        self, method: Literal["POST", "DELETE"], issue_id_or_key: str, account_ids: List[str]
    ) -> RequestSpec:
        return RequestSpec(
            method=method,
            endpoint=Endpoint(f"{_REQUEST}/participant"),
            path_params={"issueIdOrKey": issue_id_or_key},
            json={"accountIds": account_ids},
            expectations=expect_json(PagedDto[UserDetails], statuses=(200,)),
        )

    def _answer_approval_spec(
        self, issue_id_or_key: str, approval_id: int, decision: ApprovalDecision
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{_REQUEST}/approval/{{approvalId}}"),
            path_params={"issueIdOrKey": issue_id_or_key, "approvalId": approval_id},
            json={"decision": decision},
            expectations=expect_json(Approval, statuses=(200,)),
        )

    def _get_subscription_status_spec(self, issue_id_or_key: str) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_REQUEST}/notification"),
            path_params={"issueIdOrKey": issue_id_or_key},
            expectations=expect_json(RequestNotificationSubscription, statuses=(200,)),
        )

    def _notification_spec(
        self, method: Literal["PUT", "DELETE"], issue_id_or_key: str
    ) -> RequestSpec:
        return RequestSpec(
            method=method,
            endpoint=Endpoint(f"{_REQUEST}/notification"),
            path_params={"issueIdOrKey": issue_id_or_key},
            expectations=expect_no_content(statuses=(204,)),
        )

    def _get_feedback_spec(self, request_id_or_key: str) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(_FEEDBACK),
            path_params={"requestIdOrKey": request_id_or_key},
            expectations=expect_json(CsatFeedback, statuses=(200,)),
            is_experimental=True,
        )

    def _post_feedback_spec(
        self, request_id_or_key: str, rating: int, *, comment: Optional[str]
    ) -> RequestSpec:
        body: Dict[str, Any] = {"type": "csat", "rating": rating}
        if comment is not None:
            body["comment"] = {"body": comment}
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(_FEEDBACK),
            path_params={"requestIdOrKey": request_id_or_key},
            json=body,
            expectations=expect_json(CsatFeedback, statuses=(201,)),
            is_experimental=True,
        )

    def _delete_feedback_spec(self, request_id_or_key: str) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(_FEEDBACK),
            path_params={"requestIdOrKey": request_id_or_key},
            expectations=expect_no_content(statuses=(204,)),
            is_experimental=True,
        )
