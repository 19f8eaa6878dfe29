from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG, UserDetails


class ServiceDeskDate(BaseModel):
    model_config = MODEL_CONFIG

    epoch_millis: Optional[int] = Field(default=None, alias="epochMillis")
    friendly: Optional[str] = None
    iso8601: Optional[str] = None
    jira: Optional[str] = None


class CustomerRequestStatus(BaseModel):
    model_config = MODEL_CONFIG

    status: Optional[str] = None
    status_category: Optional[str] = Field(default=None, alias="statusCategory")
    status_date: Optional[ServiceDeskDate] = Field(default=None, alias="statusDate")


class CustomerRequest(BaseModel):
    model_config = MODEL_CONFIG

    issue_id: Optional[str] = Field(default=None, alias="issueId")
    issue_key: Optional[str] = Field(default=None, alias="issueKey")
    request_type_id: Optional[str] = Field(default=None, alias="requestTypeId")
    service_desk_id: Optional[str] = Field(default=None, alias="serviceDeskId")
    created_date: Optional[ServiceDeskDate] = Field(default=None, alias="createdDate")
    reporter: Optional[UserDetails] = None
    request_field_values: List[Dict[str, Any]] = Field(
        default_factory=list, alias="requestFieldValues"
    )
    current_status: Optional[CustomerRequestStatus] = Field(
        default=None, alias="currentStatus"
    )
    links: Optional[Dict[str, Any]] = Field(default=None, alias="_links")


class Comment(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[str] = None
    body: Optional[str] = None
    public: Optional[bool] = None
    author: Optional[UserDetails] = None
    created: Optional[ServiceDeskDate] = None


class Approval(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    final_decision: Optional[str] = Field(default=None, alias="finalDecision")
    can_answer_approval: Optional[bool] = Field(default=None, alias="canAnswerApproval")
    approvers: List[Dict[str, Any]] = Field(default_factory=list)
    created_date: Optional[ServiceDeskDate] = Field(default=None, alias="createdDate")
    completed_date: Optional[ServiceDeskDate] = Field(
        default=None, alias="completedDate"
    )


class CustomerTransition(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None


class SlaInformation(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    ongoing_cycle: Optional[Dict[str, Any]] = Field(default=None, alias="ongoingCycle")
    completed_cycles: List[Dict[str, Any]] = Field(
        default_factory=list, alias="completedCycles"
    )


class RequestNotificationSubscription(BaseModel):
    model_config = MODEL_CONFIG

    subscribed: Optional[bool] = None


class CsatFeedback(BaseModel):
    model_config = MODEL_CONFIG

    type: Optional[str] = None
    rating: Optional[int] = None
    comment: Optional[Dict[str, Any]] = None
