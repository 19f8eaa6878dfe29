from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG


class SubmittedBulkOperation(BaseModel):
    model_config = MODEL_CONFIG

    task_id: Optional[str] = Field(default=None, alias="taskId")


class BulkOperationProgress(BaseModel):
    model_config = MODEL_CONFIG

    task_id: Optional[str] = Field(default=None, alias="taskId")
    status: Optional[str] = None
    progress_percent: Optional[int] = Field(default=None, alias="progressPercent")
    submitted_by: Optional[Dict[str, Any]] = Field(default=None, alias="submittedBy")
    created: Optional[str] = None
    started: Optional[str] = None
    updated: Optional[str] = None
    total_issue_count: Optional[int] = Field(default=None, alias="totalIssueCount")
    processed_accessible_issues: List[int] = Field(
        default_factory=list, alias="processedAccessibleIssues"
    )
    failed_accessible_issues: Dict[str, List[str]] = Field(
        default_factory=dict, alias="failedAccessibleIssues"
    )
    invalid_or_inaccessible_issue_count: Optional[int] = Field(
        default=None, alias="invalidOrInaccessibleIssueCount"
    )

    @property
    def is_finished(self) -> bool:
        return self.status in ("COMPLETE", "FAILED", "CANCELLED", "DEAD")


class BulkEditableFields(BaseModel):
    model_config = MODEL_CONFIG

    fields: List[Dict[str, Any]] = Field(default_factory=list)
    starting_after: Optional[str] = Field(default=None, alias="startingAfter")
    ending_before: Optional[str] = Field(default=None, alias="endingBefore")


class BulkTransitions(BaseModel):
    model_config = MODEL_CONFIG

    available_transitions: List[Dict[str, Any]] = Field(
        default_factory=list, alias="availableTransitions"
    )
    starting_after: Optional[str] = Field(default=None, alias="startingAfter")
    ending_before: Optional[str] = Field(default=None, alias="endingBefore")
