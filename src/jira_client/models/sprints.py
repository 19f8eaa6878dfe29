from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG


class Sprint(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[int] = None
    name: Optional[str] = None
    state: Optional[str] = None
    goal: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    complete_date: Optional[str] = Field(default=None, alias="completeDate")
    created_date: Optional[str] = Field(default=None, alias="createdDate")
    origin_board_id: Optional[int] = Field(default=None, alias="originBoardId")
    self_url: Optional[str] = Field(default=None, alias="self")


class SearchResults(BaseModel):
    """Issues of a sprint, as returned by the agile API."""

    model_config = MODEL_CONFIG

    expand: Optional[str] = None
    start_at: Optional[int] = Field(default=None, alias="startAt")
    max_results: Optional[int] = Field(default=None, alias="maxResults")
    total: Optional[int] = None
    issues: List[Dict[str, Any]] = Field(default_factory=list)
    warning_messages: List[str] = Field(default_factory=list, alias="warningMessages")
