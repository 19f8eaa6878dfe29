from typing import List, Optional

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG


class Group(BaseModel):
    model_config = MODEL_CONFIG

    name: Optional[str] = None
    group_id: Optional[str] = Field(default=None, alias="groupId")
    self_url: Optional[str] = Field(default=None, alias="self")


class GroupDetails(BaseModel):
    model_config = MODEL_CONFIG

    name: Optional[str] = None
    group_id: Optional[str] = Field(default=None, alias="groupId")


class GroupLabel(BaseModel):
    model_config = MODEL_CONFIG

    text: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None


class FoundGroup(BaseModel):
    model_config = MODEL_CONFIG

    name: Optional[str] = None
    group_id: Optional[str] = Field(default=None, alias="groupId")
    html: Optional[str] = None
    labels: List[GroupLabel] = Field(default_factory=list)


class FoundGroups(BaseModel):
    model_config = MODEL_CONFIG

    header: Optional[str] = None
    total: Optional[int] = None
    groups: List[FoundGroup] = Field(default_factory=list)
