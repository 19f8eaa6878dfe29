from typing import Optional

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG


class Priority(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status_color: Optional[str] = Field(default=None, alias="statusColor")
    icon_url: Optional[str] = Field(default=None, alias="iconUrl")
    is_default: Optional[bool] = Field(default=None, alias="isDefault")
    self_url: Optional[str] = Field(default=None, alias="self")


class PriorityId(BaseModel):
    model_config = MODEL_CONFIG

    id: str
