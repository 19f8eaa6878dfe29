from typing import Optional

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG


class Resolution(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_default: Optional[bool] = Field(default=None, alias="isDefault")
    self_url: Optional[str] = Field(default=None, alias="self")


class ResolutionId(BaseModel):
    model_config = MODEL_CONFIG

    id: str
