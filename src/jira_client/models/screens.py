from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG


class Screen(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    scope: Optional[Dict[str, Any]] = None


class ScreenWithTab(Screen):
    tab: Optional[Dict[str, Any]] = None


class ScreenableField(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    self_url: Optional[str] = Field(default=None, alias="self")
