from typing import List, Optional

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG


class UserPickerUser(BaseModel):
    model_config = MODEL_CONFIG

    account_id: Optional[str] = Field(default=None, alias="accountId")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    html: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, alias="avatarUrl")


class FoundUsers(BaseModel):
    model_config = MODEL_CONFIG

    header: Optional[str] = None
    total: Optional[int] = None
    users: List[UserPickerUser] = Field(default_factory=list)


class UserKey(BaseModel):
    model_config = MODEL_CONFIG

    account_id: Optional[str] = Field(default=None, alias="accountId")
    key: Optional[str] = None
