from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

MODEL_CONFIG = ConfigDict(
    validate_by_name=True,
    validate_by_alias=True,
    use_enum_values=True,
    arbitrary_types_allowed=True,
    extra="allow",
)


class PageBean(BaseModel, Generic[T]):
    """A page of results from the platform and agile APIs."""

    model_config = MODEL_CONFIG

    start_at: Optional[int] = Field(default=None, alias="startAt")
    max_results: Optional[int] = Field(default=None, alias="maxResults")
    total: Optional[int] = None
    is_last: Optional[bool] = Field(default=None, alias="isLast")
    next_page: Optional[str] = Field(default=None, alias="nextPage")
    self_url: Optional[str] = Field(default=None, alias="self")
    values: List[T] = Field(default_factory=list)


class PagedDto(BaseModel, Generic[T]):
    """A page of results from the service desk API."""

    model_config = MODEL_CONFIG

    start: Optional[int] = None
    limit: Optional[int] = None
    size: Optional[int] = None
    is_last_page: Optional[bool] = Field(default=None, alias="isLastPage")
    links: Optional[Dict[str, Any]] = Field(default=None, alias="_links")
    values: List[T] = Field(default_factory=list)


class EntityProperty(BaseModel):
    model_config = MODEL_CONFIG

    key: Optional[str] = None
    value: Optional[Any] = None


class PropertyKey(BaseModel):
    model_config = MODEL_CONFIG

    key: str
    self_url: Optional[str] = Field(default=None, alias="self")


class PropertyKeys(BaseModel):
    model_config = MODEL_CONFIG

    keys: List[PropertyKey] = Field(default_factory=list)


class User(BaseModel):
    model_config = MODEL_CONFIG

    account_id: Optional[str] = Field(default=None, alias="accountId")
    account_type: Optional[str] = Field(default=None, alias="accountType")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    email_address: Optional[str] = Field(default=None, alias="emailAddress")
    active: Optional[bool] = None
    time_zone: Optional[str] = Field(default=None, alias="timeZone")
    locale: Optional[str] = None
    avatar_urls: Optional[Dict[str, str]] = Field(default=None, alias="avatarUrls")
    self_url: Optional[str] = Field(default=None, alias="self")


class UserDetails(User):
    name: Optional[str] = None
    key: Optional[str] = None
