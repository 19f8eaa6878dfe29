from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .common import MODEL_CONFIG


class SecurityLevel(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_default: Optional[bool] = Field(default=None, alias="isDefault")
    issue_security_scheme_id: Optional[str] = Field(
        default=None, alias="issueSecuritySchemeId"
    )
    self_url: Optional[str] = Field(default=None, alias="self")


class SecurityScheme(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    description: Optional[str] = None
    default_security_level_id: Optional[Union[int, str]] = Field(
        default=None, alias="defaultSecurityLevelId"
    )
    levels: List[SecurityLevel] = Field(default_factory=list)
    self_url: Optional[str] = Field(default=None, alias="self")


class SecuritySchemes(BaseModel):
    model_config = MODEL_CONFIG

    issue_security_schemes: List[SecurityScheme] = Field(
        default_factory=list, alias="issueSecuritySchemes"
    )


class SecuritySchemeWithProjects(BaseModel):
    model_config = MODEL_CONFIG

    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    description: Optional[str] = None
    default_level: Optional[Union[int, str]] = Field(default=None, alias="defaultLevel")
    project_ids: List[Union[int, str]] = Field(default_factory=list, alias="projectIds")
    self_url: Optional[str] = Field(default=None, alias="self")


class SecuritySchemeId(BaseModel):
    model_config = MODEL_CONFIG

    id: str
