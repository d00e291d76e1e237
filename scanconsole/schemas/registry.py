# scanconsole/schemas/registry.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional

from scanconsole.core.input_validation import parse_absolute_url

REGISTRY_TYPE_GITLAB = "gitlab"


class GitlabNonSecret(BaseModel):
    gitlab_registry_url: str = Field(..., min_length=2)
    gitlab_server_url: str

    @field_validator("gitlab_server_url")
    @classmethod
    def server_url_is_url(cls, v: str) -> str:
        parse_absolute_url(v)
        return v


class GitlabSecret(BaseModel):
    gitlab_access_token: str = Field(..., min_length=2)


class RegistryGitlab(BaseModel):
    """GitLab container registry credentials"""

    name: str = Field(..., min_length=2, max_length=64)
    non_secret: GitlabNonSecret
    secret: GitlabSecret
    registry_type: str = Field(..., min_length=1)

    @field_validator("registry_type")
    @classmethod
    def registry_type_is_gitlab(cls, v: str) -> str:
        if v != REGISTRY_TYPE_GITLAB:
            raise ValueError(f"registry_type must be '{REGISTRY_TYPE_GITLAB}'")
        return v


class RegistryAccountResponse(BaseModel):
    id: int
    name: str
    registry_type: str
    non_secret: GitlabNonSecret
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
