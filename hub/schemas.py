"""
Pydantic schemas for the hub backend.

Creation and patch payloads are validated here before they reach a storage
client. Responses serialize in camelCase, which is what the dashboard expects.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterable, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from shared.constants import (
    DEFAULT_SCRIPT_AUTHOR,
    MAX_GENERATION_PROMPT_LENGTH,
    MAX_SCRIPT_CODE_LENGTH,
    MAX_SCRIPT_NAME_LENGTH,
    PASSWORD_MAX_BYTES,
    PASSWORD_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    USERNAME_PATTERN,
)
from shared.types import ScriptCategory


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class PatchModel(CamelModel):
    """
    Partial update: only the fields the caller actually sent are applied.

    An explicit null is accepted only for the columns in ``nullable_fields``.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


# Users / auth


class UserCreate(CamelModel):
    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        pattern=USERNAME_PATTERN,
    )
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
        return value


class LoginRequest(CamelModel):
    # Normalized the same way as at registration so the lookup matches.
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    id: str
    username: str
    email: str
    created_at: float
    updated_at: float


class AuthResponse(CamelModel):
    access_token: str
    token_type: Literal["bearer"] = "bearer"
    user: UserResponse


# Scripts


class ScriptCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=MAX_SCRIPT_NAME_LENGTH)
    description: str = Field(..., min_length=1)
    category: ScriptCategory
    code: str = Field(..., min_length=1, max_length=MAX_SCRIPT_CODE_LENGTH)
    author: str = Field(default=DEFAULT_SCRIPT_AUTHOR, min_length=1, max_length=100)
    user_id: Optional[str] = None
    is_public: bool = True


class ScriptUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"user_id"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=MAX_SCRIPT_NAME_LENGTH)
    description: Optional[str] = Field(default=None, min_length=1)
    category: Optional[ScriptCategory] = None
    code: Optional[str] = Field(default=None, min_length=1, max_length=MAX_SCRIPT_CODE_LENGTH)
    author: Optional[str] = Field(default=None, min_length=1, max_length=100)
    user_id: Optional[str] = None
    is_public: Optional[bool] = None


class ScriptResponse(CamelModel):
    id: str
    name: str
    description: str
    category: str
    code: str
    author: str
    user_id: Optional[str] = None
    is_public: bool
    is_favorite: int
    execution_count: int
    last_executed: Optional[float] = None
    created_at: float


class CategoryResponse(CamelModel):
    id: str
    name: str


class GenerateScriptRequest(CamelModel):
    prompt: str = Field(..., min_length=1, max_length=MAX_GENERATION_PROMPT_LENGTH)
    template: str = Field(default="custom", max_length=50)
    save: bool = False


class GeneratedScriptResponse(CamelModel):
    generated_code: str
    source: str
    script: Optional[ScriptResponse] = None


# News


class NewsArticleCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    source: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, max_length=50)
    published_at: Optional[float] = None


class NewsArticleUpdate(PatchModel):
    """published_at is deliberately absent: it is fixed at creation."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"image_url"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, min_length=1)
    summary: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = None
    source: Optional[str] = Field(default=None, min_length=1, max_length=100)
    category: Optional[str] = Field(default=None, min_length=1, max_length=50)


class NewsArticleResponse(CamelModel):
    id: str
    title: str
    content: str
    summary: str
    image_url: Optional[str] = None
    source: str
    category: str
    published_at: float
    created_at: float


# System stats


class SystemStatsCreate(CamelModel):
    cpu_usage: int = Field(..., ge=0, le=100)
    gpu_usage: int = Field(..., ge=0, le=100)
    ram_usage: int = Field(..., ge=0, le=100)
    fps: int = Field(..., ge=0)


class SystemStatsResponse(CamelModel):
    id: str
    cpu_usage: int
    gpu_usage: int
    ram_usage: int
    fps: int
    timestamp: float


class SystemReadingResponse(CamelModel):
    cpu: int
    gpu: int
    ram: int
    disk: int
    uptime: float
    timestamp: float


class StatusResponse(BaseModel):
    status: Literal["ok"]


_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def field_errors(errors: Iterable[dict]) -> dict[str, list[str]]:
    """Group pydantic error entries by the field they refer to."""
    grouped: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        key = ".".join(loc) or "__root__"
        grouped.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return grouped
