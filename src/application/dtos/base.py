"""Shared DTO building blocks for tool requests and results."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SortField(str, Enum):
    """Fields list endpoints can be sorted by."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class SortDirection(str, Enum):
    """Sort direction for list endpoints."""

    ASC = "asc"
    DESC = "desc"


class ToolRequest(BaseModel):
    """Base for tool argument models.

    Tool arguments arrive in camelCase (``indexId``); fields are declared in
    snake_case and accept either spelling.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class PageRequest(ToolRequest):
    """Pagination and sorting arguments passed through to list endpoints."""

    page: int | None = Field(default=None, ge=1, description="Page number")
    page_limit: int | None = Field(
        default=None,
        ge=1,
        le=50,
        description="Number of items per page",
    )
    sort_by: SortField | None = Field(default=None, description="Sort field")
    sort_option: SortDirection | None = Field(
        default=None,
        description="Sort direction",
    )

    def page_params(self) -> dict[str, str | int | None]:
        """Query parameters for the upstream list call."""
        return {
            "page": self.page,
            "page_limit": self.page_limit,
            "sort_by": self.sort_by.value if self.sort_by else None,
            "sort_option": self.sort_option.value if self.sort_option else None,
        }


class ToolResponse(BaseModel):
    """Base for re-shaped tool results, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: Literal["success"] = "success"

    def to_payload(self) -> dict[str, Any]:
        """Render the result as the JSON object returned to the caller."""
        return self.model_dump(by_alias=True, mode="json")


def list_field(payload: dict[str, Any], key: str) -> list[Any]:
    """Read a list field from an upstream payload, defaulting to empty."""
    value = payload.get(key)
    return list(value) if isinstance(value, list) else []


def dict_field(payload: dict[str, Any], key: str) -> dict[str, Any]:
    """Read an object field from an upstream payload, defaulting to empty."""
    value = payload.get(key)
    return dict(value) if isinstance(value, dict) else {}


def resource_id(payload: dict[str, Any]) -> str | None:
    """Upstream resources expose their identifier as ``_id`` or ``id``."""
    value = payload.get("_id") or payload.get("id")
    return str(value) if value is not None else None
