"""YApi DTO models

Pydantic models for the YApi open API responses consumed by ``YApiClient``.

Guidelines:
- Keep alias mappings aligned with the YApi wire format (``_id``, ``errcode``,
  ``list``...).
- Identifiers are kept as sent: YApi returns integers, some deployments and
  proxies return strings.
- Unknown fields are preserved (see ``BaseSchema``).
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import AliasChoices, Field

from .base import BaseSchema

YApiId = Union[int, str]


class Envelope(BaseSchema):
    """Wrapper around every YApi response.

    ``errcode == 0`` means success; any other value means ``data`` must be
    ignored and ``errmsg`` describes the failure. Gateways that rename the
    keys to ``statusCode`` / ``statusMessage`` are accepted too.

    Examples:
        {"errcode": 0, "errmsg": "成功！", "data": {...}}
    """

    status_code: int = Field(
        ...,
        validation_alias=AliasChoices("errcode", "statusCode"),
        serialization_alias="errcode",
        description="0 on success",
    )
    status_message: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("errmsg", "statusMessage"),
        serialization_alias="errmsg",
        description="Upstream status message",
    )
    data: Any = Field(default=None, description="Endpoint payload")

    @property
    def ok(self) -> bool:
        return self.status_code == 0


class Category(BaseSchema):
    """An interface category of a project."""

    id: Optional[YApiId] = Field(default=None, alias="_id")
    name: Optional[str] = None
    desc: Optional[str] = None


class ProjectInfo(BaseSchema):
    """Basic project information, optionally with its categories."""

    id: Optional[YApiId] = Field(default=None, alias="_id")
    name: Optional[str] = None
    desc: Optional[str] = None
    basepath: Optional[str] = None
    cat: Optional[List[Category]] = Field(default=None, description="Categories, when YApi includes them")


class ApiListItem(BaseSchema):
    """Summary row of an interface as returned by the list, menu and search endpoints."""

    id: Optional[YApiId] = Field(default=None, alias="_id")
    title: Optional[str] = None
    path: Optional[str] = None
    method: Optional[str] = None
    type: Optional[str] = None

    @property
    def project_id(self) -> Optional[YApiId]:
        """Owning project id. YApi sends ``projectId`` on some endpoints and ``project_id`` on others.

        Both keys stay in the extra fields under the name they arrived with.
        """
        extra = self.model_extra or {}
        value = extra.get("projectId")
        return value if value is not None else extra.get("project_id")


class ApiMenu(BaseSchema):
    """A category together with the interfaces filed under it."""

    id: Optional[YApiId] = Field(default=None, alias="_id")
    name: Optional[str] = None
    desc: Optional[str] = None
    items: List[ApiListItem] = Field(default_factory=list, alias="list")


class ApiInterface(BaseSchema):
    """Full snapshot of one interface at fetch time."""

    id: Optional[YApiId] = Field(default=None, alias="_id")
    title: Optional[str] = None
    path: Optional[str] = None
    method: Optional[str] = None
    desc: Optional[str] = None
    req_params: List[Any] = Field(default_factory=list, description="URL path parameters")
    req_query: List[Any] = Field(default_factory=list, description="Query parameters")
    req_headers: List[Any] = Field(default_factory=list, description="Request headers")
    req_body_type: Optional[str] = None
    req_body_form: List[Any] = Field(default_factory=list, description="Form body parameters")
    res_body_type: Optional[str] = None
    res_body: Optional[str] = None
    markdown: Optional[str] = Field(default=None, description="Free-form interface documentation")


class ListResult(BaseSchema):
    """One page of interfaces. Pagination is driven by the caller's page/limit."""

    count: Optional[int] = Field(default=None, description="Number of items on this page")
    total: Optional[int] = Field(default=None, description="Total number of matching items")
    items: List[ApiListItem] = Field(default_factory=list, alias="list")


class SearchResult(BaseSchema):
    """Projects and interfaces matched by a keyword search."""

    projects: List[ProjectInfo] = Field(default_factory=list, alias="project")
    interfaces: List[ApiListItem] = Field(default_factory=list, alias="interface")
