"""Data models and constants for the Travis CI API v3.

Entities mirror the JSON documents returned by the API. Every scalar is
optional so a missing field (None) stays distinct from a zero value.
"""

from dataclasses import dataclass

import httpx
from pydantic import BaseModel, ConfigDict, Field

API_ORG_URL = "https://api.travis-ci.org/"
API_COM_URL = "https://api.travis-ci.com/"
API_VERSION = "3"


class Entity(BaseModel):
    """Base for API resources, carrying the standard @-prefixed metadata."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: str | None = Field(None, alias="@type")
    href: str | None = Field(None, alias="@href")
    representation: str | None = Field(None, alias="@representation")
    permissions: dict[str, bool] | None = Field(None, alias="@permissions")


class Owner(Entity):
    """The user or organization that owns a repository."""

    id: int | None = None
    login: str | None = None
    name: str | None = None
    github_id: int | None = None
    avatar_url: str | None = None


class Branch(Entity):
    name: str | None = None
    default_branch: bool | None = None
    exists_on_github: bool | None = None


class Repository(Entity):
    """A repository known to Travis CI."""

    id: int | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    github_id: int | None = None
    vcs_id: str | None = None
    vcs_type: str | None = None
    github_language: str | None = None
    active: bool | None = None
    private: bool | None = None
    owner: Owner | None = None
    owner_name: str | None = None
    vcs_name: str | None = None
    default_branch: Branch | None = None
    starred: bool | None = None
    managed_by_installation: bool | None = None
    active_on_org: bool | None = None
    migration_status: str | None = None
    history: bool | None = None
    shared: bool | None = None


class Organization(Entity):
    """A GitHub organization with Travis CI enabled.

    Attributes:
        id: Travis CI identifier
        login: Organization login on the VCS provider
        github_id: Identifier on GitHub
        education: Whether the organization has an education account
        repositories: Only present when ``organization.repositories`` is included
    """

    id: int | None = None
    login: str | None = None
    name: str | None = None
    github_id: int | None = None
    vcs_id: str | None = None
    vcs_type: str | None = None
    avatar_url: str | None = None
    education: bool | None = None
    allow_migration: bool | None = None
    repositories: list[Repository] | None = None


class Page(BaseModel):
    """A link to one page of a paginated collection."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(..., alias="@href")
    offset: int = 0
    limit: int = 0


class Pagination(BaseModel):
    """The ``@pagination`` envelope of collection responses."""

    limit: int = 0
    offset: int = 0
    count: int = 0
    is_first: bool = False
    is_last: bool = False
    next: Page | None = None
    prev: Page | None = None
    first: Page | None = None
    last: Page | None = None


@dataclass
class Response:
    """Raw HTTP response plus the pagination fields of its body."""

    response: httpx.Response
    limit: int = 0
    offset: int = 0
    count: int = 0
    is_first: bool = False
    is_last: bool = False
    next_page: Page | None = None
    prev_page: Page | None = None
    first_page: Page | None = None
    last_page: Page | None = None

    @classmethod
    def from_body(cls, response: httpx.Response, body) -> "Response":
        """Build a Response, decoding ``@pagination`` when the body has one."""
        raw = body.get("@pagination") if isinstance(body, dict) else None
        if not raw:
            return cls(response=response)
        pagination = Pagination.model_validate(raw)
        return cls(
            response=response,
            limit=pagination.limit,
            offset=pagination.offset,
            count=pagination.count,
            is_first=pagination.is_first,
            is_last=pagination.is_last,
            next_page=pagination.next,
            prev_page=pagination.prev,
            first_page=pagination.first,
            last_page=pagination.last,
        )

    @property
    def status_code(self) -> int:
        return self.response.status_code
