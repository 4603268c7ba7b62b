"""Repositories resource.

Repositories are addressed by id or by slug ("owner/name"). Slugs are
path-escaped, so "owner/name" is sent as "owner%2Fname".
"""

from urllib.parse import quote

from .models import Repository, Response
from .options import RepositoriesOption, RepositoryOption, encode_options


def _repo_path(slug_or_id: str | int) -> str:
    return f"repo/{quote(str(slug_or_id), safe='')}"


class RepositoriesService:
    def __init__(self, client):
        self._client = client

    def _get_list(
        self, path: str, options: RepositoriesOption | None
    ) -> tuple[list[Repository], Response]:
        request = self._client.new_request("GET", path, params=encode_options(options))
        body, resp = self._client.do(request)
        return [Repository.model_validate(r) for r in body.get("repositories", [])], resp

    def _action(self, slug_or_id: str | int, action: str) -> tuple[Repository, Response]:
        request = self._client.new_request("POST", f"{_repo_path(slug_or_id)}/{action}")
        body, resp = self._client.do(request)
        return Repository.model_validate(body), resp

    def find(
        self, slug_or_id: str | int, options: RepositoryOption | None = None
    ) -> tuple[Repository, Response]:
        """Fetch a single repository by id or slug."""
        request = self._client.new_request(
            "GET", _repo_path(slug_or_id), params=encode_options(options)
        )
        body, resp = self._client.do(request)
        return Repository.model_validate(body), resp

    def list_by_owner(
        self, owner: str, options: RepositoriesOption | None = None
    ) -> tuple[list[Repository], Response]:
        """List repositories of a user or organization login."""
        return self._get_list(f"owner/{quote(owner, safe='')}/repos", options)

    def list_by_github_id(
        self, github_id: int, options: RepositoriesOption | None = None
    ) -> tuple[list[Repository], Response]:
        """List repositories of an owner identified by its GitHub id."""
        return self._get_list(f"owner/github_id/{github_id}/repos", options)

    def activate(self, slug_or_id: str | int) -> tuple[Repository, Response]:
        return self._action(slug_or_id, "activate")

    def deactivate(self, slug_or_id: str | int) -> tuple[Repository, Response]:
        return self._action(slug_or_id, "deactivate")

    def migrate(self, slug_or_id: str | int) -> tuple[Repository, Response]:
        """Migrate a repository from travis-ci.org to travis-ci.com."""
        return self._action(slug_or_id, "migrate")

    def star(self, slug_or_id: str | int) -> tuple[Repository, Response]:
        return self._action(slug_or_id, "star")

    def unstar(self, slug_or_id: str | int) -> tuple[Repository, Response]:
        return self._action(slug_or_id, "unstar")

    # Defined last: the method name shadows the builtin inside the class body
    def list(
        self, options: RepositoriesOption | None = None
    ) -> tuple[list[Repository], Response]:
        """List repositories of the current user."""
        return self._get_list("repos", options)
