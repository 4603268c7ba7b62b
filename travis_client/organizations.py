"""Organizations resource: GET /org/{id} and GET /orgs."""

from .models import Organization, Response
from .options import OrganizationOption, OrganizationsOption, encode_options


class OrganizationsService:
    def __init__(self, client):
        self._client = client

    def find(
        self, org_id: int, options: OrganizationOption | None = None
    ) -> tuple[Organization, Response]:
        """Fetch a single organization by its Travis CI id."""
        request = self._client.new_request("GET", f"org/{org_id}", params=encode_options(options))
        body, resp = self._client.do(request)
        return Organization.model_validate(body), resp

    def list(
        self, options: OrganizationsOption | None = None
    ) -> tuple[list[Organization], Response]:
        """List the organizations the current user is a member of."""
        request = self._client.new_request("GET", "orgs", params=encode_options(options))
        body, resp = self._client.do(request)
        return [Organization.model_validate(o) for o in body.get("organizations", [])], resp
