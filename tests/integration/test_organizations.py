"""Integration tests for the organizations resource."""

from conftest import request_path

from travis_client import Organization, OrganizationOption, OrganizationsOption

ORG_JSON = {
    "id": 111,
    "login": "TestOrg",
    "name": "TestOrg",
    "github_id": 12345,
    "avatar_url": "https:///test.com",
    "education": False,
}

WANT = Organization(
    id=111,
    login="TestOrg",
    name="TestOrg",
    github_id=12345,
    avatar_url="https:///test.com",
    education=False,
)


class TestOrganizationsFind:
    def test_find(self, client, serve):
        sent = serve(ORG_JSON)

        opt = OrganizationOption(include=["organization.repositories"])
        org, resp = client.organizations.find(111, opt)

        request = sent[0]
        assert request.method == "GET"
        assert request_path(request) == "/org/111"
        assert dict(request.url.params) == {"include": "organization.repositories"}
        assert org == WANT
        assert resp.status_code == 200

    def test_find_without_options(self, client, serve):
        sent = serve(ORG_JSON)

        client.organizations.find(111)

        assert sent[0].url.query == b""


class TestOrganizationsList:
    def test_list(self, client, serve):
        sent = serve({"organizations": [ORG_JSON]})

        opt = OrganizationsOption(
            limit=50, offset=50, sort_by="id", include=["organization.repositories"]
        )
        orgs, _ = client.organizations.list(opt)

        request = sent[0]
        assert request.method == "GET"
        assert request_path(request) == "/orgs"
        assert dict(request.url.params) == {
            "limit": "50",
            "offset": "50",
            "sort_by": "id",
            "include": "organization.repositories",
        }
        assert orgs == [WANT]

    def test_list_empty(self, client, serve):
        serve({"organizations": []})

        orgs, resp = client.organizations.list()

        assert orgs == []
        assert resp.count == 0
