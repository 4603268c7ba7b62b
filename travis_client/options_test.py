"""Unit tests for query parameter encoding."""

from .options import (
    OrganizationOption,
    OrganizationsOption,
    RepositoriesOption,
    RepositoryOption,
    encode_options,
)


def describe_to_params():
    def it_omits_zero_values():
        assert RepositoriesOption().to_params() == {}
        assert OrganizationsOption().to_params() == {}

    def it_encodes_true_booleans_as_lowercase():
        opt = RepositoriesOption(active_on_org=True, starred=True, private=True)
        assert opt.to_params() == {"active_on_org": "true", "starred": "true", "private": "true"}

    def it_encodes_integers_and_strings():
        opt = OrganizationsOption(limit=50, offset=50, sort_by="id")
        assert opt.to_params() == {"limit": "50", "offset": "50", "sort_by": "id"}

    def it_keeps_negative_offsets():
        assert RepositoriesOption(offset=-25).to_params() == {"offset": "-25"}

    def it_joins_include_with_commas():
        opt = RepositoryOption(include=["repository.default_branch", "repository.owner"])
        assert opt.to_params() == {"include": "repository.default_branch,repository.owner"}

    def it_uses_field_names_as_parameter_names():
        opt = RepositoriesOption(managed_by_installation=True, active=True)
        assert set(opt.to_params()) == {"managed_by_installation", "active"}


def describe_encode_options():
    def it_returns_none_without_options():
        assert encode_options(None) is None

    def it_returns_none_when_nothing_is_set():
        assert encode_options(OrganizationOption()) is None

    def it_returns_params():
        opt = OrganizationOption(include=["organization.repositories"])
        assert encode_options(opt) == {"include": "organization.repositories"}
