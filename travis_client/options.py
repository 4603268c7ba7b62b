"""Option values encoded into query-string parameters.

Field names are the exact query parameter names the API expects.
"""

from dataclasses import dataclass, field, fields


@dataclass
class Options:
    def to_params(self) -> dict[str, str]:
        """Encode set fields as query parameters.

        Falsy values are omitted, booleans become "true" and lists are
        joined with commas.
        """
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if not value:
                continue
            if isinstance(value, bool):
                params[f.name] = "true"
            elif isinstance(value, (list, tuple)):
                params[f.name] = ",".join(str(v) for v in value)
            else:
                params[f.name] = str(value)
        return params


@dataclass
class OrganizationOption(Options):
    include: list[str] = field(default_factory=list)


@dataclass
class OrganizationsOption(Options):
    limit: int = 0
    offset: int = 0
    sort_by: str = ""
    role: str = ""
    include: list[str] = field(default_factory=list)


@dataclass
class RepositoryOption(Options):
    include: list[str] = field(default_factory=list)


@dataclass
class RepositoriesOption(Options):
    """Filters for the repository collection endpoints."""

    active: bool = False
    active_on_org: bool = False
    managed_by_installation: bool = False
    private: bool = False
    starred: bool = False
    limit: int = 0
    offset: int = 0
    sort_by: str = ""
    include: list[str] = field(default_factory=list)


def encode_options(options: Options | None) -> dict[str, str] | None:
    if options is None:
        return None
    return options.to_params() or None
