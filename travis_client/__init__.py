"""Client library for the Travis CI API v3 (organizations and repositories)."""

__version__ = "0.1.0"

from .client import ErrorResponse, TravisClient  # noqa: E402
from .models import (  # noqa: E402
    API_COM_URL,
    API_ORG_URL,
    Branch,
    Organization,
    Owner,
    Page,
    Repository,
    Response,
)
from .options import (  # noqa: E402
    OrganizationOption,
    OrganizationsOption,
    RepositoriesOption,
    RepositoryOption,
)

__all__ = [
    "API_COM_URL",
    "API_ORG_URL",
    "Branch",
    "ErrorResponse",
    "Organization",
    "OrganizationOption",
    "OrganizationsOption",
    "Owner",
    "Page",
    "RepositoriesOption",
    "Repository",
    "RepositoryOption",
    "Response",
    "TravisClient",
]
