"""Travis CI API v3 client using httpx."""

import logging
from urllib.parse import urljoin

import httpx
import structlog

from . import __version__
from .models import API_VERSION, Response
from .organizations import OrganizationsService
from .repositories import RepositoriesService
from .settings import get_settings

# Silent until the host configures stdlib logging
logger = structlog.wrap_logger(logging.getLogger(__name__))

USER_AGENT = f"travis-client/{__version__}"


class ErrorResponse(httpx.HTTPStatusError):
    """Raised for any non-2xx response.

    Keeps the request and raw response, plus the ``error_type`` and
    ``error_message`` fields of the Travis error document when the body
    has one.
    """

    def __init__(
        self,
        message: str,
        *,
        request: httpx.Request,
        response: httpx.Response,
        error_type: str | None = None,
        error_message: str | None = None,
    ):
        super().__init__(message, request=request, response=response)
        self.error_type = error_type
        self.error_message = error_message

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorResponse":
        error_type = error_message = None
        try:
            data = response.json() if response.content else None
        except ValueError:
            # Not every error page is JSON (e.g. proxies in front of the API)
            data = None
        if isinstance(data, dict):
            error_type = data.get("error_type")
            error_message = data.get("error_message")

        request = response.request
        detail = error_message or response.reason_phrase
        return cls(
            f"{request.method} {request.url}: {response.status_code} {detail}",
            request=request,
            response=response,
            error_type=error_type,
            error_message=error_message,
        )


class TravisClient:
    """Thin client for the Travis CI API.

    Resource operations live on the ``organizations`` and ``repositories``
    services. Arguments left as None fall back to settings.

    A caller-supplied ``http_client`` keeps its own timeout and is not
    closed by ``close()``; the caller owns it.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        settings = get_settings()
        base_url = base_url or settings.travis_api_url
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url

        self.headers = {
            "Travis-API-Version": API_VERSION,
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        token = token if token is not None else settings.travis_token
        if token:
            self.headers["Authorization"] = f"token {token}"

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=settings.travis_timeout, follow_redirects=True
        )

        self.organizations = OrganizationsService(self)
        self.repositories = RepositoriesService(self)

    def new_request(self, verb: str, path: str, params=None, body=None) -> httpx.Request:
        """Build a request for a path relative to the base URL.

        Args:
            verb: HTTP method, e.g. "GET"
            path: API path, e.g. "repo/owner%2Fname"
            params: Query parameters dict
            body: JSON-serializable request body
        """
        url = urljoin(self.base_url, path.lstrip("/"))
        return self._client.build_request(
            verb, url, params=params, json=body, headers=self.headers
        )

    def do(self, request: httpx.Request) -> tuple[dict | list, Response]:
        """Send a request and decode its JSON body.

        Returns:
            The decoded body (``{}`` when empty) and the Response wrapper.

        Raises:
            ErrorResponse: the server answered with a non-2xx status
        """
        logger.debug("API request", verb=request.method, url=str(request.url))
        resp = self._client.send(request, follow_redirects=True)

        if not 200 <= resp.status_code < 300:
            error = ErrorResponse.from_response(resp)
            logger.warning("API error", status=resp.status_code, error_type=error.error_type)
            raise error

        body = resp.json() if resp.content else {}
        return body, Response.from_body(resp, body)

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
