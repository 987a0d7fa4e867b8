"""Defines a base client for the GitHub API."""

import logging
from types import TracebackType
from typing import Any, Mapping, Self, Type
from urllib.parse import urljoin

import httpx

from ghprofile.web.auth import OAuthTokenAuth
from ghprofile.web.utils import get_api_root, get_auth_scheme, get_default_timeout

logger = logging.getLogger(__name__)

ERROR_CODE_SUGGESTIONS: dict[int, str] = {
    401: "The access token was rejected; check that it is valid and has not been revoked",
    403: "The access token is not authorized for this resource",
}


class BaseClient:
    """Owns an ``httpx.Client`` that signs every request with an access token.

    Nothing touches the network until the first request. An instance may be
    reused for sequential calls; sharing one across threads is only as safe
    as the underlying transport.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.access_token = access_token
        self.base_url = get_api_root() if base_url is None else base_url
        self.timeout = get_default_timeout() if timeout is None else timeout
        self.transport = transport
        self._client: httpx.Client | None = None

    def get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                auth=OAuthTokenAuth(self.access_token, get_auth_scheme()),
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
                follow_redirects=True,
            )
        return self._client

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        error_code_suggestions: dict[int, str] | None = None,
    ) -> Any:
        url = urljoin(self.base_url, endpoint)
        kwargs: dict[str, Any] = {}
        if params is not None:
            kwargs["params"] = params

        logger.debug("%s %s", method, url)
        response = self.get_client().request(method, url, **kwargs)

        if not response.is_success:
            error_code = response.status_code
            try:
                error_json = response.json()
            except ValueError:
                error_json = response.text

            logger.error("Got error %d from the GitHub API", error_code)
            if isinstance(error_json, Mapping):
                for key, value in error_json.items():
                    logger.error("  [%s] %s", key, value)
            else:
                logger.error("  %s", error_json)

            suggestions = ERROR_CODE_SUGGESTIONS if error_code_suggestions is None else error_code_suggestions
            if error_code in suggestions:
                logger.error("Hint: %s", suggestions[error_code])

            response.raise_for_status()

        return response.json()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
