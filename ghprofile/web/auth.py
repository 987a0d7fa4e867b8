"""Defines OAuth request signing for the GitHub API.

Signing is kept out of the clients: ``sign_request`` maps a request and a
token onto a signed copy, and ``OAuthTokenAuth`` plugs it into ``httpx`` so
every request a client sends passes through it.
"""

from typing import Generator

import httpx

AUTHORIZATION_HEADER = "Authorization"


def sign_request(request: httpx.Request, access_token: str, scheme: str = "OAuth") -> httpx.Request:
    """Returns a copy of the request carrying the OAuth authorization header.

    Args:
        request: The outgoing request. It is not modified.
        access_token: The access token granted to the application.
        scheme: The authorization scheme placed in front of the token.

    Returns:
        A new request with the ``Authorization`` header set.
    """
    headers = request.headers.copy()
    headers[AUTHORIZATION_HEADER] = f"{scheme} {access_token}"
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        content=request.read(),
        extensions=request.extensions,
    )


class OAuthTokenAuth(httpx.Auth):
    def __init__(self, access_token: str, scheme: str = "OAuth") -> None:
        self.access_token = access_token
        self.scheme = scheme

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield sign_request(request, self.access_token, self.scheme)
