"""Defines the errors raised by the GitHub profile client."""

import httpx

# Transport failures are surfaced exactly as httpx raises them.
TransportError = httpx.HTTPError


class ParseError(ValueError):
    """The profile response could not be mapped onto a user profile."""
