"""Utility functions for reading the GitHub API settings."""

from ghprofile.conf import Settings


def get_api_root() -> str:
    """Returns the root URL for the GitHub API."""
    return Settings.load().github.api_root


def get_profile_endpoint() -> str:
    """Returns the path of the authenticated user's profile endpoint."""
    return Settings.load().github.profile_endpoint


def get_profile_url_base() -> str:
    """Returns the prefix that a username is appended to for a profile URL."""
    return Settings.load().github.profile_url_base


def get_auth_scheme() -> str:
    return Settings.load().github.auth_scheme


def get_default_timeout() -> float:
    return Settings.load().github.timeout
