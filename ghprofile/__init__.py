"""Defines the common interface for the GitHub profile client."""

__version__ = "0.1.0"

from pathlib import Path

from ghprofile.errors import ParseError, TransportError
from ghprofile.web.clients.user import UserClient
from ghprofile.web.models import UserProfile

ROOT_DIR = Path(__file__).parent
