"""Defines the client for reading the authenticated user's GitHub profile."""

from json import JSONDecodeError

from ghprofile.errors import ParseError
from ghprofile.web.clients.base import BaseClient
from ghprofile.web.models import UserProfile
from ghprofile.web.parse import get_mapping, to_int64, to_optional_str, to_optional_timestamp, to_str
from ghprofile.web.utils import get_profile_endpoint, get_profile_url_base


class UserClient(BaseClient):
    def get_user_profile(self) -> UserProfile:
        try:
            data = self._request("GET", get_profile_endpoint())
        except JSONDecodeError as e:
            raise ParseError("Profile response is not valid JSON") from e
        user = get_mapping(data, "user")
        return UserProfile(
            id=to_int64(user, "id"),
            username=to_str(user, "login"),
            display_name=to_str(user, "name", default=""),
            location=to_optional_str(user, "location"),
            company=to_optional_str(user, "company"),
            blog_url=to_optional_str(user, "blog"),
            email=to_optional_str(user, "email"),
            created_at=to_optional_timestamp(user, "created_at"),
        )

    def get_profile_id(self) -> str:
        """Returns the username of the authenticated user.

        This is the login rather than the numeric id, and every call fetches
        the profile again.
        """
        return self.get_user_profile().username

    def get_profile_url(self) -> str:
        return get_profile_url_base() + self.get_profile_id()
