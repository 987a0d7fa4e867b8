"""Defines the typed records returned by the GitHub profile client."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    """The authenticated user's public account metadata."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    display_name: str
    location: str | None = None
    company: str | None = None
    blog_url: str | None = None
    email: str | None = None
    created_at: datetime | None = None
