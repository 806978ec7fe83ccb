"""Authentication-related Pydantic models."""

from pydantic import BaseModel


class GitHubProfile(BaseModel):
    """The parts of GitHub's ``/user`` response that map onto a local user."""

    id: int
    login: str
    email: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
