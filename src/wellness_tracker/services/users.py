"""User resolution for authenticated requests."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from wellness_tracker.errors import AuthenticationError


class AuthGateway(Protocol):
    """Interface to the external auth provider."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for an access token, if valid."""


@dataclass
class UserService:
    """Application service that maps access tokens to users."""

    gateway: AuthGateway

    def resolve(self, access_token: str | None) -> UUID:
        """Return the user id for a token or raise AuthenticationError."""
        if not access_token:
            raise AuthenticationError("Missing access token")
        user_id = self.gateway.get_user_id(access_token)
        if user_id is None:
            raise AuthenticationError("User not authenticated")
        return user_id
