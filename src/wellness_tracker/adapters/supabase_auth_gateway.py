"""Supabase auth gateway."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthApiError, Client

from wellness_tracker.services.users import AuthGateway

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Resolve access tokens through Supabase Auth."""

    client: Client

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for an access token, if valid."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError as exc:
            _logger.warning("Supabase rejected access token: %s", exc)
            return None
        user = getattr(response, "user", None)
        if user is None:
            return None
        return UUID(str(user.id))
