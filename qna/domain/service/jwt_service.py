"""JWT token domain service."""

import logfire

from qna.config import AuthSettings
from qna.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and reads session tokens.

    This is the API's identity provider: a valid token yields the caller's
    user id, anything else means the caller is anonymous.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Issue a session token for a user who just proved their identity."""
        token = create_token(user_id, username, self.auth_settings)
        logfire.info("Session token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a session token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Session token rejected", reason=str(e))
            raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Resolve the caller's user id, or None for an anonymous caller.

        A missing, malformed or expired token is anonymous, not an error;
        routes that need a caller turn None into a 401.
        """
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
