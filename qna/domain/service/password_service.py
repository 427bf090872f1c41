"""Password hashing domain service."""

import bcrypt

from qna.domain.error import BusinessRuleViolationError

from .base import Service

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class PasswordService(Service):
    """Hashes and verifies user passwords with bcrypt."""

    def hash_password(self, password: str) -> str:
        """Hash a password with a fresh random salt.

        Args:
            password: Plain-text password

        Returns:
            bcrypt hash suitable for storage

        Raises:
            BusinessRuleViolationError: If the password is longer than bcrypt accepts
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise BusinessRuleViolationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )
        return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """Check a password against a stored hash.

        Args:
            password: Plain-text password
            hashed: Stored hash produced by hash_password

        Returns:
            True if the password matches
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash, or a password bcrypt refuses
            return False
