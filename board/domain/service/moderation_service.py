"""Moderation domain service."""

import hashlib
import hmac

import logfire

from board.config import ModerationSettings
from board.domain.error import InvalidModerationSecretError, ModerationDisabledError
from board.domain.value import Viewer

from .base import Service


class ModerationService(Service):
    """Checks the site-wide moderation secret.

    The moderation cookie carries the SHA-256 of the secret, never the secret
    itself. Without a configured secret nobody is a moderator.
    """

    def __init__(self, moderation_settings: ModerationSettings) -> None:
        """Initialize moderation service.

        Args:
            moderation_settings: Moderation configuration
        """
        self.settings = moderation_settings

    @staticmethod
    def hash_secret(value: str) -> str:
        """Hex SHA-256 of a secret."""
        return hashlib.sha256(value.encode("utf-8")).hexdigest()

    @property
    def enabled(self) -> bool:
        return self.settings.enabled

    def _expected_token(self) -> str | None:
        if not self.settings.secret:
            return None
        return self.hash_secret(self.settings.secret)

    def is_moderator(self, viewer: Viewer) -> bool:
        """Whether the viewer holds a valid moderation token."""
        expected = self._expected_token()
        if not expected or not viewer.moderation_token:
            return False
        # compare_digest only accepts ASCII str; cookies may hold any latin-1 text
        return hmac.compare_digest(
            viewer.moderation_token.encode("utf-8"), expected.encode("utf-8")
        )

    def open_session(self, secret: str) -> str:
        """Exchange the moderation secret for a session token.

        Args:
            secret: Secret submitted by the caller

        Returns:
            Token to store in the moderation cookie

        Raises:
            ModerationDisabledError: If no secret is configured
            InvalidModerationSecretError: If the secret does not match
        """
        with logfire.span("moderation_service.open_session"):
            expected = self._expected_token()
            if expected is None:
                logfire.warn("Moderation login while moderation is disabled")
                raise ModerationDisabledError()

            if not secret or not hmac.compare_digest(self.hash_secret(secret), expected):
                logfire.warn("Moderation login rejected")
                raise InvalidModerationSecretError()

            logfire.info("Moderation session opened")
            return expected
