"""
Delivery of password reset links.

Mail delivery is outside this service; the only shipped notifier logs
the outgoing link so the flow can be exercised end to end.
"""
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class ResetNotifier(Protocol):
    """Anything able to deliver a password reset link to an address."""

    async def send_password_reset(self, email: str, reset_link: str) -> None:
        ...


class LoggingResetNotifier:
    """Notifier that records the reset link in the application log."""

    async def send_password_reset(self, email: str, reset_link: str) -> None:
        logger.info("Password reset link issued for %s", email)
        logger.debug("Password reset link for %s: %s", email, reset_link)
