from __future__ import annotations

import logging

import requests

from app.utils.config import Settings, get_settings
from app.services.mail.templates import (
    PASSWORD_RESET_REQUEST_TEMPLATE,
    PASSWORD_RESET_SUCCESS_TEMPLATE,
    VERIFICATION_EMAIL_TEMPLATE,
    WELCOME_EMAIL_TEMPLATE,
    render_template,
)


logger = logging.getLogger(__name__)


class MailDeliveryError(Exception):
    """Raised when the email provider did not accept a message."""


class Mailer:
    """Thin client for the Mailtrap send API.

    Without an explicit session every message goes through a one-off
    ``requests.post``, so the shared Mailer holds no connection state across
    threadpool workers.
    """

    def __init__(self, config: Settings, session: requests.Session | None = None) -> None:
        self.config = config
        self.session = session

    def send(self, to: str, subject: str, html: str, category: str) -> None:
        if not self.config.mailtrap_token:
            raise MailDeliveryError("Mailtrap token is not configured")

        payload = {
            "from": {"email": self.config.mail_sender_email, "name": self.config.mail_sender_name},
            "to": [{"email": to}],
            "subject": subject,
            "html": html,
            "category": category,
        }
        headers = {"Authorization": f"Bearer {self.config.mailtrap_token}"}
        try:
            post = self.session.post if self.session is not None else requests.post
            response = post(
                self.config.mailtrap_endpoint,
                json=payload,
                headers=headers,
                timeout=self.config.mail_timeout_seconds,
            )
        except requests.RequestException as e:
            raise MailDeliveryError(f"Error sending email to {to}: {e}") from e

        if not response.ok:
            raise MailDeliveryError(
                f"Mail provider rejected email to {to}: {response.status_code} {response.text[:200]}"
            )
        logger.info("Email '%s' sent to %s", category, to)

    def send_verification_email(self, email: str, code: str) -> None:
        html = render_template(VERIFICATION_EMAIL_TEMPLATE, verificationCode=code)
        self.send(email, "Verify your email", html, "Email Verification")

    def send_welcome_email(self, email: str, name: str) -> None:
        html = render_template(
            WELCOME_EMAIL_TEMPLATE,
            name=name,
            dashboardURL=f"{self.config.client_url}/dashboard",
        )
        self.send(email, "Welcome!", html, "Welcome")

    def send_password_reset_email(self, email: str, reset_url: str) -> None:
        html = render_template(PASSWORD_RESET_REQUEST_TEMPLATE, resetURL=reset_url)
        self.send(email, "Reset your password", html, "Password Reset")

    def send_reset_success_email(self, email: str) -> None:
        self.send(email, "Password Reset Successful", PASSWORD_RESET_SUCCESS_TEMPLATE, "Password Reset")


_mailer: Mailer | None = None


def get_mailer() -> Mailer:
    """FastAPI dependency returning the process-wide Mailer."""
    global _mailer
    if _mailer is None:
        _mailer = Mailer(get_settings())
    return _mailer


__all__ = [
    "MailDeliveryError",
    "Mailer",
    "get_mailer",
    "render_template",
]
