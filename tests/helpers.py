"""Helpers shared by the API tests."""

from __future__ import annotations

import re

from fastapi.testclient import TestClient

from app.services.mail import MailDeliveryError, Mailer
from app.utils.config import Settings


class RecordingMailer(Mailer):
    """Mailer that keeps messages in memory instead of calling the provider."""

    def __init__(self, config: Settings, fail: bool = False) -> None:
        super().__init__(config)
        self.fail = fail
        self.sent: list[dict] = []

    def send(self, to: str, subject: str, html: str, category: str) -> None:
        if self.fail:
            raise MailDeliveryError("provider unavailable")
        self.sent.append({"to": to, "subject": subject, "html": html, "category": category})

    def last(self, category: str) -> dict:
        return next(m for m in reversed(self.sent) if m["category"] == category)


def signup(client: TestClient, email: str = "a@x.com", password: str = "pw123456", name: str = "Ann"):
    return client.post("/api/auth/signup", json={"email": email, "password": password, "name": name})


def last_code(mailer: RecordingMailer) -> str:
    """Pull the verification code out of the last verification email."""
    html = mailer.last("Email Verification")["html"]
    return re.search(r">(\d{6})<", html).group(1)


def last_reset_token(mailer: RecordingMailer) -> str:
    html = mailer.last("Password Reset")["html"]
    return re.search(r"/reset-password/([0-9a-f]{40})", html).group(1)
