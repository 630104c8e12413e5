from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..settings.provider import SettingsProvider
from .events import RegistrationConfirmed

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().with_name("templates")


@dataclass(frozen=True)
class MailConfig:
    host: str = "smtp.gmail.com"
    port: int = 587
    user: Optional[str] = None
    password: Optional[str] = None
    sender_name: str = "SEMED Tuntum"
    use_tls: bool = True
    timeout: float = 10.0

    @property
    def enabled(self) -> bool:
        return bool(self.user and self.password)

    @classmethod
    def from_dict(cls, mail_config: Optional[dict]) -> "MailConfig":
        mail_config = mail_config or {}
        return cls(
            host=str(mail_config.get("host", "smtp.gmail.com")),
            port=int(mail_config.get("port", 587)),
            user=mail_config.get("user") or None,
            password=mail_config.get("password") or None,
            sender_name=str(mail_config.get("sender_name", "SEMED Tuntum")),
            use_tls=bool(mail_config.get("use_tls", True)),
        )


def build_template_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
    )


class ConfirmationMailer:
    """Delivery collaborator for RegistrationConfirmed events.

    Without SMTP credentials the message is only logged.
    """

    def __init__(self, settings: SettingsProvider, config: MailConfig, *, env: Environment | None = None):
        self._settings = settings
        self._config = config
        self._env = env or build_template_env()

    def render(self, event: RegistrationConfirmed) -> tuple[str, str]:
        s = self._settings.snapshot()
        subject = f"Inscrição Confirmada - {s.event_name}"
        html = self._env.get_template("confirmation.html").render(
            first_name=event.first_name,
            enrollment_label=event.enrollment_day.label,
            event=s,
        )
        return subject, html

    def __call__(self, event: RegistrationConfirmed) -> bool:
        subject, html = self.render(event)

        if not self._config.enabled:
            logger.info("[MOCK] E-mail de confirmação para %s (%s)", event.email, event.full_name)
            return False

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = formataddr((self._config.sender_name, self._config.user))
        msg["To"] = event.email
        msg.set_content("Sua inscrição foi confirmada.")
        msg.add_alternative(html, subtype="html")

        with smtplib.SMTP(self._config.host, self._config.port, timeout=self._config.timeout) as smtp:
            if self._config.use_tls:
                smtp.starttls()
            smtp.login(self._config.user, self._config.password)
            smtp.send_message(msg)

        logger.info("E-mail de confirmação enviado para %s", event.email)
        return True
