"""SMTP email adapter — delivers order mail through an SMTP relay.

Every connection is opened with a finite timeout so a stalled relay surfaces
as a failed delivery instead of a hang.
"""

import os
import smtplib
import socket
from email.message import EmailMessage
from uuid import uuid4

from notifications.channel.email_port import EmailPort


class SmtpEmailAdapter(EmailPort):
    """Email adapter backed by ``smtplib`` with STARTTLS."""

    backend = "smtp"

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        sender: str | None = None,
        timeout: float = 10.0,
        use_tls: bool = True,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.timeout = timeout
        self.use_tls = use_tls

    @classmethod
    def from_env(cls) -> "SmtpEmailAdapter":
        return cls(
            host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            port=int(os.getenv("SMTP_PORT", "587")),
            username=os.getenv("SMTP_USER"),
            password=os.getenv("SMTP_PASS"),
            timeout=float(os.getenv("SMTP_TIMEOUT", "10")),
        )

    def build_message(self, to: str, subject: str, body: str, html_body: str | None = None) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender or ""
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = f"<{uuid4().hex}@{self.host}>"
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        message = self.build_message(to, subject, body, html_body)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, socket.timeout, OSError) as exc:
            return {"message_id": None, "status": "failed", "error": str(exc)}

        return {"message_id": message["Message-ID"], "status": "sent"}
