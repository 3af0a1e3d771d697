"""In-memory email adapter; the default backend outside production."""

from uuid import uuid4

from notifications.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    """Keeps every accepted mail in ``outbox`` instead of sending it.

    Failures can be simulated for all mail (``configure``) or only for
    particular recipients (``fail_for``). ``raise_on_send`` makes the adapter
    raise instead of returning a failed result.
    """

    backend = "fake"

    def __init__(self):
        self.outbox: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.raise_on_send = False
        self._failing_recipients: set[str] = set()

    def configure(
        self, should_succeed: bool = True, failure_reason: str = "Email delivery failed", raise_on_send=False
    ):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.raise_on_send = raise_on_send

    def fail_for(self, *addresses: str) -> None:
        self._failing_recipients.update(addresses)

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        failing = not self.should_succeed or to in self._failing_recipients
        if failing and self.raise_on_send:
            raise ConnectionError(self.failure_reason)
        if failing:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"mail-{uuid4().hex[:12]}"
        self.outbox.append(
            {
                "message_id": message_id,
                "to": to,
                "subject": subject,
                "body": body,
                "html_body": html_body,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def sent_to(self, address: str) -> list[dict]:
        return [mail for mail in self.outbox if mail["to"] == address]

    def reset(self):
        self.outbox.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.raise_on_send = False
        self._failing_recipients.clear()
