"""Port every order-mail backend implements."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    """Sends one plain-text mail, optionally with an HTML alternative.

    Adapters report failure through the returned dict instead of raising,
    although the dispatcher also tolerates adapters that raise.
    """

    backend: str = "abstract"

    @abstractmethod
    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        """Deliver a single mail to ``to``.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
