"""Notification dispatcher — best-effort e-mail for order lifecycle events.

``notify`` renders every template registered for the event kind and hands the
mail to the configured channel adapter. Delivery problems are logged as
``NotificationError`` and swallowed: a notification never blocks or undoes
the order transition that triggered it.
"""

import os

import structlog

from notifications.channel import get_channel
from notifications.kinds import Audience
from notifications.templates import get_templates
from shared.exceptions import NotificationError

logger = structlog.get_logger(__name__)


def _recipient_for(audience: str, payload: dict) -> str | None:
    if audience == Audience.ADMIN.value:
        return os.getenv("ADMIN_EMAIL")
    return payload.get("email")


def _deliver(kind: str, template_cls, payload: dict) -> dict:
    recipient = _recipient_for(template_cls.audience, payload)
    if not recipient:
        raise NotificationError(kind, f"no {template_cls.audience.lower()} address configured")

    try:
        channel = get_channel()
        rendered = template_cls.render(payload)
        result = channel.send(
            to=recipient,
            subject=rendered["subject"],
            body=rendered["body"],
        )
    except Exception as exc:
        raise NotificationError(kind, str(exc), recipient) from exc

    if result.get("status") != "sent":
        raise NotificationError(kind, result.get("error", "Unknown dispatch error"), recipient)

    return {**result, "to": recipient, "audience": template_cls.audience, "backend": channel.backend}


def notify(kind: str, payload: dict) -> list[dict]:
    """Send every mail registered for ``kind``. Never raises.

    Returns:
        One result dict per template, with ``status`` "sent" or "failed".
    """
    try:
        templates = get_templates(kind)
    except ValueError as exc:
        logger.error("Unknown notification kind", kind=kind, error=str(exc))
        return []

    results = []
    for template_cls in templates:
        try:
            results.append(_deliver(kind, template_cls, payload))
        except NotificationError as exc:
            logger.error(
                "Notification delivery failed",
                kind=kind,
                audience=template_cls.audience,
                recipient=exc.recipient,
                order_id=payload.get("order_id"),
                error=exc.reason,
            )
            results.append(
                {
                    "message_id": None,
                    "status": "failed",
                    "error": exc.reason,
                    "to": exc.recipient,
                    "audience": template_cls.audience,
                }
            )
        else:
            logger.info(
                "Notification sent",
                kind=kind,
                audience=template_cls.audience,
                backend=results[-1]["backend"],
                order_id=payload.get("order_id"),
            )

    return results
