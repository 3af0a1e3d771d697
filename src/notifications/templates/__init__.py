"""Template registry — maps a notification kind to the templates it sends.

An order-placed event produces two mails: the customer confirmation and the
admin alert. Each template knows its audience and how to render content from
the event payload.
"""

from notifications.kinds import NotificationKind
from notifications.templates.new_order_alert import NewOrderAlertTemplate
from notifications.templates.order_dispatched import OrderDispatchedTemplate
from notifications.templates.order_placed import OrderPlacedTemplate

TEMPLATE_REGISTRY: dict[str, list[type]] = {
    NotificationKind.ORDER_PLACED.value: [OrderPlacedTemplate, NewOrderAlertTemplate],
    NotificationKind.ORDER_DISPATCHED.value: [OrderDispatchedTemplate],
}


def get_templates(kind: str) -> list[type]:
    """Look up the template classes for a notification kind."""
    templates = TEMPLATE_REGISTRY.get(kind)
    if templates is None:
        raise ValueError(f"No template registered for notification kind: {kind}")
    return templates
