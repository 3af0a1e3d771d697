"""Shared formatting helpers for notification templates."""

import os

CURRENCY_SYMBOL = "₹"


def store_name() -> str:
    return os.getenv("STORE_NAME", "Cutiefy")


def money(amount) -> str:
    """Render an amount with the store currency, dropping a zero fraction."""
    value = float(amount or 0)
    if value.is_integer():
        return f"{CURRENCY_SYMBOL}{int(value)}"
    return f"{CURRENCY_SYMBOL}{value:.2f}"


def item_lines(cart_items) -> list[str]:
    return [f"- {item['name']} x{item['quantity']} - {money(item['price'])}" for item in cart_items or []]
