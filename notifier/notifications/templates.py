"""
templates.py — Message catalogues and currency formatting.

Each supported language has a MessageCatalog holding:
    • the three order templates (body + subject)
    • the labels senders use when printing ("Sending", "Subject", ...)
    • the separators used to format money

═══════════════════════════════════════════════════════════════════════════
CURRENCY FORMAT
═══════════════════════════════════════════════════════════════════════════

    Language    Example            Thousands    Decimal
    ────────    ───────────────    ─────────    ───────
    en          R$ 1,234.50        ,            .
    pt-BR       R$ 1.234,50        .            ,

Amounts are quantised to two decimals with ROUND_HALF_UP.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from notifier.core.config import settings
from notifier.notifications.models import NotificationTemplate

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class MessageCatalog:
    """Localised texts for one language."""
    language: str
    messages: Mapping[NotificationTemplate, Tuple[str, str]]
    labels: Mapping[str, str]
    thousands_separator: str = ","
    decimal_separator: str = "."

    def render(self, template: NotificationTemplate, **fields: Any) -> Tuple[str, str]:
        """Return ``(message, subject)`` for a template."""
        body, subject = self.messages[template]
        return body.format(**fields), subject

    def label(self, key: str) -> str:
        return self.labels[key]


CATALOGS: Dict[str, MessageCatalog] = {
    "en": MessageCatalog(
        language="en",
        messages={
            NotificationTemplate.ORDER_CONFIRMATION: (
                "Your order {order_number} has been confirmed!",
                "Order Confirmation",
            ),
            NotificationTemplate.SHIPPING_UPDATE: (
                "Your order has shipped! Tracking code: {tracking_code}",
                "Order Shipped",
            ),
            NotificationTemplate.PAYMENT_REMINDER: (
                "You have a pending payment of {amount}",
                "Payment Reminder",
            ),
        },
        labels={
            "sending": "Sending",
            "to": "to",
            "device": "device",
            "subject": "Subject",
            "title": "Title",
            "message": "Message",
            "template": "Template",
            "banner": "=== Notification System (Factory Method) ===",
        },
    ),
    "pt-BR": MessageCatalog(
        language="pt-BR",
        messages={
            NotificationTemplate.ORDER_CONFIRMATION: (
                "Seu pedido {order_number} foi confirmado!",
                "Confirmação de Pedido",
            ),
            NotificationTemplate.SHIPPING_UPDATE: (
                "Seu pedido foi enviado! Código de rastreamento: {tracking_code}",
                "Pedido Enviado",
            ),
            NotificationTemplate.PAYMENT_REMINDER: (
                "Você tem um pagamento pendente de {amount}",
                "Lembrete de Pagamento",
            ),
        },
        labels={
            "sending": "Enviando",
            "to": "para",
            "device": "dispositivo",
            "subject": "Assunto",
            "title": "Título",
            "message": "Mensagem",
            "template": "Template",
            "banner": "=== Sistema de Notificações (Factory Method) ===",
        },
        thousands_separator=".",
        decimal_separator=",",
    ),
}

DEFAULT_LANGUAGE = "en"


def get_catalog(language: Optional[str] = None) -> MessageCatalog:
    """
    Look up the catalogue for a language tag (case-insensitive).

    Falls back to English when the language is unknown.
    """
    language = language or settings.LANGUAGE
    for tag, catalog in CATALOGS.items():
        if tag.lower() == language.lower():
            return catalog

    logger.warning(
        "Unknown language '%s', falling back to '%s'", language, DEFAULT_LANGUAGE
    )
    return CATALOGS[DEFAULT_LANGUAGE]


def format_currency(
    amount: Amount,
    catalog: Optional[MessageCatalog] = None,
    symbol: Optional[str] = None,
) -> str:
    """
    Format an amount as money with exactly two decimals.

    >>> format_currency(Decimal("1234.5"), CATALOGS["en"], "R$")
    'R$ 1,234.50'
    """
    catalog = catalog or get_catalog()
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        if not value.is_finite():
            raise InvalidOperation(f"non-finite amount {value}")
        value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {amount!r}") from exc

    # Format with "," / "." first, then swap to the catalogue separators
    text = f"{value:,.2f}"
    text = "".join(
        catalog.thousands_separator if ch == ","
        else catalog.decimal_separator if ch == "."
        else ch
        for ch in text
    )
    return f"{symbol} {text}"
