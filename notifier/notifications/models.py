"""
models.py — Shared data structures for the notification system.

Defines:
    • NotificationChannel  — delivery channel enum (registry keys)
    • NotificationTemplate — the canned order messages
    • RenderedMessage      — formatted output of a single send

═══════════════════════════════════════════════════════════════════════════
CHANNELS
═══════════════════════════════════════════════════════════════════════════

    Key         Recipient identifier      Channel-specific fields
    ────────    ─────────────────────     ──────────────────────────
    email       e-mail address            subject, is_html (True)
    sms         phone number              —
    push        device token              title, badge (1)
    whatsapp    phone number              use_template (True)

Recipient identifiers are opaque strings; no validation is performed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class NotificationChannel(str, Enum):
    """Built-in delivery channels. Values are the registry keys."""
    EMAIL    = "email"
    SMS      = "sms"
    PUSH     = "push"
    WHATSAPP = "whatsapp"


class NotificationTemplate(str, Enum):
    """Canned messages the manager knows how to send."""
    ORDER_CONFIRMATION = "order_confirmation"
    SHIPPING_UPDATE    = "shipping_update"
    PAYMENT_REMINDER   = "payment_reminder"


@dataclass(frozen=True)
class RenderedMessage:
    """Text produced by a sender for one message, one line per entry."""
    channel: str
    recipient: str
    lines: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
