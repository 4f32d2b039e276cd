"""
factories.py — Sender factories and the channel registry.

A factory is any callable ``recipient -> Sender``. The built-in factories
bind the recipient and apply the channel defaults from settings:

    Key         Factory                   Defaults
    ────────    ──────────────────────    ────────────────────────────
    email       create_email_sender       is_html = EMAIL_USE_HTML
    sms         create_sms_sender         —
    push        create_push_sender        badge = PUSH_DEFAULT_BADGE
    whatsapp    create_whatsapp_sender    use_template = WHATSAPP_USE_TEMPLATE

The registry maps channel keys to factories. Keys are stored lower-case and
looked up case-insensitively. A registry never changes after construction;
``with_channel`` returns a new one, so a registry can be shared freely.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional, Tuple

from notifier.core.config import settings
from notifier.notifications.channels import (
    EmailSender,
    PushSender,
    Sender,
    SmsSender,
    WhatsAppSender,
)
from notifier.notifications.models import NotificationChannel

SenderFactory = Callable[[str], Sender]


# ═══════════════════════════════════════════════════════════════════════════
# Built-in factories
# ═══════════════════════════════════════════════════════════════════════════

def create_email_sender(recipient: str) -> EmailSender:
    return EmailSender(recipient=recipient, is_html=settings.EMAIL_USE_HTML)


def create_sms_sender(recipient: str) -> SmsSender:
    return SmsSender(phone_number=recipient)


def create_push_sender(recipient: str) -> PushSender:
    return PushSender(device_token=recipient, badge=settings.PUSH_DEFAULT_BADGE)


def create_whatsapp_sender(recipient: str) -> WhatsAppSender:
    return WhatsAppSender(
        phone_number=recipient,
        use_template=settings.WHATSAPP_USE_TEMPLATE,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Channel Registry
# ═══════════════════════════════════════════════════════════════════════════

def _normalise_key(key: str) -> str:
    return key.lower()


class ChannelRegistry:
    """Read-only mapping from channel key to sender factory."""

    def __init__(self, factories: Mapping[str, SenderFactory]):
        normalised = {}
        for key, factory in factories.items():
            if not callable(factory):
                raise TypeError(f"Factory for channel '{key}' is not callable")
            normalised[_normalise_key(str(key))] = factory
        self._factories = MappingProxyType(normalised)

    def get(self, key: str) -> Optional[SenderFactory]:
        """Case-insensitive lookup; None when the key is unknown."""
        return self._factories.get(_normalise_key(key))

    def with_channel(self, key: str, factory: SenderFactory) -> "ChannelRegistry":
        """Return a new registry with ``key`` added (or replaced)."""
        return ChannelRegistry({**self._factories, key: factory})

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(sorted(self._factories))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _normalise_key(key) in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"ChannelRegistry({', '.join(self.keys)})"


def build_default_registry() -> ChannelRegistry:
    """Registry with the four built-in channels."""
    return ChannelRegistry({
        NotificationChannel.EMAIL.value:    create_email_sender,
        NotificationChannel.SMS.value:      create_sms_sender,
        NotificationChannel.PUSH.value:     create_push_sender,
        NotificationChannel.WHATSAPP.value: create_whatsapp_sender,
    })
