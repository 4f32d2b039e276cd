"""
push_channel.py — Mobile push notification sender.

Output:
    🔔 Sending Push to device device-token-abc123
       Title: Order Shipped
       Message: Your order has shipped! Tracking code: BR123456789

The subject passed to ``send`` is used as the notification title; when it
is empty the sender's own ``title`` is shown instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from notifier.notifications.channels.base import ConsoleSender
from notifier.notifications.models import NotificationChannel
from notifier.notifications.templates import MessageCatalog


@dataclass
class PushSender(ConsoleSender):
    channel = NotificationChannel.PUSH
    display_name = "Push"
    icon = "🔔"

    device_token: str
    title: str = ""
    badge: int = 1

    @property
    def recipient(self) -> str:
        return self.device_token

    @recipient.setter
    def recipient(self, value: str) -> None:
        self.device_token = value

    def _target(self, catalog: MessageCatalog) -> str:
        return f"{catalog.label('device')} {self.device_token}"

    def _body_lines(
        self, message: str, subject: Optional[str], catalog: MessageCatalog
    ) -> List[str]:
        return [
            f"{catalog.label('title')}: {subject or self.title}",
            f"{catalog.label('message')}: {message}",
        ]
