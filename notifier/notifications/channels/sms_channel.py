"""
sms_channel.py — SMS notification sender.

SMS has no subject line, so the subject passed to ``send`` is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from notifier.notifications.channels.base import ConsoleSender
from notifier.notifications.models import NotificationChannel
from notifier.notifications.templates import MessageCatalog


@dataclass
class SmsSender(ConsoleSender):
    channel = NotificationChannel.SMS
    display_name = "SMS"
    icon = "📱"

    phone_number: str

    @property
    def recipient(self) -> str:
        return self.phone_number

    @recipient.setter
    def recipient(self, value: str) -> None:
        self.phone_number = value

    def _body_lines(
        self, message: str, subject: Optional[str], catalog: MessageCatalog
    ) -> List[str]:
        return [f"{catalog.label('message')}: {message}"]
