"""
whatsapp_channel.py — WhatsApp notification sender.

Business messages outside a conversation window must go through an
approved template, hence ``use_template`` defaults to True. The subject
is not shown.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from notifier.notifications.channels.base import ConsoleSender
from notifier.notifications.models import NotificationChannel
from notifier.notifications.templates import MessageCatalog


@dataclass
class WhatsAppSender(ConsoleSender):
    channel = NotificationChannel.WHATSAPP
    display_name = "WhatsApp"
    icon = "💬"

    phone_number: str
    use_template: bool = True

    @property
    def recipient(self) -> str:
        return self.phone_number

    @recipient.setter
    def recipient(self, value: str) -> None:
        self.phone_number = value

    def _body_lines(
        self, message: str, subject: Optional[str], catalog: MessageCatalog
    ) -> List[str]:
        return [
            f"{catalog.label('message')}: {message}",
            f"{catalog.label('template')}: {self.use_template}",
        ]
