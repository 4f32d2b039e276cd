"""
email_channel.py — Email notification sender.

Output:
    📧 Sending Email to cliente@email.com
       Subject: Order Confirmation
       Message: Your order 12345 has been confirmed!

``is_html`` describes the body format a real transport would use; the
simulated output is plain text either way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from notifier.notifications.channels.base import ConsoleSender
from notifier.notifications.models import NotificationChannel
from notifier.notifications.templates import MessageCatalog


@dataclass
class EmailSender(ConsoleSender):
    channel = NotificationChannel.EMAIL
    display_name = "Email"
    icon = "📧"

    recipient: str
    subject: str = ""
    is_html: bool = True

    def _body_lines(
        self, message: str, subject: Optional[str], catalog: MessageCatalog
    ) -> List[str]:
        # An explicit subject wins over the one stored on the sender
        return [
            f"{catalog.label('subject')}: {subject or self.subject}",
            f"{catalog.label('message')}: {message}",
        ]
