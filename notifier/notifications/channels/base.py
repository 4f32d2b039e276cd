"""
base.py — The Sender capability shared by every channel.

    Sender (Protocol)
        .channel     NotificationChannel / key the sender belongs to
        .recipient   uniform recipient accessor (alias on SMS/push/WhatsApp)
        .send(message, subject=None) → None

ConsoleSender implements ``send`` once for all built-in channels: it
renders the message into labelled lines and writes them to stdout.
Subclasses only describe their own lines.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Protocol, runtime_checkable

from notifier.notifications.models import NotificationChannel, RenderedMessage
from notifier.notifications.templates import MessageCatalog, get_catalog

logger = logging.getLogger(__name__)

INDENT = "   "


@runtime_checkable
class Sender(Protocol):
    """Anything that can deliver a message to the recipient it is bound to."""

    @property
    def recipient(self) -> str: ...

    def send(self, message: str, subject: Optional[str] = None) -> None: ...


class ConsoleSender(ABC):
    """Simulated delivery: formatted text on standard output."""

    channel: ClassVar[NotificationChannel]
    display_name: ClassVar[str]
    icon: ClassVar[str]

    # Provided by subclasses (field or property)
    recipient: str

    def _target(self, catalog: MessageCatalog) -> str:
        return self.recipient

    @abstractmethod
    def _body_lines(
        self, message: str, subject: Optional[str], catalog: MessageCatalog
    ) -> List[str]:
        """Lines printed under the header, without indentation."""

    def render(self, message: str, subject: Optional[str] = None) -> RenderedMessage:
        catalog = get_catalog()
        header = (
            f"{self.icon} {catalog.label('sending')} {self.display_name} "
            f"{catalog.label('to')} {self._target(catalog)}"
        )
        body = [INDENT + line for line in self._body_lines(message, subject, catalog)]
        return RenderedMessage(
            channel=self.channel.value,
            recipient=self.recipient,
            lines=(header, *body),
        )

    def send(self, message: str, subject: Optional[str] = None) -> None:
        rendered = self.render(message, subject)
        logger.debug(
            "[%s] → %s (%d lines)",
            self.channel.name, self.recipient, len(rendered.lines),
            extra={"channel": self.channel.value},
        )
        print(rendered.text)
