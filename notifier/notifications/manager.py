"""
manager.py — Resolves channel keys to senders and sends order messages.

═══════════════════════════════════════════════════════════════════════════
DISPATCH FLOW
═══════════════════════════════════════════════════════════════════════════

    send_order_confirmation(recipient, order_number, "EMAIL")
              │
              ▼
    resolve("EMAIL", recipient)      registry lookup, case-insensitive
              │
        ┌─────┴──────────────┐
        │ hit                │ miss
        ▼                    ▼
    factory(recipient)   Resolution(error=UnsupportedChannelError)
        │                    │
        ▼                    ▼
    render template      raised to the caller by unwrap()
    (amount formatted)
        │
        ▼
    sender.send(msg, subj)

Callers that prefer not to handle exceptions can use ``resolve`` directly
and inspect the returned Resolution. The ``send_*`` operations raise.

Every call is independent: a fresh sender is built per message and the
manager keeps no state besides its (read-only) registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from notifier.core.errors import UnsupportedChannelError
from notifier.core.logging_config import dispatch_context
from notifier.notifications.channels import Sender
from notifier.notifications.factories import ChannelRegistry, build_default_registry
from notifier.notifications.models import NotificationTemplate
from notifier.notifications.templates import Amount, format_currency, get_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a channel key: a sender or an error, never both."""
    channel_key: str
    sender: Optional[Sender] = None
    error: Optional[UnsupportedChannelError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.sender is not None

    def unwrap(self) -> Sender:
        """Return the sender, or raise the carried error."""
        if self.sender is None:
            raise self.error or UnsupportedChannelError(self.channel_key)
        return self.sender


class NotificationManager:
    """
    Sends the canned order notifications over any registered channel.

    Parameters
    ----------
    registry : ChannelRegistry | None
        Channel key → factory mapping. Defaults to the built-in channels.
    """

    def __init__(self, registry: Optional[ChannelRegistry] = None):
        self._registry = registry if registry is not None else build_default_registry()

    @property
    def registry(self) -> ChannelRegistry:
        return self._registry

    @property
    def supported_channels(self) -> Tuple[str, ...]:
        return self._registry.keys

    def resolve(self, channel_key: str, recipient: str) -> Resolution:
        """
        Build a sender for ``recipient`` on the channel named ``channel_key``.

        Returns
        -------
        Resolution
            ``ok`` with the sender on success; carrying an
            UnsupportedChannelError when no factory matches the key.
        """
        factory = self._registry.get(channel_key)
        if factory is None:
            logger.warning(
                "Unsupported channel '%s' (supported: %s)",
                channel_key, ", ".join(self.supported_channels),
                extra={"channel_key": channel_key},
            )
            return Resolution(
                channel_key=channel_key,
                error=UnsupportedChannelError(channel_key, self.supported_channels),
            )

        sender = factory(recipient)
        logger.debug(
            "Resolved '%s' → %s", channel_key, type(sender).__name__,
            extra={"channel_key": channel_key, "sender": type(sender).__name__},
        )
        return Resolution(channel_key=channel_key, sender=sender)

    def _dispatch(
        self,
        template: NotificationTemplate,
        recipient: str,
        channel_key: str,
        amount: Optional[Amount] = None,
        **fields,
    ) -> None:
        with dispatch_context(channel=channel_key, template=template.value):
            sender = self.resolve(channel_key, recipient).unwrap()
            catalog = get_catalog()
            # Money is formatted only once the channel is known to exist
            if amount is not None:
                fields["amount"] = format_currency(amount, catalog)
            message, subject = catalog.render(template, **fields)
            sender.send(message, subject)

    def send_order_confirmation(
        self, recipient: str, order_number: str, channel_key: str
    ) -> None:
        self._dispatch(
            NotificationTemplate.ORDER_CONFIRMATION,
            recipient,
            channel_key,
            order_number=order_number,
        )

    def send_shipping_update(
        self, recipient: str, tracking_code: str, channel_key: str
    ) -> None:
        self._dispatch(
            NotificationTemplate.SHIPPING_UPDATE,
            recipient,
            channel_key,
            tracking_code=tracking_code,
        )

    def send_payment_reminder(
        self, recipient: str, amount: Amount, channel_key: str
    ) -> None:
        """Send a payment reminder; ``amount`` is shown with two decimals."""
        self._dispatch(
            NotificationTemplate.PAYMENT_REMINDER,
            recipient,
            channel_key,
            amount=amount,
        )
