"""
channels — Per-channel senders.

Each sender is bound to one recipient and exposes:
    send(message, subject=None) → None

Senders are created fresh per message by the factories.
"""

from notifier.notifications.channels.base import ConsoleSender, Sender
from notifier.notifications.channels.email_channel import EmailSender
from notifier.notifications.channels.push_channel import PushSender
from notifier.notifications.channels.sms_channel import SmsSender
from notifier.notifications.channels.whatsapp_channel import WhatsAppSender

__all__ = [
    "ConsoleSender",
    "EmailSender",
    "PushSender",
    "Sender",
    "SmsSender",
    "WhatsAppSender",
]
