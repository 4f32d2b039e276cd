"""
notifications — Order notification dispatch.

Sub-modules:
    channels    — Sender capability and the per-channel senders
    factories   — Sender factories + case-insensitive channel registry
    manager     — Channel resolution and the canned order messages
    templates   — Localised message catalogues, currency formatting
    models      — Data structures shared across the system
"""

from notifier.notifications.factories import (
    ChannelRegistry,
    SenderFactory,
    build_default_registry,
)
from notifier.notifications.manager import NotificationManager, Resolution

__all__ = [
    "ChannelRegistry",
    "NotificationManager",
    "Resolution",
    "SenderFactory",
    "build_default_registry",
]
