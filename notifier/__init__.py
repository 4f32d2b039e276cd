"""
notifier — Order notifications over email, SMS, push and WhatsApp.

Senders are built by per-channel factories and looked up by channel key:

    from notifier import NotificationManager

    manager = NotificationManager()
    manager.send_order_confirmation("cliente@email.com", "12345", "email")
"""

from notifier.notifications.manager import NotificationManager

__version__ = "1.0.0"

__all__ = ["NotificationManager", "__version__"]
