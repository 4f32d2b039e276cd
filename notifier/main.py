"""
Demo entry point — one customer per channel.

Run with:
    notifier-demo

Or from the project root:
    python -m notifier.main

Set NOTIFIER_LANGUAGE=pt-BR for the Portuguese texts and
NOTIFIER_LOG_LEVEL=DEBUG to see dispatch logs on stderr.
"""

from __future__ import annotations

from decimal import Decimal

from notifier.core.config import settings
from notifier.core.logging_config import get_logger, setup_logging
from notifier.notifications.manager import NotificationManager
from notifier.notifications.templates import get_catalog

logger = get_logger(__name__)


def run_demo(manager: NotificationManager) -> None:
    print(get_catalog().label("banner"))
    print()

    # Customer 1 prefers email
    manager.send_order_confirmation("cliente@email.com", "12345", "email")
    print()

    # Customer 2 prefers SMS
    manager.send_order_confirmation("+5511999999999", "12346", "sms")
    print()

    # Customer 3 prefers push
    manager.send_shipping_update("device-token-abc123", "BR123456789", "push")
    print()

    # Customer 4 prefers WhatsApp
    manager.send_payment_reminder("+5511888888888", Decimal("150.00"), "whatsapp")


def main() -> int:
    setup_logging()
    logger.info(
        "Starting %s v%s [%s]",
        settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT,
    )
    run_demo(NotificationManager())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
