"""
test_senders.py — Tests for the per-channel senders.

Covers:
    • Output format per channel (icon, header, labelled lines)
    • Uniform recipient accessor and its channel-specific aliases
    • Stored subject / title fallback
    • Sender protocol conformance
    • No state change between sends

Run with:
    pytest tests/test_senders.py -v
"""

from __future__ import annotations

import pytest

from notifier.core.config import settings
from notifier.notifications.channels import (
    ConsoleSender,
    EmailSender,
    PushSender,
    Sender,
    SmsSender,
    WhatsAppSender,
)
from notifier.notifications.models import NotificationChannel, RenderedMessage


@pytest.fixture(autouse=True)
def _english(monkeypatch):
    """Pin the catalogue language so labels are predictable."""
    monkeypatch.setattr(settings, "LANGUAGE", "en")


# ═══════════════════════════════════════════════════════════════════════════
# Section 1: Output Format
# ═══════════════════════════════════════════════════════════════════════════

class TestEmailSender:
    """Test EmailSender output."""

    def test_render_lines(self):
        rendered = EmailSender("cliente@email.com").render(
            "Your order 12345 has been confirmed!", "Order Confirmation"
        )
        assert rendered.lines == (
            "📧 Sending Email to cliente@email.com",
            "   Subject: Order Confirmation",
            "   Message: Your order 12345 has been confirmed!",
        )

    def test_send_prints_rendered_text(self, capsys):
        EmailSender("a@b.com").send("Hello", "Hi")
        out = capsys.readouterr().out
        assert out == "📧 Sending Email to a@b.com\n   Subject: Hi\n   Message: Hello\n"

    def test_stored_subject_used_when_none_given(self):
        sender = EmailSender("a@b.com", subject="Newsletter")
        rendered = sender.render("Hello")
        assert "   Subject: Newsletter" in rendered.lines

    def test_explicit_subject_overrides_stored(self):
        sender = EmailSender("a@b.com", subject="Newsletter")
        rendered = sender.render("Hello", "Promo")
        assert "   Subject: Promo" in rendered.lines
        assert sender.subject == "Newsletter"

    def test_html_by_default(self):
        assert EmailSender("a@b.com").is_html is True


class TestSmsSender:
    """Test SmsSender output and recipient alias."""

    def test_render_ignores_subject(self):
        rendered = SmsSender("+5511999999999").render("Code 42", "Ignored")
        assert rendered.lines == (
            "📱 Sending SMS to +5511999999999",
            "   Message: Code 42",
        )

    def test_recipient_aliases_phone_number(self):
        sender = SmsSender("+5511999999999")
        assert sender.recipient == "+5511999999999"
        sender.recipient = "+5511000000000"
        assert sender.phone_number == "+5511000000000"


class TestPushSender:
    """Test PushSender output, title and badge."""

    def test_render_lines(self):
        rendered = PushSender("device-token-abc123").render(
            "Your order has shipped! Tracking code: BR123456789", "Order Shipped"
        )
        assert rendered.lines == (
            "🔔 Sending Push to device device-token-abc123",
            "   Title: Order Shipped",
            "   Message: Your order has shipped! Tracking code: BR123456789",
        )

    def test_stored_title_used_when_subject_empty(self):
        rendered = PushSender("tok", title="Sale").render("50% off", "")
        assert "   Title: Sale" in rendered.lines

    def test_recipient_aliases_device_token(self):
        sender = PushSender("tok")
        assert sender.recipient == "tok"
        sender.recipient = "tok2"
        assert sender.device_token == "tok2"

    def test_badge_default(self):
        assert PushSender("tok").badge == 1


class TestWhatsAppSender:
    """Test WhatsAppSender output."""

    def test_render_lines(self):
        rendered = WhatsAppSender("+5511888888888").render(
            "You have a pending payment of R$ 150.00", "Payment Reminder"
        )
        assert rendered.lines == (
            "💬 Sending WhatsApp to +5511888888888",
            "   Message: You have a pending payment of R$ 150.00",
            "   Template: True",
        )

    def test_template_flag_shown(self):
        rendered = WhatsAppSender("+55", use_template=False).render("Hi")
        assert rendered.lines[-1] == "   Template: False"

    def test_recipient_aliases_phone_number(self):
        sender = WhatsAppSender("+5511888888888")
        assert sender.recipient == sender.phone_number


# ═══════════════════════════════════════════════════════════════════════════
# Section 2: Common Behaviour
# ═══════════════════════════════════════════════════════════════════════════

ALL_SENDERS = [
    (EmailSender, NotificationChannel.EMAIL),
    (SmsSender, NotificationChannel.SMS),
    (PushSender, NotificationChannel.PUSH),
    (WhatsAppSender, NotificationChannel.WHATSAPP),
]


class TestSenderContract:
    """Behaviour shared by every built-in sender."""

    @pytest.mark.parametrize("cls,channel", ALL_SENDERS)
    def test_conforms_to_protocol(self, cls, channel):
        sender = cls("someone")
        assert isinstance(sender, Sender)
        assert isinstance(sender, ConsoleSender)
        assert sender.channel is channel

    @pytest.mark.parametrize("cls,channel", ALL_SENDERS)
    def test_rendered_message_metadata(self, cls, channel):
        rendered = cls("someone").render("hello", "subject")
        assert isinstance(rendered, RenderedMessage)
        assert rendered.channel == channel.value
        assert rendered.recipient == "someone"

    @pytest.mark.parametrize("cls,channel", ALL_SENDERS)
    def test_repeated_sends_are_identical(self, cls, channel, capsys):
        sender = cls("someone")
        sender.send("hello", "subject")
        first = capsys.readouterr().out
        sender.send("hello", "subject")
        second = capsys.readouterr().out
        assert first == second
        assert first

    def test_any_string_accepted(self, capsys):
        SmsSender("").send("")
        assert capsys.readouterr().out == "📱 Sending SMS to \n   Message: \n"

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            ConsoleSender()


class TestPortugueseLabels:
    """Labels follow the configured language."""

    def test_email_labels(self, monkeypatch):
        monkeypatch.setattr(settings, "LANGUAGE", "pt-BR")
        rendered = EmailSender("a@b.com").render("Olá", "Oi")
        assert rendered.lines == (
            "📧 Enviando Email para a@b.com",
            "   Assunto: Oi",
            "   Mensagem: Olá",
        )

    def test_push_labels(self, monkeypatch):
        monkeypatch.setattr(settings, "LANGUAGE", "pt-BR")
        rendered = PushSender("tok").render("Olá", "Oi")
        assert rendered.lines[0] == "🔔 Enviando Push para dispositivo tok"
        assert rendered.lines[1] == "   Título: Oi"
