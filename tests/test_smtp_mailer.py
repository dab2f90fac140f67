from __future__ import annotations

import smtplib

import pytest

from app.infrastructure.mail import smtp_mailer
from app.infrastructure.mail.smtp_mailer import SmtpMailSender


class FakeSMTP:
    instances: list["FakeSMTP"] = []
    fail_login = False

    def __init__(self, host, port, context=None, timeout=None):
        self.host = host
        self.port = port
        self.sent: list[tuple[str, list[str], str]] = []
        self.tls = False
        self.closed = False
        FakeSMTP.instances.append(self)

    def starttls(self, context=None):
        self.tls = True

    def login(self, username, password):
        if FakeSMTP.fail_login:
            raise smtplib.SMTPAuthenticationError(535, b"bad credentials")
        self.username = username

    def sendmail(self, from_addr, to_addrs, msg):
        self.sent.append((from_addr, to_addrs, msg))

    def quit(self):
        self.closed = True


@pytest.fixture(autouse=True)
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    FakeSMTP.fail_login = False
    monkeypatch.setattr(smtp_mailer.smtplib, "SMTP_SSL", FakeSMTP)
    monkeypatch.setattr(smtp_mailer.smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


def test_send_over_ssl():
    sender = SmtpMailSender(username="me@gmail.com", password="app-pass", host="smtp.gmail.com", port=465)

    assert sender.send("a@x.com", "Booking Confirmation - X", "<h2>Hi</h2>") is True

    server = FakeSMTP.instances[0]
    assert server.port == 465
    assert server.tls is False
    assert server.closed is True
    from_addr, to_addrs, msg = server.sent[0]
    assert from_addr == "me@gmail.com"
    assert to_addrs == ["a@x.com"]
    assert "Subject: Booking Confirmation - X" in msg


def test_send_with_starttls_on_other_ports():
    sender = SmtpMailSender(username="me@gmail.com", password="app-pass", host="smtp.test", port=587)
    assert sender.send("a@x.com", "s", "<p>x</p>") is True
    assert FakeSMTP.instances[0].tls is True


def test_send_returns_false_on_smtp_error():
    FakeSMTP.fail_login = True
    sender = SmtpMailSender(username="me@gmail.com", password="wrong", host="smtp.gmail.com", port=465)

    assert sender.send("a@x.com", "s", "<p>x</p>") is False
    assert FakeSMTP.instances[0].closed is True


def test_credentials_required(monkeypatch):
    monkeypatch.setattr(smtp_mailer.settings, "EMAIL_USER", None)
    monkeypatch.setattr(smtp_mailer.settings, "EMAIL_APP_PASSWORD", None)
    with pytest.raises(ValueError):
        SmtpMailSender()
