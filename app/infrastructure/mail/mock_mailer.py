from __future__ import annotations

import logging

from app.application.ports.mail_sender import MailSenderPort


class MockMailSender(MailSenderPort):
    def __init__(self) -> None:
        self.sent: list[dict[str, str]] = []
        self._logger = logging.getLogger(__name__)

    def send(self, to: str, subject: str, html: str) -> bool:
        self.sent.append({"to": to, "subject": subject, "html": html})
        self._logger.info("Mock email send", extra={"recipient": to, "subject": subject})
        return True
