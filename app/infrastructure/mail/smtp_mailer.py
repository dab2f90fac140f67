from __future__ import annotations

import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from app.application.ports.mail_sender import MailSenderPort
from app.core.config import settings


class SmtpMailSender(MailSenderPort):
    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        host: str | None = None,
        port: int | None = None,
        from_address: str | None = None,
    ) -> None:
        self._username = username or settings.EMAIL_USER
        self._password = password or settings.EMAIL_APP_PASSWORD
        self._host = host or settings.SMTP_HOST
        self._port = port or settings.SMTP_PORT
        self._from_address = from_address or settings.EMAIL_FROM or self._username
        self._logger = logging.getLogger(__name__)

        if not self._username or not self._password:
            raise ValueError("EMAIL_USER and EMAIL_APP_PASSWORD are required for SMTP")

    def send(self, to: str, subject: str, html: str) -> bool:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self._from_address
        msg["To"] = to
        msg.attach(MIMEText(html, "html"))

        context = ssl.create_default_context()
        try:
            if self._port == 465:
                server = smtplib.SMTP_SSL(self._host, self._port, context=context, timeout=30)
            else:
                server = smtplib.SMTP(self._host, self._port, timeout=30)
                server.starttls(context=context)
            try:
                server.login(self._username, self._password)
                server.sendmail(self._from_address, [to], msg.as_string())
            finally:
                server.quit()
        except (smtplib.SMTPException, OSError) as e:
            self._logger.error("SMTP send failed", extra={"recipient": to, "error": str(e)})
            return False

        self._logger.info("Email sent", extra={"recipient": to})
        return True
