from __future__ import annotations

import logging

from app.application.exceptions import MailError
from app.application.ports.booking_store import BookingStorePort
from app.application.ports.mail_sender import MailSenderPort
from app.application.utils.confirmation_emails import (
    client_email_html,
    client_subject,
    owner_email_html,
    owner_subject,
)
from app.application.utils.state_helpers import load_booking, require_booking_id


class SendConfirmationUseCase:
    def __init__(self, store: BookingStorePort, mailer: MailSenderPort, owner_email: str | None) -> None:
        self._store = store
        self._mailer = mailer
        self._owner_email = owner_email
        self._logger = logging.getLogger(__name__)

    def execute(self, booking_id: str | None) -> None:
        """
        Send the client confirmation, then the owner notification.
        A failed owner email does not undo the client email.
        """
        booking_id = require_booking_id(booking_id)
        with self._store.locked(booking_id):
            booking = load_booking(self._store, booking_id)
            if not self._owner_email:
                raise MailError("OWNER_EMAIL is not configured")

            self._send(booking_id, booking.email, client_subject(booking), client_email_html(booking))
            self._send(booking_id, self._owner_email, owner_subject(booking), owner_email_html(booking))

        self._logger.info("Confirmation emails sent", extra={"booking_id": booking_id})

    def _send(self, booking_id: str, to: str, subject: str, html: str) -> None:
        try:
            sent = self._mailer.send(to=to, subject=subject, html=html)
        except Exception as e:
            self._logger.exception(
                "Send emails error",
                extra={"booking_id": booking_id, "operation": "send_confirmation_emails", "recipient": to},
            )
            raise MailError(str(e) or f"Failed to send email to {to}") from e
        if not sent:
            self._logger.error(
                "Send emails error",
                extra={"booking_id": booking_id, "operation": "send_confirmation_emails", "recipient": to},
            )
            raise MailError(f"Failed to send email to {to}")
