from __future__ import annotations

from html import escape

from app.domain.entities.booking import Booking


def _e(value: object) -> str:
    return escape("" if value is None else str(value))


def _price_line(booking: Booking) -> str:
    return f"<p><strong>Price:</strong> {_e(booking.price)} (USD ${_e(booking.price_usd)})</p>"


def client_subject(booking: Booking) -> str:
    return f"Booking Confirmation - {booking.service_name or ''}"


def owner_subject(booking: Booking) -> str:
    return f"New Booking - {booking.service_name or ''}"


def client_email_html(booking: Booking) -> str:
    lines = [
        "<h2>Booking Confirmation</h2>",
        f"<p>Dear {_e(booking.name)},</p>",
        "<p>Your booking has been confirmed!</p>",
        f"<p><strong>Service:</strong> {_e(booking.service_name)}</p>",
        f"<p><strong>Date:</strong> {_e(booking.date)}</p>",
        f"<p><strong>Time:</strong> {_e(booking.time)}</p>",
        _price_line(booking),
    ]
    if booking.has_meet_link:
        link = _e(booking.meet_link)
        lines.append(f'<p><strong>Meeting Link:</strong> <a href="{link}">{link}</a></p>')
    lines.append("<p>Thank you!</p>")
    return "\n".join(lines)


def owner_email_html(booking: Booking) -> str:
    return "\n".join(
        [
            "<h2>New Booking Received</h2>",
            f"<p><strong>Client:</strong> {_e(booking.name)}</p>",
            f"<p><strong>Email:</strong> {_e(booking.email)}</p>",
            f"<p><strong>Phone:</strong> {_e(booking.phone)}</p>",
            f"<p><strong>Service:</strong> {_e(booking.service_name)}</p>",
            f"<p><strong>Date:</strong> {_e(booking.date)}</p>",
            f"<p><strong>Time:</strong> {_e(booking.time)}</p>",
            _price_line(booking),
        ]
    )
