from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from fastapi import Depends, Request

from app.core.config import settings
from app.application.ports.booking_store import BookingStorePort
from app.application.ports.calendar import CalendarPort
from app.application.ports.mail_sender import MailSenderPort
from app.application.use_cases.create_booking import CreateBookingUseCase
from app.application.use_cases.get_booking import GetBookingUseCase
from app.application.use_cases.schedule_event import ScheduleEventUseCase
from app.application.use_cases.send_confirmation import SendConfirmationUseCase
from app.application.use_cases.verify_payment import VerifyPaymentUseCase
from app.infrastructure.calendar.google_calendar_client import GoogleCalendar
from app.infrastructure.calendar.mock_calendar import MockCalendar
from app.infrastructure.mail.mock_mailer import MockMailSender
from app.infrastructure.mail.smtp_mailer import SmtpMailSender

logger = logging.getLogger(__name__)


def _is_local() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


def get_booking_store(request: Request) -> BookingStorePort:
    """The store is created by the application lifespan and lives on app.state."""
    return request.app.state.booking_store


@lru_cache
def get_calendar() -> CalendarPort:
    if not settings.GOOGLE_REFRESH_TOKEN or _is_local():
        logger.info("Using MockCalendar (ENV=%s)", settings.ENV)
        return MockCalendar()
    return GoogleCalendar()


@lru_cache
def get_mail_sender() -> MailSenderPort:
    if not (settings.EMAIL_USER and settings.EMAIL_APP_PASSWORD) or _is_local():
        logger.info("Using MockMailSender (ENV=%s)", settings.ENV)
        return MockMailSender()
    return SmtpMailSender()


def get_create_booking_use_case(store: BookingStorePort = Depends(get_booking_store)) -> CreateBookingUseCase:
    return CreateBookingUseCase(store=store)


def get_verify_payment_use_case(store: BookingStorePort = Depends(get_booking_store)) -> VerifyPaymentUseCase:
    return VerifyPaymentUseCase(store=store, placeholder_prefix=settings.TRANSACTION_PLACEHOLDER_PREFIX)


def get_schedule_event_use_case(
    store: BookingStorePort = Depends(get_booking_store),
    calendar: CalendarPort = Depends(get_calendar),
) -> ScheduleEventUseCase:
    return ScheduleEventUseCase(store=store, calendar=calendar, timezone=ZoneInfo(settings.BUSINESS_TIMEZONE))


def get_send_confirmation_use_case(
    store: BookingStorePort = Depends(get_booking_store),
    mailer: MailSenderPort = Depends(get_mail_sender),
) -> SendConfirmationUseCase:
    return SendConfirmationUseCase(store=store, mailer=mailer, owner_email=settings.OWNER_EMAIL)


def get_get_booking_use_case(store: BookingStorePort = Depends(get_booking_store)) -> GetBookingUseCase:
    return GetBookingUseCase(store=store)
