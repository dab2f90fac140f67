from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.booking import Booking, BookingStatus

Price = str | int | float | None


class RequestSchema(BaseModel):
    # Front-ends send phone numbers and ids as JSON numbers too
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class CreateBookingRequestSchema(RequestSchema):
    service: str | None = None
    service_name: str | None = Field(default=None, alias="serviceName")
    price: Price = None
    price_usd: Price = Field(default=None, alias="priceUSD")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    date: str | None = None
    time: str | None = None


class CreateBookingResponseSchema(BaseModel):
    bookingId: str
    message: str = "Booking created successfully"


class VerifyPaymentRequestSchema(RequestSchema):
    booking_id: str | None = Field(default=None, alias="bookingId")
    transaction_id: str | None = Field(default=None, alias="transactionId")


class VerifyPaymentResponseSchema(BaseModel):
    verified: bool = True
    bookingId: str


class BookingIdRequestSchema(RequestSchema):
    booking_id: str | None = Field(default=None, alias="bookingId")


class CalendarEventResponseSchema(BaseModel):
    eventId: str
    meetLink: str


class SendConfirmationResponseSchema(BaseModel):
    success: bool = True
    message: str = "Emails sent successfully"


class BookingSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: str = Field(alias="bookingId")
    service: str | None = None
    service_name: str | None = Field(default=None, alias="serviceName")
    price: Price = None
    price_usd: Price = Field(default=None, alias="priceUSD")
    name: str
    email: str
    phone: str
    date: str
    time: str
    created_at: datetime = Field(alias="createdAt")
    status: BookingStatus
    payment_verified: bool | None = Field(default=None, alias="paymentVerified")
    transaction_id: str | None = Field(default=None, alias="transactionId")
    calendar_event_id: str | None = Field(default=None, alias="calendarEventId")
    meet_link: str | None = Field(default=None, alias="meetLink")

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(
            booking_id=booking.booking_id,
            service=booking.service,
            service_name=booking.service_name,
            price=booking.price,
            price_usd=booking.price_usd,
            name=booking.name,
            email=booking.email,
            phone=booking.phone,
            date=booking.date,
            time=booking.time,
            created_at=booking.created_at,
            status=booking.status,
            payment_verified=booking.payment_verified,
            transaction_id=booking.transaction_id,
            calendar_event_id=booking.calendar_event_id,
            meet_link=booking.meet_link,
        )

    def to_json(self) -> dict[str, Any]:
        """camelCase keys; fields set by steps that have not run yet are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class HealthResponseSchema(BaseModel):
    status: str = "ok"
    timestamp: datetime
