from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.v1.schemas import (
    BookingIdRequestSchema,
    BookingSchema,
    CalendarEventResponseSchema,
    CreateBookingRequestSchema,
    CreateBookingResponseSchema,
    SendConfirmationResponseSchema,
    VerifyPaymentRequestSchema,
    VerifyPaymentResponseSchema,
)
from app.application.use_cases.create_booking import CreateBookingUseCase
from app.application.use_cases.get_booking import GetBookingUseCase
from app.application.use_cases.schedule_event import ScheduleEventUseCase
from app.application.use_cases.send_confirmation import SendConfirmationUseCase
from app.application.use_cases.verify_payment import VerifyPaymentUseCase
from app.wiring.dependencies import (
    get_create_booking_use_case,
    get_get_booking_use_case,
    get_schedule_event_use_case,
    get_send_confirmation_use_case,
    get_verify_payment_use_case,
)

router = APIRouter()


@router.post("/create-booking", response_model=CreateBookingResponseSchema)
def create_booking(
    req: CreateBookingRequestSchema,
    uc: CreateBookingUseCase = Depends(get_create_booking_use_case),
):
    booking_id = uc.execute(req.model_dump())
    return CreateBookingResponseSchema(bookingId=booking_id)


@router.post("/verify-payment", response_model=VerifyPaymentResponseSchema)
def verify_payment(
    req: VerifyPaymentRequestSchema,
    uc: VerifyPaymentUseCase = Depends(get_verify_payment_use_case),
):
    booking_id = uc.execute(req.booking_id, req.transaction_id)
    return VerifyPaymentResponseSchema(bookingId=booking_id)


@router.post("/create-calendar-event", response_model=CalendarEventResponseSchema)
def create_calendar_event(
    req: BookingIdRequestSchema,
    uc: ScheduleEventUseCase = Depends(get_schedule_event_use_case),
):
    event = uc.execute(req.booking_id)
    return CalendarEventResponseSchema(eventId=event.event_id, meetLink=event.meet_link)


@router.post("/send-confirmation-emails", response_model=SendConfirmationResponseSchema)
def send_confirmation_emails(
    req: BookingIdRequestSchema,
    uc: SendConfirmationUseCase = Depends(get_send_confirmation_use_case),
):
    uc.execute(req.booking_id)
    return SendConfirmationResponseSchema()


@router.get("/booking/{booking_id}")
def get_booking(
    booking_id: str,
    uc: GetBookingUseCase = Depends(get_get_booking_use_case),
):
    booking = uc.execute(booking_id)
    return JSONResponse(BookingSchema.from_entity(booking).to_json())
