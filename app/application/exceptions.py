class BookingServiceError(RuntimeError):
    """Base class for errors surfaced to API callers as {"error": message}."""
    status_code = 500


class ValidationError(BookingServiceError):
    """Raised when required request input is missing or malformed."""
    status_code = 400


class NotFoundError(BookingServiceError):
    """Raised when a booking id is unknown."""
    status_code = 404


class ProviderError(BookingServiceError):
    """Raised when the calendar or mail provider fails."""
    status_code = 500


class MailError(ProviderError):
    """Raised when a confirmation email could not be sent."""
    pass


class InternalError(BookingServiceError):
    """Wraps an unexpected exception caught at the request boundary."""
    status_code = 500
