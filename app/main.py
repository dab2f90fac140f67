import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.bookings import router as bookings_router
from app.api.v1.schemas import HealthResponseSchema
from app.application.exceptions import BookingServiceError, InternalError
from app.core.config import settings
from app.infrastructure.store.memory_store import MemoryBookingStore

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("booking_id", "operation", "event_id", "transaction_id", "recipient", "status", "request_id", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.booking_store = MemoryBookingStore()
    logger.info("%s running on port %s", settings.APP_NAME, settings.PORT)
    try:
        yield
    finally:
        app.state.booking_store.clear()


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BookingServiceError)
    async def booking_error_handler(request: Request, exc: BookingServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"operation": request.url.path, "error": str(exc)})
        error = InternalError(str(exc) or "Internal server error")
        return JSONResponse(status_code=error.status_code, content={"error": str(error)})

    app.include_router(bookings_router, prefix="/api", tags=["bookings"])

    @app.get("/health", response_model=HealthResponseSchema)
    def health() -> HealthResponseSchema:
        return HealthResponseSchema(timestamp=datetime.now(timezone.utc))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
