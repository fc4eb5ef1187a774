import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from app.config import load_settings
from app.doctors.repository import DoctorStore
from app.doctors.router import router as doctors_router
from app.feedback.repository import FeedbackStore
from app.feedback.router import router as feedback_router
from app.notifications.dispatcher import NotificationDispatcher
from app.notifications.mailer import EmailNotifier
load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)

    app.state.settings = settings
    app.state.feedback_store = FeedbackStore()
    app.state.doctor_store = DoctorStore()
    app.state.notifier = NotificationDispatcher(EmailNotifier(settings))
    await app.state.notifier.start()
    logger.info(f"Feedback service ready, notifications go to {settings.recipient_email}")
    try:
        yield
    finally:
        await app.state.notifier.stop()


app = FastAPI(title="Dental Feedback Service", lifespan=lifespan)

app.include_router(feedback_router)
app.include_router(doctors_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with the same shape as submission errors"""
    errors = [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"error": "Invalid request", "errors": errors}},
    )


@app.get("/health")
def health():
    return {"status": "ok"}
