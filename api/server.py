"""
FastAPI boundary for the companion chat.

The composer only ever sees requests that passed validation here: both
messages and settings present, timestamps non-decreasing and a non-blank
user turn at the end.
"""

from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agents.composer import ResponseComposer, build_opening_message
from config.settings import settings
from core import configure_logging, get_logger
from prompts.personas import persona_list
from schemas import (
    ConversationSettings,
    ErrorResponse,
    PersonaSummarySchema,
    RespondRequest,
    RespondResponse,
)

configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
logger = get_logger(__name__)

INVALID_PAYLOAD_MESSAGE = "Invalid payload"
COMPOSE_FAILED_MESSAGE = "Something went wrong while composing a response."

composer = ResponseComposer(
    repetition_window=settings.REPETITION_WINDOW,
    flair_interval=settings.FLAIR_INTERVAL,
)

app = FastAPI(title="Companion Chat API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def invalid_payload_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed bodies are a client error with a fixed message."""
    logger.info("Rejected invalid payload", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": INVALID_PAYLOAD_MESSAGE})


# API Endpoints
@app.get("/api/health")
async def health_check():
    return {"status": "ok"}


@app.get("/api/personas", response_model=List[PersonaSummarySchema])
async def list_personas():
    """Personas for the settings form, in registry order (first is the default)."""
    return [
        PersonaSummarySchema(
            key=persona.key.value,
            label=persona.label,
            tone=persona.tone,
            description=persona.description,
        )
        for persona in persona_list()
    ]


@app.post(
    "/api/opening",
    response_model=RespondResponse,
    responses={400: {"model": ErrorResponse}},
)
async def opening_message(conversation_settings: ConversationSettings):
    """Greeting shown before the first user message."""
    return RespondResponse(message=build_opening_message(conversation_settings))


@app.post(
    "/api/respond",
    response_model=RespondResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def respond(payload: RespondRequest):
    """Compose the companion's next reply for the given history and settings."""
    try:
        reply = composer.compose(payload.messages, payload.settings)
        logger.info(
            "Reply composed",
            persona=payload.settings.persona,
            history_length=len(payload.messages),
        )
        return RespondResponse(message=reply)
    except Exception as e:
        logger.error("Respond API error", error=str(e), exc_info=True)
        return JSONResponse(status_code=500, content={"error": COMPOSE_FAILED_MESSAGE})
