"""FastAPI application factory and error mapping."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from transcriptai.exceptions import TranscriptAIError
from transcriptai.logging import setup_logging
from transcriptai.routes import transcripts_router, upload_router

logger = setup_logging()


async def handle_transcriptai_error(
    request: Request, exc: TranscriptAIError
) -> JSONResponse:
    logger.info(
        "Request failed",
        extra={
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = sorted(
        {str(error["loc"][-1]) for error in exc.errors() if error.get("loc")}
    )
    message = (
        f"Invalid or missing fields: {', '.join(fields)}"
        if fields
        else "Invalid request"
    )
    return JSONResponse(status_code=400, content={"error": message})


def create_app() -> FastAPI:
    """Builds the API application with its routers and error handlers."""
    app = FastAPI(title="TranscriptAI Service")
    app.include_router(upload_router)
    app.include_router(transcripts_router)
    app.add_exception_handler(TranscriptAIError, handle_transcriptai_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    return app
