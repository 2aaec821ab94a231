"""HTTP surface: upload-and-summarize plus a health probe."""

from datetime import datetime, timezone

from fastapi import FastAPI, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docsum.config.settings import Settings
from docsum.logging.logger import Log
from docsum.processor.exceptions import (
    EmptyTextError,
    ProcessorError,
    QuotaExceededError,
    UnsupportedFormatError,
    ValidationError,
)
from docsum.processor.processor import Processor

_CLIENT_ERRORS = (ValidationError, UnsupportedFormatError, EmptyTextError)


def error_response(exc: Exception) -> JSONResponse:
    """Map a pipeline failure to the {"error": ...} response record."""
    if isinstance(exc, _CLIENT_ERRORS):
        return JSONResponse(status_code=400, content={"error": str(exc)})
    if isinstance(exc, QuotaExceededError):
        return JSONResponse(status_code=429, content={"error": str(exc)})
    return JSONResponse(
        status_code=500,
        content={"error": f"Failed to process document: {exc}"},
    )


def create_app(processor: Processor, settings: Settings) -> FastAPI:
    app = FastAPI(title="Document Summarizer")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Sync handler: FastAPI runs it on a worker thread, one per request.
    @app.post("/api/upload")
    def upload(document: UploadFile | None = File(None)) -> JSONResponse:
        if document is None:
            return JSONResponse(status_code=400, content={"error": "No file uploaded"})
        # Anything past limit+1 bytes is never buffered; intake rejects the overflow.
        content = document.file.read(settings.max_upload_bytes + 1)
        try:
            result = processor.process(
                file_name=document.filename or "document",
                media_type=document.content_type or "",
                content=content,
            )
        except ProcessorError as exc:
            return error_response(exc)
        except Exception as exc:
            Log.exception(f"Unexpected failure processing {document.filename}")
            return error_response(exc)
        return JSONResponse(content=result.to_payload())

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {
            "status": "Server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app
