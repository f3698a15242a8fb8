import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.logging_config import setup_logging
from config.settings import settings
from utils.exceptions import PipelineError, ValidationError
from api.routes.admin import router as admin_router
from api.routes.application import router as application_router
from api.routes.candidate import router as candidate_router
from api.routes.company import company_router, job_router
from api.routes.interview import router as interview_router
from api.routes.message import router as message_router
from api.routes.offer import router as offer_router
from api.routes.reference import router as reference_router

setup_logging()
logger = logging.getLogger(__name__)

DESCRIPTION = """
Hiring pipeline API: applications, AI screening, AI-led interviews, references and offers.

## Authentication

All endpoints (except `/ping` and `/health`) require an API key via the `X-API-Key` header
when the server is configured with one. Admin endpoints also require `X-Admin-Key`.

## Pipeline

`pending` → `reviewing` → `interview` → `reference_check` → `offer_sent` → `hired`,
with `rejected` reachable from every open status. `hired` and `rejected` are final.

## Quick Start

1. **Apply** → `POST /applications` with job, candidate and CV text
2. **Answer follow-up questions** → `POST /applications/{id}/answers` (scores the candidate)
3. **Interview** → `POST /interview/{id}/turn` until `completed` is true
4. **Offer** → `POST /offers`, then `POST /offers/{offer_id}/accept`

## Errors

Every error has the shape `{"error": {"kind": "...", "message": "..."}}`.
"""

tags_metadata = [
    {
        "name": "Health",
        "description": "Health check endpoints. No authentication required.",
    },
    {
        "name": "Applications",
        "description": "Apply, answer follow-up questions, advance, reject. Lifecycle rules are enforced.",
    },
    {
        "name": "Interview",
        "description": "AI-led interview, one turn per request. Completes after seven answers.",
    },
    {
        "name": "Offers",
        "description": "Job offers. Accepting hires the candidate.",
    },
    {
        "name": "References",
        "description": "Reference checks answered once by the referee.",
    },
    {
        "name": "Messages",
        "description": "Company/candidate chat per application.",
    },
    {
        "name": "Admin",
        "description": "Company approval and audited raw application updates. Requires X-Admin-Key.",
    },
]

app = FastAPI(
    title="Hiring Pipeline API",
    description=DESCRIPTION,
    version="1.0.0",
    openapi_tags=tags_metadata,
)

# Configure CORS
ALLOWED_ORIGINS = settings.ALLOWED_ORIGINS.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PipelineError)
async def pipeline_error_handler(request: Request, exc: PipelineError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.kind}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    problems = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in exc.errors()
    ]
    error = ValidationError("; ".join(problems) or "Invalid request")
    return JSONResponse(status_code=422, content={"error": error.to_dict()})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": {"kind": "internal_error", "message": "Internal server error"}},
    )


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information and documentation links"""
    return {
        "message": "Welcome to the Hiring Pipeline API",
        "version": "1.0.0",
        "documentation": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "authentication": {
            "type": "API Key",
            "header": "X-API-Key",
            "note": "Required for all endpoints except /ping and /health"
        },
        "endpoints": {
            "health": "/health",
            "ping": "/ping",
            "candidates": "/candidates",
            "companies": "/companies",
            "jobs": "/jobs",
            "applications": "/applications",
            "interview": "/interview",
            "offers": "/offers",
            "references": "/references",
            "messages": "/messages",
            "admin": "/admin"
        }
    }


# Health check endpoints (public - no authentication required)
@app.get("/ping", tags=["Health"])
def ping():
    """Simple ping endpoint to check if API is responding. No authentication required."""
    return {"message": "pong"}


@app.get("/health", tags=["Health"])
def health():
    """Health check endpoint with basic status information. No authentication required."""
    return {
        "status": "healthy",
        "service": "Hiring Pipeline API",
        "version": "1.0.0"
    }


# Register routers
app.include_router(candidate_router)
app.include_router(company_router)
app.include_router(job_router)
app.include_router(application_router)
app.include_router(interview_router)
app.include_router(offer_router)
app.include_router(reference_router)
app.include_router(message_router)
app.include_router(admin_router)
