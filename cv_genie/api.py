"""
CV Genie API - job-tailored CV generation.

POST /api/generate turns raw profile text, a target job title and contact
details into a rendered PDF CV. Each request is independent; nothing is stored.
"""

import json
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from cv_genie.agents.llm_client import GeneratorFactory, create_text_generator
from cv_genie.config import (
    API_HOST,
    API_PORT,
    CORS_ORIGINS,
    PDF_FILENAME,
    SERVICE_NAME,
    SERVICE_VERSION,
)
from cv_genie.cv_pipeline.pipeline import run_cv_pipeline
from cv_genie.errors import PayloadError
from cv_genie.schemas.request import GenerateRequest
from cv_genie.services.pdf_renderer import Renderer, render_pdf
from cv_genie.utils.helpers import describe_validation_errors
from cv_genie.utils.logger import get_logger

logger = get_logger(SERVICE_NAME)

app = FastAPI(
    title="CV Genie",
    description="Turns unstructured profile text into a job-tailored PDF CV",
    version=SERVICE_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    expose_headers=["Content-Disposition"],
)


# Collaborators as dependencies so they can be swapped (tests, alternative providers)
def get_generator_factory() -> GeneratorFactory:
    return create_text_generator


def get_renderer() -> Renderer:
    return render_pdf


def _error(status_code: int, message: str, **fields: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **fields})


def parse_generate_request(body: bytes) -> GenerateRequest:
    """Decode and validate the JSON body; raises PayloadError with field details."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadError("Request body is not valid JSON.") from e
    if not isinstance(data, dict):
        raise PayloadError("Request body must be a JSON object.")
    try:
        return GenerateRequest.model_validate(data)
    except ValidationError as e:
        raise PayloadError("Missing required payload fields.", describe_validation_errors(e)) from e


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@app.post("/api/generate")
async def generate_cv(
    request: Request,
    generator_factory: GeneratorFactory = Depends(get_generator_factory),
    renderer: Renderer = Depends(get_renderer),
):
    """Generate a tailored CV and return it as a PDF download."""
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        return _error(415, "Expected application/json")

    try:
        payload = parse_generate_request(await request.body())
    except PayloadError as e:
        logger.warning("Rejected request: %s %s", e, e.details)
        return _error(400, str(e), details=e.details)

    try:
        pdf = await run_cv_pipeline(payload, generator_factory, renderer)
    except Exception as e:
        logger.exception("Error in /api/generate")
        message = str(e) or "An unknown error occurred."
        return _error(500, f"Backend Error: {message}")

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{PDF_FILENAME}"'},
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
