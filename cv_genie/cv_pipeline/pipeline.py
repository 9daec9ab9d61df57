"""CV pipeline: extraction -> merge -> curation -> link overlay -> HTML -> PDF."""

from cv_genie.agents.curator_agent import run_curator_agent
from cv_genie.agents.extractor_agent import run_extractor_agent
from cv_genie.agents.llm_client import GeneratorFactory, TextGenerator, create_text_generator
from cv_genie.schemas.cv_record import CuratedCV
from cv_genie.schemas.request import GenerateRequest
from cv_genie.services.document_service import build_cv_html
from cv_genie.services.merge_service import merge_personal_details, overlay_links
from cv_genie.services.pdf_renderer import Renderer, render_pdf
from cv_genie.utils.logger import get_logger, stage_timer

logger = get_logger(__name__)


async def build_tailored_record(generate: TextGenerator, request: GenerateRequest) -> CuratedCV:
    """
    Run both model stages for one request and apply user overrides around them.
    Stages run strictly in order; the first failure aborts the whole run.
    """
    details = request.personal_details
    with stage_timer(logger, "extraction"):
        extracted = await run_extractor_agent(generate, request.profile_text)
    with stage_timer(logger, "merge"):
        merged = merge_personal_details(extracted, details)
    with stage_timer(logger, "curation"):
        curated = await run_curator_agent(
            generate, merged, request.target_job_title, details.summary
        )
    with stage_timer(logger, "link overlay"):
        return overlay_links(curated, request.urls)


async def run_cv_pipeline(
    request: GenerateRequest,
    generator_factory: GeneratorFactory = create_text_generator,
    renderer: Renderer = render_pdf,
) -> bytes:
    """
    Run the full pipeline for one request and return the rendered PDF bytes.
    The text generator is created per request with the caller's credential
    and closed before rendering starts; a failed close is logged, not raised.
    """
    logger.info(
        "CV pipeline started: model=%s target=%s profile_chars=%s photo_type=%s",
        request.model,
        request.target_job_title,
        len(request.profile_text),
        request.profile_photo.mime_type,
    )
    generate = generator_factory(request.api_key, request.model)
    try:
        record = await build_tailored_record(generate, request)
    finally:
        try:
            await generate.aclose()
        except Exception:
            logger.exception("Closing text generator failed")

    with stage_timer(logger, "assembly"):
        html = build_cv_html(record, request.profile_photo)
    with stage_timer(logger, "rendering"):
        pdf = await renderer(html)
    logger.info("CV pipeline finished: pdf_bytes=%s", len(pdf))
    return pdf
