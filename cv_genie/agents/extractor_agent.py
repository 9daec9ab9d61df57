"""Extractor Agent: clean raw profile text, LLM extraction, return a validated record."""

from pydantic import ValidationError

from cv_genie.agents.llm_client import TextGenerator
from cv_genie.agents.prompts import build_extraction_prompt
from cv_genie.config import EXTRACTION_TEMPERATURE
from cv_genie.errors import SchemaViolation
from cv_genie.schemas.cv_record import ExtractedCV
from cv_genie.services.text_cleaner import clean_profile_text
from cv_genie.utils.helpers import describe_validation_errors, parse_llm_json
from cv_genie.utils.logger import get_logger

logger = get_logger(__name__)

STAGE = "Extraction"


async def run_extractor_agent(generate: TextGenerator, profile_text: str) -> ExtractedCV:
    """
    Run the Extractor Agent: one model call that turns unstructured profile
    text into an ExtractedCV (flat skill list). Malformed output raises
    SchemaViolation; nothing is retried.
    """
    content = clean_profile_text(profile_text)
    if len(content) < 50:
        logger.warning("Profile text is very short (%s chars); extraction will be sparse", len(content))

    raw = await generate(build_extraction_prompt(content), temperature=EXTRACTION_TEMPERATURE)
    payload = parse_llm_json(raw, STAGE)
    try:
        record = ExtractedCV.from_payload(payload)
    except ValidationError as e:
        raise SchemaViolation(STAGE, "; ".join(describe_validation_errors(e))) from e

    logger.info(
        "Extractor Agent finished: input_chars=%s jobs=%s skills=%s projects=%s",
        len(content),
        len(record.work_experience or []),
        len(record.skills or []),
        len(record.projects or []),
    )
    return record
