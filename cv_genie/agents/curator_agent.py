"""Curator Agent: filter, compress and re-categorize a record for one target role."""

from typing import Optional

from pydantic import ValidationError

from cv_genie.agents.llm_client import TextGenerator
from cv_genie.agents.prompts import build_curation_prompt
from cv_genie.config import CURATION_TEMPERATURE
from cv_genie.errors import SchemaViolation
from cv_genie.schemas.cv_record import CuratedCV, ExtractedCV
from cv_genie.utils.helpers import describe_validation_errors, parse_llm_json
from cv_genie.utils.logger import get_logger

logger = get_logger(__name__)

STAGE = "Curation"


async def run_curator_agent(
    generate: TextGenerator,
    record: ExtractedCV,
    target_job_title: str,
    user_summary: Optional[str] = None,
) -> CuratedCV:
    """
    Run the Curator Agent on a merged record. The result must be a CuratedCV:
    in particular "skills" has to come back as a category -> skills mapping,
    a list is rejected as SchemaViolation.
    """
    prompt = build_curation_prompt(record, target_job_title, user_summary)
    raw = await generate(prompt, temperature=CURATION_TEMPERATURE)
    payload = parse_llm_json(raw, STAGE)
    try:
        curated = CuratedCV.from_payload(payload)
    except ValidationError as e:
        raise SchemaViolation(STAGE, "; ".join(describe_validation_errors(e))) from e

    logger.info(
        "Curator Agent finished: target=%s jobs=%s->%s skill_categories=%s summary_provided=%s",
        target_job_title,
        len(record.work_experience or []),
        len(curated.work_experience or []),
        len(curated.skills or {}),
        bool(user_summary),
    )
    return curated
