"""Prompt templates for the extraction and curation agents.

Pure functions of their inputs; nothing here talks to the model.
"""

import json
from typing import Optional

from cv_genie.schemas.cv_record import ExtractedCV

SYSTEM_PROMPT = (
    "You are a CV processing system. You answer with exactly one JSON object "
    "and nothing else: no markdown, no code block, no commentary."
)

_RECORD_SCHEMA = """- name: string
- title: string
- contactInfo: {{ email: string, phone: string, location: string }}
- summary: string
- workExperience: [{{ title: string, company: string, location: string, dates: string, description: string[] }}]
- education: [{{ institution: string, degree: string, dates: string }}]
- skills: {skills_shape}
- projects: [{{ name: string, description: string, url?: string }}]
- certifications: [{{ name: string, issuer: string, date?: string }}]"""

FLAT_SKILLS_SCHEMA = _RECORD_SCHEMA.format(skills_shape="string[]")
CATEGORIZED_SKILLS_SCHEMA = _RECORD_SCHEMA.format(
    skills_shape='{ "<category name>": string[] }'
)

_OUTPUT_RULES = """Return ONLY one valid JSON object. Do not wrap it in a code block and do not write any text before or after it.
CRITICAL: Escape special characters inside string values, e.g. a double quote (") must be written as \\" so the output is valid JSON."""


def build_extraction_prompt(profile_text: str) -> str:
    """Instruction that turns unstructured profile text into a flat-skills record."""
    return f"""You are a precise CV parsing agent. Analyze the unstructured text and convert it into a structured JSON object. Adhere strictly to the JSON schema below.
If a piece of information is not present in the text, omit its key entirely. Never invent values and never emit empty strings, empty lists or placeholders.
Each entry of workExperience.description must be one independent bullet point.

JSON Schema:
{FLAT_SKILLS_SCHEMA}

{_OUTPUT_RULES}

Text:
---
{profile_text}
---
"""


def build_curation_prompt(
    record: ExtractedCV,
    target_job_title: str,
    user_summary: Optional[str] = None,
) -> str:
    """Instruction that filters, rewrites and re-categorizes a record for one role."""
    record_json = json.dumps(record.to_payload(), indent=2, ensure_ascii=False)
    return f"""You are an expert career storyteller and CV editor. Transform the JSON CV data below into a focused, concise and impactful CV tailored for the role of "{target_job_title}". Your guiding principles are relevance and brevity.

Follow these rules meticulously:

1. Filter all sections: review workExperience, projects, certifications and education. Keep ONLY the entries that are demonstrably relevant to a "{target_job_title}". If a section has no relevant entries, omit the whole key. Never output an empty list.

2. Rewrite and compress, do not copy:
   * workExperience: for each kept job, distill the description into at most TWO bullet points, each showing a quantifiable achievement or a skill directly related to the target role.
   * projects: for each kept project, write a description of one to two lines max stating its outcome and the key skill it demonstrates for a "{target_job_title}".
   * certifications: for each kept certification, write a single line describing its value or the competency it represents.

3. Categorize skills: group the most relevant skills into logical categories. The value of "skills" MUST be an object mapping a category name to a list of strings, e.g. "Technical Skills", "Languages", "Cloud Platforms", "Soft Skills". Only create categories that contain at least one skill.

4. Professional summary: if a user-provided summary is given, refine it into a powerful 2-3 sentence pitch that keeps its intent. Otherwise write a new 2-3 sentence summary from the most impressive, relevant highlights of the candidate's history.

5. Output: keep the same schema as the input, except that "skills" is an object of string arrays:
{CATEGORIZED_SKILLS_SCHEMA}

{_OUTPUT_RULES}

User-provided summary (use as a base if available):
---
{user_summary or "Not provided."}
---

Full JSON data to filter, rewrite and summarize:
---
{record_json}
---
"""
