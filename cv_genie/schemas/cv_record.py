"""CV record shapes exchanged between pipeline stages.

The record exists in two shapes. ``ExtractedCV`` is what the extraction stage
produces: skills are a flat list. ``CuratedCV`` is what the curation stage
produces: skills are grouped by category and the contact block may carry
profile links. Keys use camelCase on the wire, matching the prompts.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and len(value) == 0)


def prune_empty(value: Any) -> Any:
    """
    Recursively drop empty strings, lists and mappings from parsed output.
    A field the source does not mention must be absent, never blank.
    """
    if isinstance(value, dict):
        pruned = {k: prune_empty(v) for k, v in value.items()}
        return {k: v for k, v in pruned.items() if not _is_empty(v)}
    if isinstance(value, list):
        pruned = [prune_empty(v) for v in value]
        return [v for v in pruned if not _is_empty(v)]
    if isinstance(value, str):
        return value.strip()
    return value


class RecordModel(BaseModel):
    """Frozen base: records are only ever replaced, never edited in place."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Wire form: camelCase keys, absent fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ContactInfo(RecordModel):
    email: Optional[str] = Field(default=None, description="Email address")
    phone: Optional[str] = Field(default=None, description="Phone number")
    location: Optional[str] = Field(default=None, description="City / country or 'Remote'")


class LinkedContactInfo(ContactInfo):
    """Contact block after curation; links are re-applied from user input."""

    linkedin: Optional[str] = Field(default=None, description="Professional network profile URL")
    github: Optional[str] = Field(default=None, description="Code hosting profile URL")
    portfolio: Optional[str] = Field(default=None, description="Portfolio URL")


class WorkExperience(RecordModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    dates: Optional[str] = None
    description: Optional[List[str]] = Field(default=None, description="Independent bullet points")

    @field_validator("description", mode="before")
    @classmethod
    def _single_bullet(cls, value: Any) -> Any:
        # Models occasionally return one paragraph instead of a list of bullets
        if isinstance(value, str):
            return [value]
        return value


class Education(RecordModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    dates: Optional[str] = None


class Project(RecordModel):
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None


class Certification(RecordModel):
    name: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[str] = None


class _CVRecord(RecordModel):
    name: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    work_experience: Optional[List[WorkExperience]] = None
    education: Optional[List[Education]] = None
    projects: Optional[List[Project]] = None
    certifications: Optional[List[Certification]] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]):
        """Validate parsed collaborator output after pruning blank values."""
        return cls.model_validate(prune_empty(payload))


class ExtractedCV(_CVRecord):
    """Record as extracted from raw profile text (flat skill list)."""

    contact_info: Optional[ContactInfo] = None
    skills: Optional[List[str]] = None

    @field_validator("skills")
    @classmethod
    def _dedupe_skills(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return None
        return list(dict.fromkeys(value))


class CuratedCV(_CVRecord):
    """Record tailored to a target role (skills grouped by category)."""

    contact_info: Optional[LinkedContactInfo] = None
    skills: Optional[Dict[str, List[str]]] = None
