"""Request payload accepted by the generate endpoint."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    str_strip_whitespace=True,
    frozen=True,
)


class PhotoPayload(BaseModel):
    """Profile photo passed through untouched to the rendered document."""

    model_config = _CONFIG

    mime_type: str = Field(..., min_length=1, description="Declared media type, e.g. image/jpeg")
    data: str = Field(..., min_length=1, description="Base64 encoded image bytes")

    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class PersonalDetails(BaseModel):
    """User-supplied values that override anything the model extracts."""

    model_config = _CONFIG

    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None


class ProfileLinks(BaseModel):
    model_config = _CONFIG

    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None


class GenerateRequest(BaseModel):
    """Everything needed to produce one tailored CV."""

    model_config = _CONFIG

    api_key: str = Field(..., min_length=1, description="Credential for the text-generation service")
    model: str = Field(..., min_length=1, description="Text-generation model identifier")
    target_job_title: str = Field(..., min_length=1)
    profile_photo: PhotoPayload
    profile_text: str = Field(
        default="",
        validation_alias=AliasChoices("profileText", "linkedinData", "profile_text"),
        description="Raw, unstructured profile text",
    )
    personal_details: PersonalDetails = Field(default_factory=PersonalDetails)
    urls: ProfileLinks = Field(default_factory=ProfileLinks)
