"""Schema exports."""

from .cv_record import (
    Certification,
    ContactInfo,
    CuratedCV,
    Education,
    ExtractedCV,
    LinkedContactInfo,
    Project,
    WorkExperience,
    prune_empty,
)
from .request import GenerateRequest, PersonalDetails, PhotoPayload, ProfileLinks

__all__ = [
    "ExtractedCV",
    "CuratedCV",
    "ContactInfo",
    "LinkedContactInfo",
    "WorkExperience",
    "Education",
    "Project",
    "Certification",
    "prune_empty",
    "GenerateRequest",
    "PersonalDetails",
    "PhotoPayload",
    "ProfileLinks",
]
