"""Error taxonomy for the CV generation pipeline."""

from typing import List, Optional


class CVGenieError(Exception):
    """Base class for every error surfaced to the caller."""


class PayloadError(CVGenieError):
    """Request payload is missing required fields or is not JSON."""

    def __init__(self, message: str, details: Optional[List[str]] = None):
        super().__init__(message)
        self.details = details or []


class SchemaViolation(CVGenieError):
    """Collaborator output could not be parsed into the stage's record shape."""

    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage} output is not a valid CV record: {message}")
        self.stage = stage


class CollaboratorFailure(CVGenieError):
    """The text-generation or rendering service call itself failed."""

    def __init__(self, collaborator: str, message: str):
        super().__init__(f"{collaborator} failed: {message}")
        self.collaborator = collaborator
