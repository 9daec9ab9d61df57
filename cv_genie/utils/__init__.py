"""Utility exports."""

from .helpers import describe_validation_errors, parse_llm_json, strip_code_fences
from .logger import get_logger, stage_timer

__all__ = [
    "get_logger",
    "stage_timer",
    "parse_llm_json",
    "strip_code_fences",
    "describe_validation_errors",
]
