"""Service exports."""

from .document_service import build_cv_html
from .merge_service import merge_personal_details, overlay_links
from .pdf_renderer import Renderer, render_pdf
from .text_cleaner import clean_profile_text

__all__ = [
    "build_cv_html",
    "merge_personal_details",
    "overlay_links",
    "render_pdf",
    "Renderer",
    "clean_profile_text",
]
