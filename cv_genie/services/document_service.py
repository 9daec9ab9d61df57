"""Assemble the final HTML document from a curated record. Deterministic, no model calls."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from cv_genie.schemas.cv_record import CuratedCV
from cv_genie.schemas.request import PhotoPayload

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
env = Environment(
    loader=FileSystemLoader(_TEMPLATE_DIR),
    autoescape=True,
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


def _contact_items(record: CuratedCV) -> List[Dict[str, Optional[str]]]:
    """Contact line entries: location, phone, email, then profile links."""
    contact = record.contact_info
    if contact is None:
        return []
    items: List[Dict[str, Optional[str]]] = []
    if contact.location:
        items.append({"label": contact.location, "href": None})
    if contact.phone:
        items.append({"label": contact.phone, "href": None})
    if contact.email:
        items.append({"label": contact.email, "href": f"mailto:{contact.email}"})
    for label, url in (
        ("LinkedIn", contact.linkedin),
        ("GitHub", contact.github),
        ("Portfolio", contact.portfolio),
    ):
        if url:
            items.append({"label": label, "href": url})
    return items


def _skill_categories(record: CuratedCV) -> List[Tuple[str, List[str]]]:
    """Non-empty categories in the order the curation step chose."""
    return [(category, skills) for category, skills in (record.skills or {}).items() if skills]


def build_cv_html(record: CuratedCV, photo: PhotoPayload) -> str:
    """Render the CV template. Sections with no backing data are left out entirely."""
    return env.get_template("cv.html").render(
        cv=record,
        photo_url=photo.data_url(),
        contact_items=_contact_items(record),
        skill_categories=_skill_categories(record),
    )
