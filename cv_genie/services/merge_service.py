"""Overlay user-supplied contact fields onto generated records. No model calls."""

from cv_genie.schemas.cv_record import ContactInfo, CuratedCV, ExtractedCV, LinkedContactInfo
from cv_genie.schemas.request import PersonalDetails, ProfileLinks


def merge_personal_details(record: ExtractedCV, details: PersonalDetails) -> ExtractedCV:
    """
    User email, phone and location replace whatever extraction produced.
    Returns a deep copy; blank overrides leave the generated value alone.
    """
    updates = {
        field: value
        for field, value in (
            ("email", details.email),
            ("phone", details.phone),
            ("location", details.location),
        )
        if value
    }
    if not updates:
        return record.model_copy(deep=True)
    contact = (record.contact_info or ContactInfo()).model_copy(update=updates)
    return record.model_copy(update={"contact_info": contact}, deep=True)


def overlay_links(record: CuratedCV, links: ProfileLinks) -> CuratedCV:
    """
    Set profile links from user input only. Curation never receives links,
    so any link in its output is made up and is dropped here. A contact block
    is created when curation dropped it but the user supplied links.
    """
    contact = record.contact_info
    fields = {
        "email": contact.email if contact else None,
        "phone": contact.phone if contact else None,
        "location": contact.location if contact else None,
        "linkedin": links.linkedin_url or None,
        "github": links.github_url or None,
        "portfolio": links.portfolio_url or None,
    }
    present = {field: value for field, value in fields.items() if value}
    linked = LinkedContactInfo(**present) if present else None
    return record.model_copy(update={"contact_info": linked}, deep=True)
