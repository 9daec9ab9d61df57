import pytest

from cv_genie.schemas.cv_record import CuratedCV
from cv_genie.services.document_service import build_cv_html

SECTIONS = {
    "summary": "summary",
    "skills": "skills",
    "workExperience": "work-experience",
    "projects": "projects",
    "certifications": "certifications",
    "education": "education",
}


def _full_record(curated_payload) -> CuratedCV:
    payload = dict(curated_payload)
    payload["certifications"] = [{"name": "AWS Developer", "issuer": "Amazon", "date": "2022"}]
    payload["education"] = [{"institution": "TU Berlin", "degree": "BSc", "dates": "2015 - 2019"}]
    return CuratedCV.from_payload(payload)


def test_all_present_sections_render_in_fixed_order(curated_payload, photo):
    html = build_cv_html(_full_record(curated_payload), photo)
    positions = [html.index(f'id="{section_id}"') for section_id in ["header", *SECTIONS.values()]]
    assert positions == sorted(positions)


@pytest.mark.parametrize("key", list(SECTIONS))
def test_section_renders_only_when_present(key, curated_payload, photo):
    full = _full_record(curated_payload).to_payload()
    assert f'id="{SECTIONS[key]}"' in build_cv_html(CuratedCV.from_payload(full), photo)
    full.pop(key)
    assert f'id="{SECTIONS[key]}"' not in build_cv_html(CuratedCV.from_payload(full), photo)


def test_empty_sections_are_omitted(photo):
    record = CuratedCV(name="Ada", work_experience=[], skills={}, projects=[])
    html = build_cv_html(record, photo)
    for section_id in SECTIONS.values():
        assert f'id="{section_id}"' not in html


def test_bullets_and_skill_categories_keep_their_order(photo):
    record = CuratedCV.from_payload(
        {
            "workExperience": [{"title": "Dev", "description": ["first bullet", "second bullet"]}],
            "skills": {"Zeta Tools": ["z"], "Alpha Tools": ["a"], "Empty": []},
        }
    )
    html = build_cv_html(record, photo)
    assert html.index("first bullet") < html.index("second bullet")
    assert html.index("Zeta Tools") < html.index("Alpha Tools")
    assert "Empty" not in html


def test_contact_line_order_and_links(photo):
    record = CuratedCV.from_payload(
        {
            "contactInfo": {
                "email": "ada@example.com",
                "phone": "+49 30 1234",
                "location": "Berlin",
                "linkedin": "https://linkedin.com/in/ada",
                "github": "https://github.com/ada",
                "portfolio": "https://ada.dev",
            }
        }
    )
    html = build_cv_html(record, photo)
    order = ["Berlin", "+49 30 1234", "mailto:ada@example.com", ">LinkedIn<", ">GitHub<", ">Portfolio<"]
    positions = [html.index(marker) for marker in order]
    assert positions == sorted(positions)
    assert 'href="https://github.com/ada"' in html


def test_photo_is_embedded_as_data_url(photo):
    html = build_cv_html(CuratedCV(name="Ada"), photo)
    assert 'src="data:image/png;base64,iVBORw0KGgo="' in html


def test_text_is_html_escaped(photo):
    html = build_cv_html(CuratedCV(name="<script>alert(1)</script>"), photo)
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_missing_entry_fields_render_without_placeholders(photo):
    record = CuratedCV.from_payload({"workExperience": [{"title": "Dev"}], "education": [{"institution": "MIT"}]})
    html = build_cv_html(record, photo)
    assert "None" not in html
    assert "undefined" not in html
