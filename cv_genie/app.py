"""
CV Genie – Streamlit frontend.
No business logic in layout; the API does extraction, curation and rendering.
"""

import base64
from typing import Dict, Optional

import httpx
import streamlit as st

from cv_genie.config import BACKEND_URL, CLIENT_TIMEOUT_SECONDS, DEFAULT_MODEL_NAME, PDF_FILENAME
from cv_genie.errors import CollaboratorFailure

PHOTO_TYPES = ["png", "jpg", "jpeg", "webp"]


def _drop_blank(values: Dict[str, Optional[str]]) -> Dict[str, str]:
    return {k: v.strip() for k, v in values.items() if v and v.strip()}


def build_payload(
    api_key: str,
    model: str,
    target_job_title: str,
    profile_text: str,
    photo_bytes: bytes,
    photo_type: str,
    personal_details: Dict[str, Optional[str]],
    urls: Dict[str, Optional[str]],
) -> dict:
    """Request body for POST /api/generate; blank optional fields are left out."""
    return {
        "apiKey": api_key.strip(),
        "model": (model or "").strip() or DEFAULT_MODEL_NAME,
        "targetJobTitle": target_job_title.strip(),
        "profilePhoto": {
            "mimeType": photo_type,
            "data": base64.b64encode(photo_bytes).decode("ascii"),
        },
        "profileText": profile_text,
        "personalDetails": _drop_blank(personal_details),
        "urls": _drop_blank(urls),
    }


def request_cv(payload: dict, client: Optional[httpx.Client] = None) -> bytes:
    """POST the payload to the API and return PDF bytes; errors carry the server's message."""
    owned = client is None
    client = client or httpx.Client(timeout=CLIENT_TIMEOUT_SECONDS)
    try:
        response = client.post(f"{BACKEND_URL}/api/generate", json=payload)
    except httpx.HTTPError as e:
        raise CollaboratorFailure("CV Genie API", str(e)) from e
    finally:
        if owned:
            client.close()
    if response.status_code != 200:
        try:
            message = response.json().get("error")
        except ValueError:
            message = None
        raise CollaboratorFailure("CV Genie API", message or f"HTTP {response.status_code}")
    return response.content


def render_layout() -> None:
    """Streamlit page layout; the request is sent only on button click."""
    st.set_page_config(page_title="CV Genie", layout="centered")
    st.title("CV Genie")
    st.markdown("*Paste your profile, pick a target role, download a tailored CV.*")
    st.divider()

    # ----- Model access -----
    st.subheader("Model")
    col1, col2 = st.columns([2, 1])
    with col1:
        api_key = st.text_input("API key", type="password", key="api_key")
    with col2:
        model = st.text_input("Model", value=DEFAULT_MODEL_NAME, key="model")

    # ----- Profile -----
    st.subheader("Profile")
    target_job_title = st.text_input("Target job title", placeholder="e.g. Backend Engineer", key="target")
    profile_text = st.text_area(
        "Profile text",
        height=260,
        key="profile_text",
        help="Paste your LinkedIn profile, an old CV or any notes about your experience.",
    )
    photo = st.file_uploader("Profile photo", type=PHOTO_TYPES, key="photo")

    # ----- Personal details (override anything extracted) -----
    with st.expander("Personal details and links"):
        dcol1, dcol2 = st.columns(2)
        with dcol1:
            email = st.text_input("Email", key="email")
            phone = st.text_input("Phone", key="phone")
            location = st.text_input("Location", key="location")
        with dcol2:
            linkedin_url = st.text_input("LinkedIn URL", key="linkedin_url")
            github_url = st.text_input("GitHub URL", key="github_url")
            portfolio_url = st.text_input("Portfolio URL", key="portfolio_url")
        summary = st.text_area("Summary (optional, will be refined)", height=100, key="summary")

    generate_clicked = st.button("Generate CV", type="primary", key="generate_btn")

    if "pdf" not in st.session_state:
        st.session_state["pdf"] = None
    if "error" not in st.session_state:
        st.session_state["error"] = None

    if generate_clicked:
        st.session_state["pdf"] = None
        if not api_key or not api_key.strip():
            st.session_state["error"] = "Please enter an API key."
        elif not target_job_title or not target_job_title.strip():
            st.session_state["error"] = "Please enter a target job title."
        elif photo is None:
            st.session_state["error"] = "Please upload a profile photo."
        else:
            st.session_state["error"] = None
            payload = build_payload(
                api_key=api_key,
                model=model,
                target_job_title=target_job_title,
                profile_text=profile_text or "",
                photo_bytes=photo.getvalue(),
                photo_type=photo.type or "image/jpeg",
                personal_details={"email": email, "phone": phone, "location": location, "summary": summary},
                urls={"linkedinUrl": linkedin_url, "githubUrl": github_url, "portfolioUrl": portfolio_url},
            )
            with st.spinner("Extracting, tailoring and rendering your CV…"):
                try:
                    st.session_state["pdf"] = request_cv(payload)
                except CollaboratorFailure as e:
                    st.session_state["error"] = str(e)

    if st.session_state.get("error"):
        st.error(st.session_state["error"])

    if st.session_state.get("pdf"):
        st.success("Your CV is ready.")
        st.download_button(
            "Download PDF",
            data=st.session_state["pdf"],
            file_name=PDF_FILENAME,
            mime="application/pdf",
            key="download_pdf",
        )


if __name__ == "__main__":
    render_layout()
