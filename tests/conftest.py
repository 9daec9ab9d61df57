"""Shared fixtures: in-memory stand-ins for the text generator and the PDF renderer."""

import json
from typing import List, Union

import pytest

from cv_genie.schemas.request import PhotoPayload


class FakeGenerator:
    """Returns canned responses in order and records every prompt it receives."""

    def __init__(self, *responses: Union[str, Exception]):
        self.responses: List[Union[str, Exception]] = list(responses)
        self.prompts: List[str] = []
        self.temperatures: List[float] = []
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def __call__(self, prompt: str, temperature: float) -> str:
        self.prompts.append(prompt)
        self.temperatures.append(temperature)
        if not self.responses:
            raise AssertionError("unexpected text generation call")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def aclose(self) -> None:
        self.closed = True


class FakeRenderer:
    def __init__(self, pdf: bytes = b"%PDF-1.7 fake", error: Exception = None):
        self.pdf = pdf
        self.error = error
        self.htmls: List[str] = []

    async def __call__(self, html: str) -> bytes:
        self.htmls.append(html)
        if self.error is not None:
            raise self.error
        return self.pdf


@pytest.fixture
def extracted_payload() -> dict:
    return {
        "name": "Ada Example",
        "title": "Software Engineer",
        "contactInfo": {"email": "ada@old.example", "location": "Remote"},
        "summary": "Engineer with eight years of experience.",
        "workExperience": [
            {
                "title": "Backend Developer",
                "company": "Acme",
                "location": "Berlin",
                "dates": "2019 - 2024",
                "description": [
                    "Built payment APIs in Python",
                    "Cut query latency by 40% with SQL tuning",
                    "Organised the office party",
                ],
            }
        ],
        "education": [{"institution": "TU Berlin", "degree": "BSc Computer Science", "dates": "2015 - 2019"}],
        "skills": ["Python", "SQL"],
        "projects": [{"name": "ledger", "description": "Double-entry ledger service", "url": "https://example.org/ledger"}],
        "certifications": [{"name": "AWS Developer", "issuer": "Amazon", "date": "2022"}],
    }


@pytest.fixture
def curated_payload() -> dict:
    return {
        "name": "Ada Example",
        "title": "Backend Engineer",
        "contactInfo": {"email": "ada@example.com", "location": "Berlin", "linkedin": "https://made.up/profile"},
        "summary": "Backend engineer who ships reliable Python services. Cut latency by 40%.",
        "workExperience": [
            {
                "title": "Backend Developer",
                "company": "Acme",
                "location": "Berlin",
                "dates": "2019 - 2024",
                "description": ["Built payment APIs in Python", "Cut query latency by 40%"],
            }
        ],
        "skills": {"Languages": ["Python", "SQL"], "Soft Skills": ["Mentoring"]},
        "projects": [{"name": "ledger", "description": "Ledger service handling 1M entries a day."}],
    }


@pytest.fixture
def extracted_json(extracted_payload) -> str:
    return json.dumps(extracted_payload)


@pytest.fixture
def curated_json(curated_payload) -> str:
    return json.dumps(curated_payload, indent=2)


@pytest.fixture
def photo() -> PhotoPayload:
    return PhotoPayload(mime_type="image/png", data="iVBORw0KGgo=")


@pytest.fixture
def request_payload() -> dict:
    return {
        "apiKey": "sk-test",
        "model": "gpt-4o-mini",
        "targetJobTitle": "Backend Engineer",
        "profilePhoto": {"mimeType": "image/png", "data": "iVBORw0KGgo="},
        "profileText": "Ada Example. Backend developer at Acme 2019-2024. Python, SQL. Lives remote.",
        "personalDetails": {"email": "ada@example.com", "location": "Berlin"},
        "urls": {"githubUrl": "https://github.com/ada"},
    }
