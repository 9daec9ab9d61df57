"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SERVICE_NAME: str = "cv-genie"
SERVICE_VERSION: str = "1.0.0"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# API surface
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))
# Comma-separated list of browser origins allowed to call the API
CORS_ORIGINS: list = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# Text generation – credentials and model come with each request
DEFAULT_MODEL_NAME: str = os.getenv("DEFAULT_MODEL_NAME", "gpt-4o-mini")
EXTRACTION_TEMPERATURE: float = float(os.getenv("EXTRACTION_TEMPERATURE", "0.1"))
CURATION_TEMPERATURE: float = float(os.getenv("CURATION_TEMPERATURE", "0.4"))
LLM_TIMEOUT_SECONDS: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "120"))
MAX_PROFILE_CHARS: int = int(os.getenv("MAX_PROFILE_CHARS", "20000"))

# PDF rendering
PDF_FORMAT: str = os.getenv("PDF_FORMAT", "A4")
PDF_MARGIN: dict = {side: os.getenv("PDF_MARGIN", "20mm") for side in ("top", "right", "bottom", "left")}
PDF_PRINT_BACKGROUND: bool = _env_bool("PDF_PRINT_BACKGROUND", True)
PDF_FILENAME: str = os.getenv("PDF_FILENAME", "CV_Genie.pdf")
RENDER_TIMEOUT_MS: int = int(os.getenv("RENDER_TIMEOUT_MS", "30000"))
# Remote Chromium (CDP websocket); empty means launch a local headless browser
BROWSER_WS_ENDPOINT: str = os.getenv("BROWSER_WS_ENDPOINT", "")

# Streamlit client
BACKEND_URL: str = os.getenv("BACKEND_URL", f"http://localhost:{API_PORT}")
CLIENT_TIMEOUT_SECONDS: float = float(os.getenv("CLIENT_TIMEOUT_SECONDS", "300"))
