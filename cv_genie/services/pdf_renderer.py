"""Render an HTML document to PDF bytes with a headless Chromium session."""

from typing import Awaitable, Callable

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from cv_genie.config import (
    BROWSER_WS_ENDPOINT,
    PDF_FORMAT,
    PDF_MARGIN,
    PDF_PRINT_BACKGROUND,
    RENDER_TIMEOUT_MS,
)
from cv_genie.errors import CollaboratorFailure
from cv_genie.utils.logger import get_logger

logger = get_logger(__name__)

Renderer = Callable[[str], Awaitable[bytes]]


async def render_pdf(html: str) -> bytes:
    """
    Print html to PDF (fixed page size, fixed margins, backgrounds on).
    Browser sessions are scarce, so the browser is closed on every exit path.
    Uses a remote browser when BROWSER_WS_ENDPOINT is set, otherwise a local one.
    """
    try:
        async with async_playwright() as p:
            if BROWSER_WS_ENDPOINT:
                browser = await p.chromium.connect_over_cdp(BROWSER_WS_ENDPOINT)
            else:
                browser = await p.chromium.launch(headless=True)
            try:
                page = await browser.new_page()
                await page.set_content(html, wait_until="networkidle", timeout=RENDER_TIMEOUT_MS)
                pdf = await page.pdf(
                    format=PDF_FORMAT,
                    print_background=PDF_PRINT_BACKGROUND,
                    margin=PDF_MARGIN,
                )
            finally:
                await browser.close()
    except PlaywrightError as e:
        logger.warning("PDF rendering failed: %s", e)
        raise CollaboratorFailure("PDF rendering", str(e)) from e
    logger.info("Rendered PDF: html_chars=%s pdf_bytes=%s", len(html), len(pdf))
    return pdf
