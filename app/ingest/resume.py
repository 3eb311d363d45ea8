"""Resume PDF relay."""

from __future__ import annotations

import logging
import os

import httpx

from app.ingest.exceptions import IngestError

logger = logging.getLogger(__name__)

DEFAULT_RESUME_URL = "https://github.com/n8thantran/resume/raw/SWE/main.pdf"
RESUME_FILENAME = "nathan-tran-resume.pdf"


class ResumeError(IngestError):
    pass


def resume_url() -> str:
    return os.environ.get("RESUME_URL", DEFAULT_RESUME_URL)


async def fetch_resume(url: str | None = None) -> bytes:
    url = url or resume_url()
    try:
        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        raise ResumeError(str(exc) or exc.__class__.__name__) from exc
    if response.is_error:
        raise ResumeError(f"Failed to fetch resume: {response.reason_phrase}")
    logger.info("Fetched resume (%s bytes)", len(response.content))
    return response.content
