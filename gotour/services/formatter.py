"""
CodeFormatter - Format Go source through the backend's /_/fmt endpoint.
"""

import logging
from typing import Optional

import requests

from gotour.config import DEFAULT_BASE_URL, DEFAULT_HTTP_TIMEOUT
from gotour.schemas import FormatResult


logger = logging.getLogger(__name__)

FMT_PATH = "/_/fmt"


def _form_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class CodeFormatter:
    """
    Send source text to the formatting service.

    The endpoint answers 200 with {"Body": ..., "Error": ...}; a formatting
    problem is reported in Error, not as an HTTP failure.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        self.url = base_url.rstrip("/") + FMT_PATH
        self.session = session or requests.Session()
        self.timeout = timeout

    def format(self, body: str, imports=False) -> FormatResult:
        """
        Format a snippet.

        Args:
            body: Source text, sent as is
            imports: Whether the backend should also fix imports

        Returns:
            FormatResult with the formatted body or the formatter's error

        Raises:
            requests.RequestException: On connection failure or non-2xx status
        """
        response = self.session.post(
            self.url,
            data={"body": body, "imports": _form_value(imports)},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=self.timeout,
        )
        response.raise_for_status()

        result = FormatResult.model_validate(response.json())
        if not result.ok:
            logger.info(f"Formatter reported an error: {result.error}")
        return result
