"""
Generation service client - turns a topic into an ArticleRecord
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from .config import DEFAULT_ENDPOINT
from .models import ArticleRecord

logger = logging.getLogger(__name__)

PLACEHOLDER_MARKER = "YOUR_CLOUDFLARE_WORKER_URL"
EMPTY_TOPIC_MESSAGE = "Please enter a topic to generate an article."
PLACEHOLDER_MESSAGE = (
    "API endpoint is still a placeholder. "
    "Set ARTICLEGENIUS_API_ENDPOINT to the generation service URL."
)


class GenerationError(RuntimeError):
    """Raised when the generation service request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(GenerationError):
    """Raised when the client is pointed at an unusable endpoint."""


class ArticleGeneratorClient:
    """POST a topic to the generation service and validate the reply"""

    def __init__(self, endpoint: str = DEFAULT_ENDPOINT, timeout: float = 60.0):
        self.endpoint = endpoint
        self.timeout = timeout

    def generate(self, topic: str) -> ArticleRecord:
        """
        Request a new article

        Args:
            topic: Free-form topic text

        Returns:
            Validated ArticleRecord

        Raises:
            ValueError: If topic is blank
            ConfigurationError: If the endpoint is still a placeholder
            GenerationError: If the request or the response is unusable
        """
        if not topic or not topic.strip():
            raise ValueError(EMPTY_TOPIC_MESSAGE)
        if PLACEHOLDER_MARKER in self.endpoint:
            raise ConfigurationError(PLACEHOLDER_MESSAGE)

        logger.info("Requesting article for topic %r from %s", topic, self.endpoint)
        try:
            response = requests.post(
                self.endpoint,
                json={"topic": topic},
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise GenerationError(f"Request failed: {exc}") from exc

        if not response.ok:
            raise GenerationError(
                self._error_message(response),
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise GenerationError("Service returned a response that is not JSON") from exc

        try:
            article = ArticleRecord.from_dict(data)
        except ValidationError as exc:
            raise GenerationError(f"Service returned a malformed article: {exc}") from exc

        logger.debug("Generated article: %s", data)
        logger.info("Received %s", article)
        return article

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        fallback = f"HTTP error! status: {response.status_code}"
        try:
            payload: Dict[str, Any] = response.json()
        except ValueError:
            return fallback
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        return fallback
