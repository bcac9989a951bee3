"""
Application state for one user: the current topic and article
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .exporter import copy_to_clipboard, save_markdown, suggest_filename
from .generator_client import (
    EMPTY_TOPIC_MESSAGE,
    PLACEHOLDER_MARKER,
    PLACEHOLDER_MESSAGE,
    ArticleGeneratorClient,
)
from .markdown_generator import ArticleView, build_view, serialize
from .models import ArticleRecord

logger = logging.getLogger(__name__)


class NoArticleError(RuntimeError):
    """Raised when an export is requested before an article exists."""


class ArticleSession:
    """Holds the current article and runs the copy/download actions on it"""

    def __init__(self, client: Optional[ArticleGeneratorClient] = None):
        """
        Initialize session

        Args:
            client: Generation service client (default endpoint if omitted)
        """
        self.client = client or ArticleGeneratorClient()
        self.topic: str = ""
        self.article: Optional[ArticleRecord] = None
        self.loading: bool = False
        self.error: Optional[str] = None

    def generate(self, topic: str) -> Optional[ArticleRecord]:
        """
        Replace the current article with a newly generated one

        Returns:
            The new article, or None when generation failed (see ``error``)
        """
        self.topic = topic
        if not topic or not topic.strip():
            self.error = EMPTY_TOPIC_MESSAGE
            return None
        if PLACEHOLDER_MARKER in getattr(self.client, "endpoint", ""):
            self.error = PLACEHOLDER_MESSAGE
            return None

        self.loading = True
        self.error = None
        self.article = None
        try:
            self.article = self.client.generate(topic)
        except Exception as exc:
            logger.error("Error generating article: %s", exc)
            self.error = (
                f"Failed to generate article: {exc}. "
                "Please try again or with a different topic."
            )
        finally:
            self.loading = False
        return self.article

    def load(self, article: ArticleRecord) -> ArticleRecord:
        """Make an already available article the current one"""
        self.error = None
        self.article = article
        return article

    def clear(self) -> None:
        self.topic = ""
        self.article = None
        self.error = None

    def _require_article(self) -> ArticleRecord:
        if self.article is None:
            raise NoArticleError("No article has been generated yet.")
        return self.article

    def markdown(self) -> str:
        return serialize(self._require_article())

    def view(self) -> ArticleView:
        return build_view(self._require_article())

    def copy_to_clipboard(self) -> str:
        """Copy the current article as markdown; returns the tool used"""
        return copy_to_clipboard(self.markdown())

    def download(self, directory=".") -> Path:
        """Save the current article as markdown under ``directory``"""
        article = self._require_article()
        path = Path(directory) / suggest_filename(article.title)
        return save_markdown(serialize(article), path)
