"""
ArticleGenius - generate structured articles from a topic

This package talks to the article generation service, validates the
structured article it returns, and renders it as terminal text or
Markdown for the clipboard and for download.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .models import ArticleRecord, FaqEntry, ImageBlock, Section, TextBlock
from .markdown_generator import MarkdownGenerator, serialize
from .session import ArticleSession

__all__ = [
    "ArticleRecord",
    "ArticleSession",
    "FaqEntry",
    "ImageBlock",
    "MarkdownGenerator",
    "Section",
    "TextBlock",
    "serialize",
]
