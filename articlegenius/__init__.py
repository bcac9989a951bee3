"""
ArticleGenius - topic to structured article to Markdown

This is the main public API module.
"""

from .core.models import ArticleRecord
from .core.markdown_generator import serialize
from .core.session import ArticleSession

__version__ = "0.1.0"
__all__ = [
    "ArticleRecord",
    "ArticleSession",
    "serialize",
]
