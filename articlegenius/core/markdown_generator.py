"""
Markdown generation module

One walk over the article decides which elements are present; renderers
only decide how each present element looks.
"""
from __future__ import annotations

import textwrap
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from .models import ArticleRecord, ImageBlock, TextBlock

DEFAULT_TITLE = "Untitled Article"
DEFAULT_IMAGE_CAPTION = "Image"
FAQ_HEADING = "Frequently Asked Questions"
CONCLUSION_HEADING = "Conclusion"


def _present(value: Optional[str]) -> bool:
    return value is not None and value != ""


def walk_article(article: ArticleRecord, renderer) -> None:
    """
    Feed every present element of ``article`` to ``renderer`` in order

    Args:
        article: Article to traverse
        renderer: Object implementing the renderer hooks
            (title, subtitle, introduction, heading, text, image,
            faq_start, faq_entry, conclusion)
    """
    title = article.title if _present(article.title) else DEFAULT_TITLE
    renderer.title(title)

    if _present(article.subtitle):
        renderer.subtitle(article.subtitle)
    if _present(article.introduction):
        renderer.introduction(article.introduction)

    for section in article.sections:
        if _present(section.heading):
            renderer.heading(section.heading)
        for block in section.content:
            if isinstance(block, TextBlock):
                renderer.text(block.value)
            elif isinstance(block, ImageBlock) and _present(block.url):
                renderer.image(block.url, block.caption, section.heading or article.title)

    if article.faq_section:
        renderer.faq_start()
        for entry in article.faq_section:
            renderer.faq_entry(entry.question, entry.answer)

    if _present(article.conclusion):
        renderer.conclusion(article.conclusion)


class MarkdownRenderer:
    """Collect Markdown text; every element ends with a blank line"""

    def __init__(self):
        self.parts: List[str] = []

    def _emit(self, text: str) -> None:
        self.parts.append(f"{text}\n\n")

    def title(self, text: str) -> None:
        self._emit(f"# {text}")

    def subtitle(self, text: str) -> None:
        self._emit(f"## {text}")

    def introduction(self, text: str) -> None:
        self._emit(text)

    def heading(self, text: str) -> None:
        self._emit(f"### {text}")

    def text(self, value: str) -> None:
        self._emit(value)

    def image(self, url: str, caption: Optional[str], context: Optional[str]) -> None:
        self._emit(f"![{caption or DEFAULT_IMAGE_CAPTION}]({url})")

    def faq_start(self) -> None:
        self._emit(f"## {FAQ_HEADING}")

    def faq_entry(self, question: str, answer: str) -> None:
        self._emit(f"* **Q:** {question}\n  **A:** {answer}")

    def conclusion(self, text: str) -> None:
        self._emit(f"## {CONCLUSION_HEADING}")
        self._emit(text)

    def result(self) -> str:
        return "".join(self.parts)


@dataclass
class ViewBlock:
    """One displayable element of an article"""
    kind: str
    text: str = ""
    url: Optional[str] = None
    caption: Optional[str] = None


@dataclass
class ArticleView:
    """Structured view model of an article for on-screen display"""
    blocks: List[ViewBlock] = field(default_factory=list)

    def kinds(self) -> List[str]:
        return [block.kind for block in self.blocks]


class ViewRenderer:
    """Collect an ArticleView"""

    def __init__(self):
        self.view = ArticleView()

    def _add(self, kind: str, text: str = "", **extra) -> None:
        self.view.blocks.append(ViewBlock(kind=kind, text=text, **extra))

    def title(self, text: str) -> None:
        self._add("title", text)

    def subtitle(self, text: str) -> None:
        self._add("subtitle", text)

    def introduction(self, text: str) -> None:
        self._add("paragraph", text)

    def heading(self, text: str) -> None:
        self._add("heading", text)

    def text(self, value: str) -> None:
        self._add("paragraph", value)

    def image(self, url: str, caption: Optional[str], context: Optional[str]) -> None:
        alt = caption or f"Image for {context or DEFAULT_TITLE}"
        self._add("image", alt, url=url, caption=caption)

    def faq_start(self) -> None:
        self._add("heading", FAQ_HEADING)

    def faq_entry(self, question: str, answer: str) -> None:
        self._add("question", question)
        self._add("answer", answer)

    def conclusion(self, text: str) -> None:
        self._add("heading", CONCLUSION_HEADING)
        self._add("paragraph", text)

    def result(self) -> ArticleView:
        return self.view


def _coerce(article: Union[ArticleRecord, Mapping[str, Any]]) -> ArticleRecord:
    if isinstance(article, ArticleRecord):
        return article
    return ArticleRecord.model_validate(article)


def serialize(article: Union[ArticleRecord, Mapping[str, Any]]) -> str:
    """
    Serialize an article into Markdown

    Args:
        article: ArticleRecord, or a mapping with the same shape

    Returns:
        Markdown string

    Raises:
        pydantic.ValidationError: If the mapping has no ``sections``
    """
    renderer = MarkdownRenderer()
    walk_article(_coerce(article), renderer)
    return renderer.result()


def build_view(article: Union[ArticleRecord, Mapping[str, Any]]) -> ArticleView:
    renderer = ViewRenderer()
    walk_article(_coerce(article), renderer)
    return renderer.result()


def format_view(view: ArticleView, width: int = 80) -> str:
    """Render a view model as wrapped plain text for the terminal"""
    lines: List[str] = []
    for block in view.blocks:
        if block.kind == "title":
            lines.extend([block.text, "=" * min(width, len(block.text)), ""])
        elif block.kind in ("subtitle", "heading"):
            lines.extend([block.text, "-" * min(width, len(block.text)), ""])
        elif block.kind == "image":
            lines.append(f"[{block.text}] {block.url}")
            if block.caption and block.caption != block.text:
                lines.append(f"  {block.caption}")
            lines.append("")
        elif block.kind == "question":
            lines.extend(textwrap.wrap(f"Q: {block.text}", width) or ["Q:"])
        elif block.kind == "answer":
            lines.extend(
                textwrap.wrap(
                    f"A: {block.text}",
                    width,
                    subsequent_indent="   ",
                ) or ["A:"]
            )
            lines.append("")
        else:
            lines.extend(textwrap.wrap(block.text, width) or [""])
            lines.append("")
    return "\n".join(lines).rstrip() + "\n"


class MarkdownGenerator:
    """Generate markdown output for an article"""

    @staticmethod
    def generate(article: Union[ArticleRecord, Mapping[str, Any]]) -> str:
        """
        Generate markdown from article

        Args:
            article: Article object

        Returns:
            Markdown string
        """
        return serialize(article)
