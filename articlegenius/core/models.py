"""
Data models for articlegenius
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class _Block(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str


class TextBlock(_Block):
    """A paragraph of body text"""
    type: str = "text"
    value: str


class ImageBlock(_Block):
    """An image reference; blocks without a url are not rendered"""
    type: str = "image"
    url: Optional[str] = None
    caption: Optional[str] = None


class UnknownBlock(_Block):
    """Any block type the renderers do not know about"""
    raw: Dict[str, Any] = {}


ContentBlock = Union[TextBlock, ImageBlock, UnknownBlock]


def parse_block(data: Any) -> ContentBlock:
    """Build the block variant matching ``data["type"]``"""
    if isinstance(data, _Block):
        return data
    if not isinstance(data, dict):
        return UnknownBlock(type="", raw={"value": data})
    block_type = data.get("type")
    if block_type == "text":
        return TextBlock.model_validate(data)
    if block_type == "image":
        return ImageBlock.model_validate(data)
    return UnknownBlock(type=str(block_type), raw=dict(data))


class Section(BaseModel):
    """A section of the generated article"""
    model_config = ConfigDict(extra="ignore")

    heading: Optional[str] = None
    content: List[ContentBlock]

    @field_validator("content", mode="before")
    @classmethod
    def _parse_blocks(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [parse_block(item) for item in value]
        return value


class FaqEntry(BaseModel):
    """One question/answer pair"""
    question: str
    answer: str


class ArticleRecord(BaseModel):
    """Structured article returned by the generation service"""
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    subtitle: Optional[str] = None
    introduction: Optional[str] = None
    sections: List[Section]
    faq_section: Optional[List[FaqEntry]] = None
    conclusion: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArticleRecord":
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str) -> "ArticleRecord":
        return cls.model_validate(json.loads(text))

    @classmethod
    def from_file(cls, filepath) -> "ArticleRecord":
        """Load a record saved as JSON or YAML"""
        path = Path(filepath)
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            return cls.model_validate(yaml.safe_load(text))
        return cls.from_json(text)

    def to_markdown(self) -> str:
        """Convert to markdown format"""
        from .markdown_generator import serialize

        return serialize(self)

    @property
    def word_count(self) -> int:
        words = 0
        for part in (self.title, self.subtitle, self.introduction, self.conclusion):
            words += len((part or "").split())
        for section in self.sections:
            words += len((section.heading or "").split())
            for block in section.content:
                if isinstance(block, TextBlock):
                    words += len(block.value.split())
        for entry in self.faq_section or []:
            words += len(entry.question.split()) + len(entry.answer.split())
        return words

    @property
    def image_count(self) -> int:
        return sum(
            1
            for section in self.sections
            for block in section.content
            if isinstance(block, ImageBlock) and block.url
        )

    def __str__(self):
        return (
            f"Article: {self.title or 'Untitled Article'} "
            f"({len(self.sections)} sections, {self.word_count} words, "
            f"{self.image_count} images)"
        )
