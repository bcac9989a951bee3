"""
Test models
"""
import json

import pytest
from pydantic import ValidationError

from articlegenius.core.models import (
    ArticleRecord,
    FaqEntry,
    ImageBlock,
    Section,
    TextBlock,
    UnknownBlock,
)


def _record(**overrides):
    data = {
        "title": "Mars",
        "sections": [
            {
                "heading": "Intro",
                "content": [
                    {"type": "text", "value": "Mars is red."},
                    {"type": "image", "url": "https://img.example/mars.jpg", "caption": "Red planet"},
                    {"type": "video", "src": "https://video.example/mars.mp4"},
                ],
            }
        ],
    }
    data.update(overrides)
    return data


class TestArticleRecord:
    """Test ArticleRecord model"""

    def test_from_dict_builds_block_variants(self):
        """Blocks are parsed into their tagged variants"""
        article = ArticleRecord.from_dict(_record())
        blocks = article.sections[0].content
        assert isinstance(blocks[0], TextBlock)
        assert blocks[0].value == "Mars is red."
        assert isinstance(blocks[1], ImageBlock)
        assert blocks[1].caption == "Red planet"
        assert isinstance(blocks[2], UnknownBlock)
        assert blocks[2].type == "video"

    def test_optional_fields_default_to_none(self):
        """Only sections is required"""
        article = ArticleRecord.from_dict({"sections": []})
        assert article.title is None
        assert article.subtitle is None
        assert article.introduction is None
        assert article.faq_section is None
        assert article.conclusion is None

    def test_missing_sections_is_rejected(self):
        """A record without sections cannot be built"""
        with pytest.raises(ValidationError):
            ArticleRecord.from_dict({"title": "No body"})

    def test_missing_section_content_is_rejected(self):
        """Every section needs a content list"""
        with pytest.raises(ValidationError):
            ArticleRecord.from_dict({"sections": [{"heading": "Empty"}]})

    def test_extra_keys_are_ignored(self):
        """Unexpected service fields do not break parsing"""
        article = ArticleRecord.from_dict(_record(model="gemini", tokens=1200))
        assert article.title == "Mars"

    def test_image_without_url(self):
        """Image url is optional in the model"""
        section = Section.model_validate(
            {"content": [{"type": "image", "caption": "Lost"}]}
        )
        assert section.content[0].url is None

    def test_from_json(self):
        """Test JSON text parsing"""
        article = ArticleRecord.from_json(json.dumps(_record()))
        assert len(article.sections) == 1

    def test_from_file_yaml(self, tmp_path):
        """YAML files are accepted as well as JSON"""
        path = tmp_path / "mars.yaml"
        path.write_text(
            "title: Mars\n"
            "sections:\n"
            "  - heading: Intro\n"
            "    content:\n"
            "      - type: text\n"
            "        value: Mars is red.\n",
            encoding="utf-8",
        )
        article = ArticleRecord.from_file(path)
        assert article.sections[0].content[0].value == "Mars is red."

    def test_from_file_json(self, tmp_path):
        path = tmp_path / "mars.json"
        path.write_text(json.dumps(_record()), encoding="utf-8")
        assert ArticleRecord.from_file(path).title == "Mars"

    def test_counts(self):
        """Test word and image counts"""
        article = ArticleRecord.from_dict(
            _record(faq_section=[{"question": "Is it red?", "answer": "Yes."}])
        )
        assert article.image_count == 1
        # "Mars" + "Intro" + "Mars is red." + "Is it red?" + "Yes."
        assert article.word_count == 1 + 1 + 3 + 3 + 1

    def test_str(self):
        article = ArticleRecord.from_dict({"sections": []})
        assert "Untitled Article" in str(article)

    def test_str_counts_images(self):
        assert "1 images" in str(ArticleRecord.from_dict(_record()))

    def test_non_object_block(self):
        """Entries that are not objects become unknown blocks"""
        section = Section.model_validate({"content": ["stray string", None]})
        assert all(isinstance(block, UnknownBlock) for block in section.content)
        assert section.content[0].raw == {"value": "stray string"}


class TestFaqEntry:
    """Test FaqEntry model"""

    def test_requires_both_fields(self):
        with pytest.raises(ValidationError):
            FaqEntry.model_validate({"question": "Why?"})
