"""
Integration tests
"""
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from articlegenius import ArticleRecord, ArticleSession
from articlegenius.core.generator_client import ArticleGeneratorClient, GenerationError
from articlegenius.core.session import NoArticleError


MARS = ArticleRecord.from_dict(
    {
        "title": "Mars",
        "sections": [{"heading": "Intro", "content": [{"type": "text", "value": "Mars is red."}]}],
    }
)


def _session(result=None, error=None):
    client = Mock(spec=ArticleGeneratorClient)
    if error is not None:
        client.generate.side_effect = error
    else:
        client.generate.return_value = result
    return ArticleSession(client=client), client


class TestArticleSession:
    """Test ArticleSession integration"""

    def test_initialization(self):
        session = ArticleSession()
        assert session.article is None
        assert session.loading is False
        assert session.error is None
        assert isinstance(session.client, ArticleGeneratorClient)

    def test_generate_stores_article(self):
        session, client = _session(result=MARS)
        assert session.generate("Mars") is MARS
        assert session.article is MARS
        assert session.topic == "Mars"
        assert session.error is None
        assert session.loading is False
        client.generate.assert_called_once_with("Mars")

    def test_blank_topic(self):
        session, client = _session(result=MARS)
        assert session.generate("  ") is None
        assert session.error == "Please enter a topic to generate an article."
        client.generate.assert_not_called()

    def test_failure_clears_previous_article(self):
        """A failed request leaves no stale article behind"""
        session, client = _session(result=MARS)
        session.generate("Mars")
        client.generate.side_effect = GenerationError("HTTP error! status: 500", 500)

        assert session.generate("Venus") is None
        assert session.article is None
        assert session.loading is False
        assert session.error == (
            "Failed to generate article: HTTP error! status: 500. "
            "Please try again or with a different topic."
        )

    def test_placeholder_endpoint_keeps_article(self):
        """A placeholder endpoint is reported before any state is cleared"""
        session = ArticleSession(
            client=ArticleGeneratorClient(endpoint="https://YOUR_CLOUDFLARE_WORKER_URL/generate-article")
        )
        session.load(MARS)
        with patch("requests.post") as mock_post:
            assert session.generate("Venus") is None
            mock_post.assert_not_called()
        assert session.article is MARS
        assert session.error.startswith("API endpoint is still a placeholder")

    def test_loading_during_request(self):
        seen = {}
        session, client = _session()

        def fake_generate(topic):
            seen["loading"] = session.loading
            return MARS

        client.generate.side_effect = fake_generate
        session.generate("Mars")
        assert seen["loading"] is True
        assert session.loading is False

    def test_markdown(self):
        session, _ = _session(result=MARS)
        session.generate("Mars")
        assert session.markdown() == "# Mars\n\n### Intro\n\nMars is red.\n\n"

    def test_exports_require_article(self, tmp_path: Path):
        session = ArticleSession()
        with pytest.raises(NoArticleError):
            session.markdown()
        with pytest.raises(NoArticleError):
            session.download(tmp_path)
        with pytest.raises(NoArticleError):
            session.copy_to_clipboard()

    def test_download(self, tmp_path: Path):
        """Markdown is saved under a name derived from the title"""
        session = ArticleSession()
        session.load(MARS)
        path = session.download(tmp_path / "outputs")
        assert path == tmp_path / "outputs" / "mars.md"
        assert path.read_text(encoding="utf-8") == session.markdown()

    def test_copy_to_clipboard(self):
        session = ArticleSession()
        session.load(MARS)
        with patch("articlegenius.core.session.copy_to_clipboard", return_value="pbcopy") as mock_copy:
            assert session.copy_to_clipboard() == "pbcopy"
        mock_copy.assert_called_once_with(session.markdown())

    def test_clear(self):
        session = ArticleSession()
        session.load(MARS)
        session.clear()
        assert session.article is None
        assert session.topic == ""
