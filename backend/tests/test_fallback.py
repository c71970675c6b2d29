"""Tests for deterministic fallback records."""

from howto.domains.search.fallback import FALLBACK_COUNT, mock_articles, mock_videos


class TestMockVideos:
    """Test mock_videos placeholder data."""

    def test_five_videos(self):
        assert len(mock_videos("tie a tie")) == FALLBACK_COUNT == 5

    def test_deterministic(self):
        assert mock_videos("tie a tie") == mock_videos("tie a tie")
        first = [v.model_dump_json() for v in mock_videos("tie a tie")]
        second = [v.model_dump_json() for v in mock_videos("tie a tie")]
        assert first == second

    def test_query_interpolated(self):
        videos = mock_videos("tie a tie")
        assert all("tie a tie" in v.title.lower() for v in videos)
        assert videos[0].url == "https://www.youtube.com/results?search_query=tie+a+tie"

    def test_how_to_prefix_not_doubled(self):
        assert mock_videos("How to tie a tie")[0].title == "How to tie a tie - Complete Beginner's Guide"

    def test_ids_unique(self):
        ids = [v.id for v in mock_videos("tie a tie")]
        assert len(set(ids)) == len(ids)
        assert ids[0] == "fallback-video-1"

    def test_different_queries_differ(self):
        assert mock_videos("tie a tie") != mock_videos("cook rice")


class TestMockArticles:
    """Test mock_articles placeholder data."""

    def test_five_articles(self):
        assert len(mock_articles("cook rice")) == 5

    def test_deterministic(self):
        assert mock_articles("cook rice") == mock_articles("cook rice")

    def test_urls_encode_query(self):
        articles = mock_articles("cook rice & beans")
        assert articles[0].url == "https://www.wikihow.com/wikiHowTo?search=cook+rice+%26+beans"
        assert all(a.website for a in articles)

    def test_braces_in_query_are_literal(self):
        articles = mock_articles("format {name} strings")
        assert "{name}" in articles[0].title
