"""
Unit tests for non-AI channel statistics and URL helpers.
"""

from channel_analyzer.models.analysis import VideoRecord
from channel_analyzer.utils.engagement import (
    analyzed_period,
    average_views,
    engagement_analysis,
    subtitle_details,
    transcript_coverage,
)
from channel_analyzer.utils.numbers import format_count, round_half_up
from channel_analyzer.utils.youtube import extract_video_id, is_youtube_url


class TestAggregates:
    def test_average_views_rounds_half_up(self):
        videos = [VideoRecord(title="a", view_count=1), VideoRecord(title="b", view_count=2)]
        assert average_views(videos) == 2

    def test_average_views_empty(self):
        assert average_views([]) == 0

    def test_transcript_coverage(self, videos):
        assert transcript_coverage(videos) == (1, 33)
        assert transcript_coverage([]) == (0, 0)


class TestEngagementAnalysis:
    def test_empty(self):
        assert engagement_analysis([]) is None

    def test_extremes_and_distribution(self):
        videos = [
            VideoRecord(id="a", title="a", view_count=2_000_000),
            VideoRecord(id="b", title="b", view_count=150_000),
            VideoRecord(id="c", title="c", view_count=5_000),
            VideoRecord(id="d", title="d", view_count=5_000),
        ]
        result = engagement_analysis(videos)
        assert result["most_viewed"]["id"] == "a"
        assert result["least_viewed"]["id"] == "c"
        assert result["view_distribution"] == {
            "over_1m": 1,
            "over_100k": 2,
            "over_10k": 2,
            "under_10k": 2,
        }


class TestSubtitleDetails:
    def test_only_usable_transcripts(self, videos):
        details = subtitle_details(videos)
        assert len(details) == 1
        assert details[0]["video_id"] == "v1"
        assert details[0]["transcript_length"] == 150
        assert details[0]["word_count"] == 1
        assert details[0]["estimated_reading_time"] == 1
        assert details[0]["preview"].endswith("...")


class TestAnalyzedPeriod:
    def test_oldest_and_newest(self, videos):
        assert analyzed_period(videos) == {
            "oldest_video": "2024-01-20T09:00:00Z",
            "newest_video": "2024-03-01T09:00:00Z",
        }

    def test_unparseable_dates_ignored(self):
        videos = [VideoRecord(title="a", published_at="yesterday")]
        assert analyzed_period(videos) == {"oldest_video": None, "newest_video": None}


class TestNumbers:
    def test_round_half_up(self):
        assert round_half_up(58.5) == 59
        assert round_half_up(0.0451, 3) == 0.045
        assert round_half_up(2.5) == 3

    def test_format_count(self):
        assert format_count(1234567) == "1,234,567"
        assert format_count(None) == "N/A"


class TestYoutubeUrls:
    def test_is_youtube_url(self):
        assert is_youtube_url("https://www.youtube.com/@channel")
        assert is_youtube_url("youtube.com/c/channel")
        assert is_youtube_url("https://youtu.be/dQw4w9WgXcQ")
        assert not is_youtube_url("https://vimeo.com/123")
        assert not is_youtube_url("https://notyoutube.com/watch?v=x")

    def test_extract_video_id(self):
        assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"
        assert extract_video_id("https://www.youtube.com/shorts/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
        assert extract_video_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
        assert extract_video_id("https://www.youtube.com/@channel") is None
