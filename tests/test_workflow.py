"""
Tests for the channel analysis workflows (direct data flow and URL flow).
"""

from xml.etree.ElementTree import ParseError

import httpx
import pytest

import channel_analyzer.utils.transcript as transcript_module
from channel_analyzer.agents.analysis import ChannelAnalyzer
from channel_analyzer.constants import ReportVariant
from channel_analyzer.core.workflow import (
    analyze_channel_data,
    analyze_channel_url,
    serialize_report,
    validate_url_request,
)
from channel_analyzer.models.analysis import FreeTextReport
from channel_analyzer.services.apify import ApifyVideoFetcher
from channel_analyzer.utils.api_helpers import (
    BackendUnavailableError,
    InsufficientDataError,
    MalformedReportError,
    QuotaExceededError,
    UpstreamNotFoundError,
)

from conftest import FakeLLMClient

CHANNEL_URL = "https://www.youtube.com/@testchannel"
LONG_CAPTION = "travel tips budget travel packing " * 20

ITEMS = [
    {
        "id": "a", "title": "Budget travel guide", "viewCount": 120_000, "likes": 900,
        "commentsCount": 40, "date": "2024-03-01T00:00:00.000Z", "channelName": "Travel Channel",
        "numberOfSubscribers": 50_000, "subtitles": [{"plaintext": LONG_CAPTION}],
    },
    {
        "id": "b", "title": "Packing list", "viewCount": 8_000, "likes": 100,
        "commentsCount": 5, "date": "2024-02-01T00:00:00.000Z", "channelName": "Travel Channel",
        "subtitles": [{"plaintext": LONG_CAPTION}],
    },
]


def _fetcher(items=ITEMS, token="token"):
    return ApifyVideoFetcher(
        api_token=token,
        actor_id="streamers~youtube-scraper",
        timeout=5,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=items)),
    )


class TestAnalyzeChannelData:
    async def test_response_shape(self, analyzer, channel, videos):
        data = await analyze_channel_data(analyzer, channel, videos)
        assert data["ai_analysis"] == {"report_text": "Mock report"}
        assert data["analysis_metadata"]["analyzed_videos_count"] == 3
        assert data["channel_summary"] == {
            "name": "Test Channel",
            "subscriber_count": 12500,
            "analyzed_period": {
                "oldest_video": "2024-01-20T09:00:00Z",
                "newest_video": "2024-03-01T09:00:00Z",
            },
        }
        assert data["meta"]["analysis_type"] == "ai_comprehensive"
        assert data["meta"]["api_version"] == "2.0"

    async def test_structured_report_has_markdown(self, channel, videos):
        analyzer = ChannelAnalyzer(FakeLLMClient(response="{}"))
        data = await analyze_channel_data(analyzer, channel, videos, ReportVariant.STRUCTURED)
        assert data["ai_analysis"]["report_markdown"].startswith("# AI Analysis Report")
        assert "channel_overview" in data["ai_analysis"]

    async def test_errors_propagate(self, channel, videos):
        analyzer = ChannelAnalyzer(FakeLLMClient(response="not json"))
        with pytest.raises(MalformedReportError):
            await analyze_channel_data(analyzer, channel, videos, ReportVariant.STRUCTURED)


class TestValidateUrlRequest:
    @pytest.mark.parametrize("url", ["", None, "https://vimeo.com/123", 42])
    def test_bad_url(self, url):
        with pytest.raises(InsufficientDataError):
            validate_url_request(url, 5)

    @pytest.mark.parametrize("max_videos", [0, 51, -1, "5"])
    def test_bad_max_videos(self, max_videos):
        with pytest.raises(InsufficientDataError):
            validate_url_request(CHANNEL_URL, max_videos)

    def test_valid(self):
        validate_url_request(CHANNEL_URL, 1)
        validate_url_request("https://youtu.be/dQw4w9WgXcQ", 50)


class TestAnalyzeChannelUrl:
    async def test_statistics_without_ai(self, analyzer, fake_llm):
        data = await analyze_channel_url(CHANNEL_URL, 5, _fetcher(), analyzer)

        assert fake_llm.calls == []
        assert "ai_analysis" not in data
        assert data["channel_info"]["name"] == "Travel Channel"
        assert [v["id"] for v in data["videos"]] == ["a", "b"]
        assert data["analysis_summary"]["total_views"] == 128_000
        assert data["analysis_summary"]["subtitle_coverage_rate"] == 100
        assert data["analysis_summary"]["top_keywords"][0] == "travel"
        assert data["keyword_analysis"][0]["word"] == "travel"
        assert data["engagement_analysis"]["view_distribution"]["over_100k"] == 1
        assert len(data["subtitle_details"]) == 2
        assert data["meta"]["analysis_type"] == "comprehensive"
        assert data["meta"]["ai_analysis_enabled"] is False
        assert data["meta"]["ai_analysis_available"] is True

    async def test_keyword_analysis_needs_enough_caption_text(self, analyzer):
        items = [{**ITEMS[0], "subtitles": [{"plaintext": "x" * 150}]}]
        data = await analyze_channel_url(CHANNEL_URL, 5, _fetcher(items), analyzer)
        assert data["keyword_analysis"] is None

    async def test_with_ai(self, analyzer):
        data = await analyze_channel_url(CHANNEL_URL, 5, _fetcher(), analyzer, include_ai_analysis=True)
        assert data["ai_analysis"] == {"report_text": "Mock report"}
        assert data["ai_analysis_metadata"]["videos_with_transcripts"] == 2
        assert data["meta"]["analysis_type"] == "comprehensive_with_ai"

    async def test_ai_quota_failure_keeps_statistics(self):
        analyzer = ChannelAnalyzer(FakeLLMClient(error=QuotaExceededError("quota")))
        data = await analyze_channel_url(CHANNEL_URL, 5, _fetcher(), analyzer, include_ai_analysis=True)

        assert data["ai_analysis"]["status_code"] == 429
        assert data["ai_analysis"]["error_type"] == "QuotaExceededError"
        assert data["ai_analysis"]["error"] == QuotaExceededError.user_message
        assert "ai_analysis_metadata" not in data
        assert data["analysis_summary"]["total_videos"] == 2

    async def test_malformed_report_is_inline(self):
        analyzer = ChannelAnalyzer(FakeLLMClient(response="no json here"))
        data = await analyze_channel_url(
            CHANNEL_URL, 5, _fetcher(), analyzer,
            include_ai_analysis=True, variant=ReportVariant.STRUCTURED,
        )
        assert data["ai_analysis"]["error_type"] == "MalformedReportError"
        assert len(data["videos"]) == 2

    async def test_unexpected_ai_error_is_inline(self):
        analyzer = ChannelAnalyzer(FakeLLMClient(error=RuntimeError("boom")))
        data = await analyze_channel_url(CHANNEL_URL, 5, _fetcher(), analyzer, include_ai_analysis=True)
        assert data["ai_analysis"]["status_code"] == 500
        assert "boom" not in data["ai_analysis"]["error"]

    async def test_ai_requested_but_unconfigured(self):
        analyzer = ChannelAnalyzer(FakeLLMClient(available=False))
        data = await analyze_channel_url(CHANNEL_URL, 5, _fetcher(), analyzer, include_ai_analysis=True)
        assert data["ai_analysis"]["error_type"] == "BackendUnavailableError"
        assert data["meta"]["ai_analysis_available"] is False

    async def test_missing_token(self, analyzer):
        with pytest.raises(BackendUnavailableError):
            await analyze_channel_url(CHANNEL_URL, 5, _fetcher(token=None), analyzer)

    async def test_no_videos(self, analyzer):
        with pytest.raises(UpstreamNotFoundError):
            await analyze_channel_url(CHANNEL_URL, 5, _fetcher(items=[]), analyzer)

    async def test_broken_caption_fallback_keeps_statistics(self, analyzer, monkeypatch):
        class BrokenTranscriptApi:
            def fetch(self, video_id, languages=("en",)):
                raise ParseError("no element found")

        monkeypatch.setattr(transcript_module, "YouTubeTranscriptApi", BrokenTranscriptApi)
        items = [{key: value for key, value in ITEMS[0].items() if key != "subtitles"}]

        data = await analyze_channel_url(
            CHANNEL_URL, 5, _fetcher(items), analyzer, transcript_languages=["en"],
        )

        assert data["videos"][0]["transcript"] is None
        assert data["analysis_summary"]["total_views"] == 120_000
        assert data["analysis_summary"]["subtitle_coverage_rate"] == 0


class TestSerializeReport:
    def test_free_text(self):
        assert serialize_report(FreeTextReport(report_text="t")) == {"report_text": "t"}
