"""
Video fetch service backed by the Apify YouTube scraper.

Runs the scraper actor synchronously and reads its dataset items:
https://docs.apify.com/api/v2#/reference/actors/run-actor-synchronously-and-get-dataset-items

Every item is converted to a canonical VideoRecord immediately, so the rest
of the application never sees the scraper's field names.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..constants import APIFY_BASE_URL
from ..models.analysis import ChannelFetchResult, ChannelInfo, VideoRecord
from ..utils.api_helpers import (
    BackendUnavailableError,
    UpstreamFetchError,
    UpstreamNotFoundError,
)
from ..utils.engagement import summarize_videos

logger = logging.getLogger(__name__)


class ApifyVideoFetcher:
    """
    Fetches the most recent videos of a channel (or a single video).

    Args:
        api_token: Apify API token (None disables the fetcher)
        actor_id: Scraper actor, "username~actor-name"
        timeout: Seconds to wait for the synchronous run
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        api_token: Optional[str],
        actor_id: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_token = api_token
        self.actor_id = actor_id
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApifyVideoFetcher":
        return cls(
            api_token=settings.apify_api_token,
            actor_id=settings.apify_actor_id,
            timeout=settings.apify_timeout,
        )

    @property
    def available(self) -> bool:
        return bool(self.api_token)

    def _build_input(self, url: str, max_videos: int) -> Dict[str, Any]:
        return {
            "startUrls": [{"url": url}],
            "maxResults": max_videos,
            "maxResultsShorts": 0,
            "maxResultStreams": 0,
            "downloadSubtitles": True,
            "subtitlesLanguage": "any",
            "subtitlesFormat": "plaintext",
        }

    async def _run_actor(self, url: str, max_videos: int) -> List[Dict[str, Any]]:
        endpoint = f"{APIFY_BASE_URL}/acts/{self.actor_id}/run-sync-get-dataset-items"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    endpoint,
                    params={"token": self.api_token},
                    json=self._build_input(url, max_videos),
                )
                response.raise_for_status()
                items = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"[Apify] Actor run failed with HTTP {e.response.status_code} for {url}")
            raise UpstreamFetchError(f"Channel analysis failed: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"[Apify] Request error for {url}: {e}")
            raise UpstreamFetchError(f"Channel analysis failed: {e}") from e
        except ValueError as e:
            raise UpstreamFetchError(f"Channel analysis failed: invalid JSON from Apify ({e})") from e

        if not isinstance(items, list):
            raise UpstreamFetchError("Channel analysis failed: unexpected Apify response shape")
        return items

    async def fetch_channel(self, url: str, max_videos: int) -> ChannelFetchResult:
        """
        Fetch up to ``max_videos`` videos for a channel or video URL.

        Raises:
            BackendUnavailableError: No Apify token configured
            UpstreamNotFoundError: The scraper returned no usable videos
            UpstreamFetchError: The scraper call failed
        """
        if not self.available:
            raise BackendUnavailableError("APIFY_API_TOKEN is not configured")

        logger.info(f"[Apify] Fetching up to {max_videos} videos for {url}")
        items = await self._run_actor(url, max_videos)

        raw_videos = []
        videos = []
        for item in items[:max_videos]:
            if not isinstance(item, dict):
                continue
            try:
                videos.append(VideoRecord.from_raw(item))
                raw_videos.append(item)
            except ValidationError as e:
                logger.warning(f"[Apify] Skipping malformed item {item.get('id')}: {e.error_count()} errors")

        if not videos:
            raise UpstreamNotFoundError(f"No videos found for channel: {url}")

        channel_info = ChannelInfo.from_raw(raw_videos[0], fallback_video_count=len(videos))
        logger.info(f"[Apify] {len(videos)} videos fetched for {channel_info.name}")

        return ChannelFetchResult(
            channel_info=channel_info,
            videos=videos,
            analysis_summary=summarize_videos(videos),
        )
