from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, ConfigDict, Field

from channel_analyzer.constants import ReportVariant, MAX_VIDEOS_DEFAULT
from channel_analyzer.models.analysis import ChannelInfo, VideoRecord


class AIAnalyzeRequest(BaseModel):
    """Direct AI analysis of channel data the client already holds."""
    channel_info: Dict[str, Any]
    videos: List[Dict[str, Any]]
    variant: ReportVariant = ReportVariant.FREE_TEXT

    def to_records(self) -> Tuple[ChannelInfo, List[VideoRecord]]:
        """Convert the raw payload (scraper or canonical field names) to canonical records."""
        videos = [VideoRecord.from_raw(video) for video in self.videos]
        channel = ChannelInfo.from_raw(self.channel_info, fallback_video_count=len(videos))
        return channel, videos


class AnalyzeRequest(BaseModel):
    """Fetch-and-analyze request for a channel URL."""
    model_config = ConfigDict(populate_by_name=True)

    url: str
    max_videos: int = Field(default=MAX_VIDEOS_DEFAULT, alias="maxVideos")
    include_ai_analysis: bool = Field(default=False, alias="includeAIAnalysis")
    variant: ReportVariant = ReportVariant.FREE_TEXT
