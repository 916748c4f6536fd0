from .analysis import (
    UNKNOWN_CHANNEL_NAME,
    VideoRecord,
    ChannelInfo,
    CostEstimate,
    AnalysisMetadata,
    FreeTextReport,
    StructuredReport,
    AnalysisReport,
    AnalysisOutcome,
    ChannelFetchResult,
)

__all__ = [
    "UNKNOWN_CHANNEL_NAME",
    "VideoRecord",
    "ChannelInfo",
    "CostEstimate",
    "AnalysisMetadata",
    "FreeTextReport",
    "StructuredReport",
    "AnalysisReport",
    "AnalysisOutcome",
    "ChannelFetchResult",
]
