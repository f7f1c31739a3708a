"""FastAPI dependency injection."""

from dealmetrics.data.comparables import ComparablesSummarizer


def get_summarizer() -> ComparablesSummarizer:
    return ComparablesSummarizer()
