"""
Mock API Responses

Pre-defined mock responses for external service testing.
"""

from .stats_api_responses import (
    EMPTY_SCHEDULE_RESPONSE,
    GAME_CONTENT_NO_FEEDS_RESPONSE,
    GAME_CONTENT_RESPONSE,
    SCHEDULE_DATE,
    SCHEDULE_RESPONSE,
)

__all__ = [
    "EMPTY_SCHEDULE_RESPONSE",
    "GAME_CONTENT_NO_FEEDS_RESPONSE",
    "GAME_CONTENT_RESPONSE",
    "SCHEDULE_DATE",
    "SCHEDULE_RESPONSE",
]
