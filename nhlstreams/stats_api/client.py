"""
Stats API client.

Async client for the NHL statistics service: the day's schedule and the media
content (broadcast feeds) of a single game. Every failure is raised as
StatsApiError; callers treat these fetches as must-succeed.
"""

import datetime as dt
import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from nhlstreams.errors import StatsApiError
from nhlstreams.stats_api.models import GameContent, Schedule

logger = logging.getLogger(__name__)


class StatsApiClient:
    """
    NHL stats API client.

    Usage:
        async with StatsApiClient() as client:
            schedule = await client.get_schedule_for(date.today())
            content = await client.get_game_content(schedule.games[0].game_pk)

    An existing httpx.AsyncClient can be passed in; it is then left open on
    close() since the caller owns it.
    """

    BASE_URL = "https://statsapi.web.nhl.com/api/v1"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def __aenter__(self) -> "StatsApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _get_json(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"Stats API request: {url} {params or ''}")
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise StatsApiError(
                f"Stats API returned HTTP {e.response.status_code} for {endpoint}",
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            raise StatsApiError(f"Stats API request failed for {endpoint}: {e}", original_error=e) from e
        except ValueError as e:
            raise StatsApiError(f"Stats API returned invalid JSON for {endpoint}", original_error=e) from e

    async def get_schedule_for(self, date: dt.date) -> Schedule:
        """
        Fetch the schedule for a single day.

        A day without games comes back with an empty ``dates`` list; that is
        returned as an empty Schedule for the requested date.
        """
        data = await self._get_json("/schedule", {"date": date.isoformat()})

        try:
            dates = data.get("dates") or []
            if not dates:
                logger.info(f"No games scheduled for {date.isoformat()}")
                return Schedule(date=date, games=[])
            return Schedule.model_validate(dates[0])
        except (AttributeError, ValidationError) as e:
            raise StatsApiError(f"Unexpected schedule payload for {date.isoformat()}", original_error=e) from e

    async def get_game_content(self, game_pk: int) -> GameContent:
        """Fetch the media content of one game."""
        data = await self._get_json(f"/game/{game_pk}/content")

        try:
            return GameContent.model_validate(data)
        except ValidationError as e:
            raise StatsApiError(f"Unexpected content payload for game {game_pk}", original_error=e) from e
