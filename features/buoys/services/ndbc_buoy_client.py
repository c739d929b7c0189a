import logging
import aiohttp
from typing import Optional

from core.config import settings
from features.common.exceptions.forecast_exceptions import BuoyFetchError

logger = logging.getLogger(__name__)

class NDBCBuoyClient:
    """Downloads raw NDBC report text. Parsing happens elsewhere."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=settings.request["timeout"])
            )
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    async def fetch_text(self, url: str) -> str:
        """Fetch a report as text, raising BuoyFetchError on any transport failure or empty body."""
        session = await self._init_session()
        try:
            async with session.get(url) as response:
                response.raise_for_status()
                text = await response.text()
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching {url}: {str(e)}")
            raise BuoyFetchError(f"Error fetching buoy data from {url}: {str(e)}")

        if not text:
            raise BuoyFetchError(f"No data received from {url}")
        return text
