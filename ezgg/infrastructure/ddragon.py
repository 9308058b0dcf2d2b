"""Data Dragon asset URLs.

Pure URL construction over a fixed CDN version. The only network call is
the optional champion-name table load; without it, champion icons can
still be built from names but not from ids.
"""
import logging
from enum import Enum
from typing import Dict, Mapping, Optional, Union

import httpx

from ezgg.config import settings
from ezgg.domain.errors import DecodeError, HttpError, NetworkError

logger = logging.getLogger(__name__)

DDRAGON_BASE = "https://ddragon.leagueoflegends.com/cdn"


class IconKind(Enum):
    PROFILE = "profileicon"
    CHAMPION = "champion"
    ITEM = "item"


class DataDragon:
    """Builds icon URLs under ``/cdn/{version}/img/``."""

    def __init__(self, version: Optional[str] = None, champion_names: Optional[Mapping[int, str]] = None):
        self.version = version or settings.DDRAGON_VERSION
        self.champion_names: Dict[int, str] = dict(champion_names or {})

    @property
    def base_url(self) -> str:
        return f"{DDRAGON_BASE}/{self.version}"

    def icon_url(self, kind: IconKind, key: Union[int, str, None]) -> Optional[str]:
        """URL for an icon, or None when no URL can be produced.

        Champions accept either a numeric id (needs the name table) or the
        Data Dragon name itself. Item id 0 is an empty slot.
        """
        if key is None or key == "":
            return None
        if kind is IconKind.CHAMPION:
            name = self.champion_names.get(key) if isinstance(key, int) else key
            if not name:
                return None
            return f"{self.base_url}/img/champion/{name}.png"
        if kind is IconKind.ITEM and key == 0:
            return None
        return f"{self.base_url}/img/{kind.value}/{key}.png"

    def champion_name(self, champion_id: Optional[int]) -> Optional[str]:
        if champion_id is None:
            return None
        return self.champion_names.get(champion_id)

    async def load_champion_names(self, session: httpx.AsyncClient, locale: str = "en_US") -> int:
        """Fill the id -> name table from champion.json. Returns the entry count."""
        url = f"{self.base_url}/data/{locale}/champion.json"
        try:
            response = await session.get(url)
        except httpx.HTTPError as exc:
            raise NetworkError(str(exc) or type(exc).__name__, cause=exc) from exc
        if response.status_code != 200:
            raise HttpError(response.status_code, url)
        try:
            data = response.json()["data"]
            names = {int(entry["key"]): entry["id"] for entry in data.values()}
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise DecodeError(f"champion.json: unexpected shape ({exc!r})") from exc
        self.champion_names.update(names)
        logger.info("loaded %d champion names for %s", len(names), self.version)
        return len(names)
