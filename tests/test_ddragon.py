import asyncio

import httpx
import pytest

from ezgg.domain.errors import DecodeError, HttpError
from ezgg.infrastructure import DataDragon, IconKind
from tests.factories import json_response

BASE = "https://ddragon.leagueoflegends.com/cdn/14.20.1"


def test_icon_urls():
    dd = DataDragon("14.20.1", champion_names={7: "Leblanc"})
    assert dd.icon_url(IconKind.PROFILE, 4568) == f"{BASE}/img/profileicon/4568.png"
    assert dd.icon_url(IconKind.CHAMPION, 7) == f"{BASE}/img/champion/Leblanc.png"
    assert dd.icon_url(IconKind.CHAMPION, "Ahri") == f"{BASE}/img/champion/Ahri.png"
    assert dd.icon_url(IconKind.ITEM, 6655) == f"{BASE}/img/item/6655.png"


def test_no_url_for_missing_keys():
    dd = DataDragon("14.20.1")
    assert dd.icon_url(IconKind.PROFILE, None) is None
    assert dd.icon_url(IconKind.CHAMPION, 7) is None
    assert dd.icon_url(IconKind.ITEM, 0) is None
    assert dd.champion_name(None) is None


def _load(handler):
    dd = DataDragon("14.20.1")

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as session:
            return await dd.load_champion_names(session)

    return dd, asyncio.run(run())


def test_load_champion_names():
    payload = {"data": {"Leblanc": {"id": "Leblanc", "key": "7"}, "Ahri": {"id": "Ahri", "key": "103"}}}

    def handler(request):
        assert request.url.path == "/cdn/14.20.1/data/en_US/champion.json"
        return json_response(payload)

    dd, count = _load(handler)
    assert count == 2
    assert dd.champion_name(103) == "Ahri"


def test_load_champion_names_errors():
    with pytest.raises(HttpError):
        _load(lambda request: httpx.Response(403))
    with pytest.raises(DecodeError):
        _load(lambda request: json_response({"unexpected": []}))
