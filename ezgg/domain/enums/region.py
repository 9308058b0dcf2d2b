"""Region enumeration for League of Legends servers."""
from enum import Enum


class Region(Enum):
    """League of Legends platform servers.

    Provides:
    - platform_route: host for summoner, league and mastery (e.g. na1)
    - regional_route: host for account and match APIs (e.g. americas)
    """

    # Americas
    NA1 = "na1"
    BR1 = "br1"
    LA1 = "la1"
    LA2 = "la2"

    # Europe
    EUW1 = "euw1"
    EUN1 = "eun1"
    TR1 = "tr1"
    RU = "ru"
    ME1 = "me1"

    # Asia
    KR = "kr"
    JP1 = "jp1"

    # SEA & Oceania
    OC1 = "oc1"
    PH2 = "ph2"
    SG2 = "sg2"
    TH2 = "th2"
    TW2 = "tw2"
    VN2 = "vn2"

    @property
    def platform_route(self) -> str:
        return self.value

    @property
    def regional_route(self) -> str:
        return _REGIONAL.get(self.value, "americas")

    @property
    def platform_url(self) -> str:
        return f"https://{self.platform_route}.api.riotgames.com"

    @property
    def regional_url(self) -> str:
        return f"https://{self.regional_route}.api.riotgames.com"

    @classmethod
    def from_code(cls, code: str) -> 'Region':
        """Look up by platform code, case-insensitively. Raises ValueError on unknown codes."""
        try:
            return cls(code.strip().lower())
        except ValueError:
            known = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown platform {code!r}; expected one of: {known}") from None


_REGIONAL = {
    "na1": "americas",
    "br1": "americas",
    "la1": "americas",
    "la2": "americas",
    "euw1": "europe",
    "eun1": "europe",
    "tr1": "europe",
    "ru": "europe",
    "me1": "europe",
    "kr": "asia",
    "jp1": "asia",
    "oc1": "sea",
    "ph2": "sea",
    "sg2": "sea",
    "th2": "sea",
    "tw2": "sea",
    "vn2": "sea",
}
