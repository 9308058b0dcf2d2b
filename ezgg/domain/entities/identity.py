"""Riot ID and resolved account."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlayerIdentity:
    """What a user types: game name plus tag line (``Faker#KR1``).

    Never used as a cache key; names change and compare case-insensitively
    upstream. The puuid it resolves to is the key.
    """

    game_name: str
    tag_line: str

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"

    @classmethod
    def parse(cls, text: str) -> 'PlayerIdentity':
        """Parse ``name#tag``. Raises ValueError when either part is empty."""
        name, sep, tag = text.strip().rpartition("#")
        name, tag = name.strip(), tag.strip()
        if not sep or not name or not tag:
            raise ValueError(f"Expected a Riot ID like 'Name#TAG', got {text!r}")
        return cls(game_name=name, tag_line=tag)


@dataclass(frozen=True)
class Account:
    """Result of the by-riot-id lookup."""

    puuid: Optional[str] = None
    game_name: Optional[str] = None
    tag_line: Optional[str] = None
