"""Domain entities."""
from .identity import PlayerIdentity, Account
from .summoner import SummonerSummary, RankedStanding
from .mastery import MasteryEntry
from .participant import ParticipantStats, PerkStyle, PerkSelection
from .team import TeamResult, Objective, Ban, BLUE_TEAM_ID, RED_TEAM_ID
from .error_report import ErrorReport
from .match import MatchDetail, MatchLoadFailure
from .profile import PlayerProfile, MatchHistory, MatchEntry

__all__ = [
    'PlayerIdentity',
    'Account',
    'SummonerSummary',
    'RankedStanding',
    'MasteryEntry',
    'ParticipantStats',
    'PerkStyle',
    'PerkSelection',
    'TeamResult',
    'Objective',
    'Ban',
    'BLUE_TEAM_ID',
    'RED_TEAM_ID',
    'ErrorReport',
    'MatchDetail',
    'MatchLoadFailure',
    'PlayerProfile',
    'MatchHistory',
    'MatchEntry',
]
