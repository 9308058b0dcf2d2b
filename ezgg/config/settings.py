"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """
    Everything the lookup pipeline reads at construction time.

    Values come from the process environment (or config/.env). Components
    take these as defaults and accept explicit overrides, so tests never
    need to touch the environment.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # Platform host for summoner / league / mastery. The regional host used
    # by account and match endpoints is derived from it (see Region).
    RIOT_PLATFORM: str = os.getenv('RIOT_PLATFORM', 'na1').strip().lower()

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT:          float = _float_env('REQUEST_TIMEOUT', 10.0)
    MAX_CONNECTIONS_PER_HOST: int   = _int_env('MAX_CONNECTIONS_PER_HOST', 20)

    # ── 429 handling ───────────────────────────────────────────────────────
    # Attempts in total, not retries: 3 means two retries after the first 429.
    MAX_ATTEMPTS:        int   = _int_env('MAX_ATTEMPTS', 3)
    DEFAULT_RETRY_AFTER: float = _float_env('DEFAULT_RETRY_AFTER', 1.0)

    # Personal key hard limits are 20/s and 100/120s; stay slightly below.
    # 0 disables the proactive limiter and leaves only 429 handling.
    RATE_LIMIT_PER_1_SEC: int = _int_env('RATE_LIMIT_PER_1_SEC', 18)
    RATE_LIMIT_PER_2_MIN: int = _int_env('RATE_LIMIT_PER_2_MIN', 90)

    # ── Profile ────────────────────────────────────────────────────────────
    MATCH_HISTORY_COUNT: int = _int_env('MATCH_HISTORY_COUNT', 40)
    TOP_MASTERY_COUNT:   int = _int_env('TOP_MASTERY_COUNT', 5)

    # ── Data Dragon ────────────────────────────────────────────────────────
    # Latest: curl https://ddragon.leagueoflegends.com/api/versions.json
    DDRAGON_VERSION: str = os.getenv('DDRAGON_VERSION', '14.20.1')

    # ── Paths / logging ────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(DATA_DIR / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in the environment or ezgg/config/.env")

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
