"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import shutil
import sys
from typing import Optional

import httpx

from ezgg.core.logging import bootstrap_logging, get_logger, shutdown_logging
from ezgg.config import settings
from ezgg.domain.entities import MatchDetail
from ezgg.domain.errors import GameAPIError

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"
_BOLD = "\033[1m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


_LOGO = r"""
  ███████╗███████╗    ██████╗  ██████╗
  ██╔════╝╚══███╔╝   ██╔════╝ ██╔════╝
  █████╗    ███╔╝    ██║  ███╗██║  ███╗
  ██╔══╝   ███╔╝     ██║   ██║██║   ██║
  ███████╗███████╗██╗╚██████╔╝╚██████╔╝
  ╚══════╝╚══════╝╚═╝ ╚═════╝  ╚═════╝
"""


def _print_logo() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 64)
    print(_g(div))
    for line in _LOGO.splitlines():
        print(_g(line))
    print(_c("  League of Legends Player Lookup"))
    print(_g(div))


async def _ask(prompt: str) -> str:
    return (await asyncio.to_thread(input, prompt)).strip()


async def _pick(prompt: str, count: int) -> Optional[int]:
    """Zero-based index chosen by the user, or None for blank/invalid input."""
    raw = await _ask(prompt)
    if not raw.isdigit() or not 1 <= int(raw) <= count:
        return None
    return int(raw) - 1


async def _load_champion_names(ddragon) -> None:
    log = get_logger(__name__, service="cli")
    async with httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT) as session:
        try:
            count = await ddragon.load_champion_names(session)
        except GameAPIError as exc:
            log.warning(lambda: f"champion names unavailable: {exc}")
            return
    log.debug(lambda: f"{count} champion names loaded")


async def _menu(command) -> None:
    _print_logo()
    current = None

    while True:
        cols = shutil.get_terminal_size(fallback=(96, 20)).columns
        print(f"\n{_g('═' * min(cols, 48))}")
        print(f"  {_BOLD}MAIN MENU{_RESET}")
        if current is not None:
            print(f"  Current: {current.profile.riot_id}")
        print(_g("═" * min(cols, 48)))
        print(f"  {_c('1')}  Search player (Name#TAG)")
        print(f"  {_c('2')}  Recent profiles")
        print(f"  {_c('3')}  Match details")
        print(f"  {_c('4')}  Reload failed matches")
        print(f"  {_c('5')}  Exit")
        print(_g("─" * min(cols, 48)))
        choice = await _ask("  Choose: ")

        if choice == "1":
            riot_id = await _ask("  Riot ID: ")
            found = await command.search(riot_id)
            current = found or current
        elif choice == "2":
            profiles = command.recent()
            idx = await _pick("  Open #: ", len(profiles)) if profiles else None
            if idx is not None:
                current = profiles[idx]
                command.render(current.profile)
        elif choice == "3":
            current = await _match_details(command, current) or current
        elif choice == "4":
            if current is None:
                print(f"  {_YELLOW}Search for a player first.{_RESET}")
            else:
                await command.reload_failed(current)
                command.render(current.profile)
        elif choice == "5":
            print(f"\n  {_g('Goodbye!')}\n")
            break
        else:
            print(f"  {_YELLOW}Invalid option.{_RESET}")


async def _match_details(command, current):
    """Show one match of the current profile; optionally open one of its players."""
    if current is None:
        print(f"  {_YELLOW}Search for a player first.{_RESET}")
        return None
    profile = current.profile
    ids = [m for m in profile.recent_match_ids() if isinstance(profile.matches.get(m), MatchDetail)]
    if not ids:
        print("  No loaded matches.")
        return None
    idx = await _pick(f"  Match # (1-{len(ids)}): ", len(ids))
    if idx is None:
        return None
    participants = command.render_match(profile.matches.get(ids[idx]))
    pick = await _pick("  Open player # (blank to go back): ", len(participants))
    if pick is None or not participants[pick].puuid:
        return None
    return await command.open(participants[pick].puuid)


async def _run(riot_id: Optional[str]) -> int:
    # Imported here so settings and logging are configured first.
    from ezgg.infrastructure import DataDragon, GameAPIClient
    from ezgg.presentation.cli import LookupCommand

    ddragon = DataDragon()
    await _load_champion_names(ddragon)
    async with GameAPIClient.from_settings() as api:
        command = LookupCommand(api, ddragon=ddragon, color=sys.stdout.isatty())
        if riot_id:
            aggregator = await command.search(riot_id)
            return 0 if aggregator is not None and aggregator.last_result and aggregator.last_result.ok else 1
        await _menu(command)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ezgg", description="Look up a League of Legends player profile.")
    parser.add_argument("riot_id", nargs="?", help='Riot ID as "Name#TAG"; omit for the interactive menu')
    args = parser.parse_args(argv)

    settings.create_directories()
    bootstrap_logging(
        service="ezgg",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="ezgg.jsonl",
        secrets=[settings.RIOT_API_KEY],
    )
    try:
        try:
            settings.validate()
        except ValueError as exc:
            print(f"  {_YELLOW}{exc}{_RESET}", file=sys.stderr)
            return 2
        return asyncio.run(_run(args.riot_id))
    except KeyboardInterrupt:
        return 130
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
