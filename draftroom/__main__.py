"""Entry point for draftroom package."""

import argparse
import logging
import sys

from draftroom.config import get_config


class _DemoClock:
    """Manually advanced clock so the demo draft runs instantly."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def run_demo(teams: int, rounds: int) -> None:
    """Auto-draft a whole league in-process and print the standings."""
    from draftroom.core.catalog import PlayerCatalog
    from draftroom.draft.engine import DraftEngine

    config = get_config()
    catalog = PlayerCatalog.from_json_file(config.players_path)
    clock = _DemoClock()
    engine = DraftEngine(catalog, config=config, clock=clock)

    order = [f"u{i + 1}" for i in range(teams)]
    engine.init_league(order, rounds=rounds)

    print("Draftroom - Snake Draft (Demo Mode)")
    print("=" * 50)
    print(f"{teams} teams, {engine.state.total_rounds} rounds, {len(catalog)} players")
    print()

    # Every seat times out and gets auto-picked
    while engine.state.is_active:
        clock.now += engine.state.pick_seconds
        engine.tick()

    for place, standing in enumerate(engine.list_teams_sorted(), start=1):
        print(f"{place:>2}. {standing['name']:<12} {standing['points']:>8.2f}")
        for player in engine.get_team(standing["user_id"])["players"]:
            print(f"      {player['position']:<3} {player['name']:<24} {player['points']:>7.2f}")


def main() -> None:
    """Main entry point for the draftroom application."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Draftroom - Fantasy Baseball Snake Draft",
        prog="draftroom",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=["serve"],
        help="Run the API server (default)",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run an auto-drafted league in-process and print standings",
    )
    parser.add_argument(
        "--teams",
        type=int,
        default=4,
        help="Number of teams in demo mode (default: 4)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Rounds in demo mode (default: derived from pool size)",
    )
    parser.add_argument("--host", type=str, default=config.host, help=f"Bind host (default: {config.host})")
    parser.add_argument("--port", type=int, default=config.port, help=f"Bind port (default: {config.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"config error: {error}", file=sys.stderr)
        sys.exit(2)

    if args.demo:
        if args.teams < 2:
            parser.error("--teams must be at least 2")
        run_demo(args.teams, args.rounds)
        return

    from draftroom.api.main import run_api

    run_api(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
