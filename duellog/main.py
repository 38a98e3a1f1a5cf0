"""
CLI entry point for DuelLog season statistics.
"""
import argparse
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="DuelLog Ranked Match Statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m duellog.main seasons --count 6        # List the last 6 seasons
  python -m duellog.main stats --season S49       # Season summary
  python -m duellog.main stats --all --csv d.csv  # All history, export daily series
  python -m duellog.main web                      # Start JSON API
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Seasons command
    seasons_parser = subparsers.add_parser("seasons", help="List recent seasons")
    seasons_parser.add_argument(
        "--count", "-n",
        type=int,
        default=12,
        help="Number of seasons to list (default: 12)"
    )
    seasons_parser.add_argument(
        "--from",
        dest="from_code",
        type=str,
        help="Newest season code to list from (default: current season)"
    )

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Show season statistics")
    scope = stats_parser.add_mutually_exclusive_group()
    scope.add_argument("--season", "-s", type=str, help="Season code, e.g. S49 (default: current season)")
    scope.add_argument("--all", action="store_true", help="Use all match history")
    stats_parser.add_argument("--my-deck", type=str, help="Only matches played with this deck")
    stats_parser.add_argument("--opp-deck", type=str, help="Only matches against this deck")
    stats_parser.add_argument("--from", dest="date_from", type=str, help="First day to include (YYYY-MM-DD)")
    stats_parser.add_argument("--to", dest="date_to", type=str, help="Last day to include (YYYY-MM-DD)")
    stats_parser.add_argument("--csv", type=str, help="Write the daily series to this CSV file")
    stats_parser.add_argument("--api", type=str, help="API base URL (default: $DUELLOG_API_BASE_URL)")
    stats_parser.add_argument("--top", type=int, default=10, help="Decks to show per table (default: 10)")

    # Web command
    web_parser = subparsers.add_parser("web", help="Start the JSON API")
    web_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)"
    )
    web_parser.add_argument(
        "--port", "-p",
        type=int,
        default=5000,
        help="Port to bind to (default: 5000)"
    )
    web_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode"
    )

    args = parser.parse_args(argv)

    if args.command == "seasons":
        return run_seasons(args)
    elif args.command == "stats":
        return run_stats(args)
    elif args.command == "web":
        return run_web(args)
    else:
        parser.print_help()
        return 0


def run_seasons(args):
    """Print recent season codes with their date ranges."""
    from .utils.season import get_recent_season_codes, get_season_info, get_season_label

    # Counting down can run past S0, whose predecessors are not valid codes
    seasons = [get_season_info(c) for c in get_recent_season_codes(args.count, args.from_code)]
    seasons = [info for info in seasons if info is not None]
    if not seasons:
        print(f"❌ Invalid season code or count: {args.from_code!r}, {args.count}")
        return 1

    print(f"\n📅 Seasons")
    print("=" * 50)
    for info in seasons:
        print(f"   {get_season_label(info.code):16} {info.start} ~ {info.end}")
    return 0


def _format_rate(rate) -> str:
    return "—" if rate is None else f"{rate:.1f}%"


def run_stats(args):
    """Fetch matches, aggregate and print a summary."""
    import requests

    from .analyzer.filters import StatsFilters, filter_matches
    from .analyzer.season_stats import build_season_stats
    from .client.api import DuelLogClient
    from .utils.season import get_current_season_code, get_season_info, get_season_label

    info = None
    if not args.all:
        code = args.season or get_current_season_code()
        info = get_season_info(code)
        if info is None:
            print(f"❌ Invalid season code: {code}")
            return 1

    client = DuelLogClient(base_url=args.api)
    try:
        matches = client.get_matches(season_code=info.code if info else None)
    except requests.RequestException as e:
        print(f"❌ Failed to fetch matches: {e}")
        return 1
    finally:
        client.close()

    filters = StatsFilters(
        my_deck_main=args.my_deck,
        opp_deck_main=args.opp_deck,
        date_from=args.date_from,
        date_to=args.date_to,
    )
    matches = filter_matches(matches, filters)
    stats = build_season_stats(matches, info)

    title = get_season_label(info.code) if info else "All History"
    print(f"\n📊 {title}")
    print("=" * 50)
    print(f"   Matches: {stats.total}  (W {stats.wins} / L {stats.losses})")
    print(f"   Win Rate: {stats.win_rate:.1f}%")
    print(f"   Went First: {stats.first_count} ({stats.first_rate:.1f}%) | Win Rate {stats.first_win_rate:.1f}%")
    print(f"   Went Second: {stats.second_count} | Win Rate {stats.second_win_rate:.1f}%")

    if stats.my_decks:
        print(f"\n🃏 My Decks:")
        for row in stats.my_decks[:args.top]:
            print(f"   {row.name}: {row.games} games, {row.wins}-{row.losses} ({row.win_rate:.1f}%)")

    if stats.opp_decks:
        print(f"\n⚔️ Opponent Decks:")
        for row in stats.opp_decks[:args.top]:
            print(f"   {row.name}: {row.games} games, {row.wins}-{row.losses} ({row.win_rate:.1f}%)")

    played_days = [d for d in stats.daily if d.games > 0]
    if played_days:
        print(f"\n📈 Daily ({len(played_days)} days played):")
        for day in played_days:
            print(f"   {day.date}: {day.games} games, win rate {_format_rate(day.win_rate)}")

    if args.csv:
        write_daily_csv(stats, args.csv)
        print(f"\n   Saved daily series to: {args.csv}")
    return 0


def write_daily_csv(stats, path: str) -> None:
    """Write the daily series as CSV, one row per day."""
    import pandas as pd

    df = pd.DataFrame([row.to_dict() for row in stats.daily])
    df.to_csv(path, index=False, encoding="utf-8-sig")


def run_web(args):
    """Run the web interface."""
    from .web.app import run

    print(f"🌐 Starting DuelLog API at http://{args.host}:{args.port}")
    run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
