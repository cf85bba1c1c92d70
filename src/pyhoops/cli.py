"""Command-line interface for printing the best player at each position."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Sequence

from pyhoops.config import PERIOD_DAYS, load_settings
from pyhoops.display import format_board, format_failure
from pyhoops.ingest import resolve_window
from pyhoops.recommend import RecommendationResult, RecommendationSuccess, period_window, recommend_window


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pick the top fantasy scorer at each position")
    parser.add_argument(
        "period",
        nargs="?",
        default="week",
        choices=sorted(PERIOD_DAYS),
        help="Lookback window ending today (default: week)",
    )
    parser.add_argument("--start", default=None, help="Explicit start date (YYYY-MM-DD); requires --end")
    parser.add_argument("--end", default=None, help="Explicit end date (YYYY-MM-DD); requires --start")
    parser.add_argument("--base-url", default=None, help="Stats endpoint (default: PYHOOPS_STATS_URL or balldontlie)")
    parser.add_argument("--json", action="store_true", help="Print the board as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log each page request")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP app instead of a one-off lookup")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for --serve")
    parser.add_argument("--port", type=int, default=8000, help="Port for --serve")
    args = parser.parse_args(argv)
    if (args.start is None) != (args.end is None):
        parser.error("--start and --end must be given together")
    if args.start is not None:
        try:
            resolve_window(args.start, args.end)
        except ValueError as exc:
            parser.error(str(exc))
    return args


def _serve(host: str, port: int, base_url: str | None) -> None:
    import uvicorn

    from pyhoops.api import create_app
    from pyhoops.config import Settings

    settings = Settings(stats_url=base_url) if base_url else load_settings()
    uvicorn.run(create_app(settings=settings), host=host, port=port)


def _print_result(result: RecommendationResult, *, period: str | None, as_json: bool) -> None:
    if not isinstance(result, RecommendationSuccess):
        print(format_failure(result.error))
        return
    if as_json:
        from pyhoops.api import success_to_response

        print(success_to_response(result, period).model_dump_json(indent=2))
        return
    print(
        f"Top players {result.start_date.isoformat()} to {result.end_date.isoformat()} "
        f"({result.records_fetched} box scores, {result.players_ranked} players)"
    )
    print(format_board(result.board))


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.serve:
        _serve(args.host, args.port, args.base_url)
        return

    settings = load_settings()
    base_url = args.base_url or settings.stats_url

    if args.start is not None:
        start, end = args.start, args.end
        period = None
    else:
        start, end = period_window(args.period)
        period = args.period

    result = asyncio.run(recommend_window(start, end, base_url=base_url))

    _print_result(result, period=period, as_json=args.json)
    if not result.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
