#!/usr/bin/env python3
"""Run the search screen against OMDb and filter results from stdin, one line per edit."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from loguru import logger

from moviesearch.config.loader import load_config
from moviesearch.search import SearchScreen, ViewState, results_header


def render(movies: ViewState, *, limit: int) -> None:
    print(results_header(len(movies)))
    for movie in movies[:limit]:
        year = f" ({movie.year})" if movie.year else ""
        print(f"  {movie.title}{year}  {movie.poster_url}")
    if len(movies) > limit:
        print(f"  ... {len(movies) - limit} more")
    print("filter> ", end="", flush=True)


async def run(args: argparse.Namespace) -> int:
    config = load_config(Path(args.config) if args.config else None)
    if args.term:
        config.omdb.search_term = args.term
    if args.pages:
        config.omdb.page_count = args.pages

    logger.remove()
    logger.add(sys.stderr, level=args.log_level or config.logging.level)

    loop = asyncio.get_running_loop()
    screen = SearchScreen.from_config(config, consumer_loop=loop)
    screen.subscribe(lambda movies: render(movies, limit=args.limit))
    screen.ready()

    try:
        while True:
            line = await loop.run_in_executor(None, sys.stdin.readline)
            if not line:
                break
            screen.set_filter_text(line.rstrip("\n"))
    finally:
        await screen.close()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default=None)
    parser.add_argument("--term", default=None)
    parser.add_argument("--pages", type=int, default=None)
    parser.add_argument("--limit", type=int, default=20)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
