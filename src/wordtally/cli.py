"""CLI entrypoint for wordtally."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from wordtally.config import configure_logging, load_config
from wordtally.core import run_count
from wordtally.io import read_text, render_table, to_json, write_json
from wordtally.models import CountRequest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="wordtally",
        description="Count word frequencies in text.",
    )
    subparsers = parser.add_subparsers(dest="command")

    count = subparsers.add_parser("count", help="Count words in text")
    count.add_argument("source", help="Text, a text file path, or '-' for stdin")
    count.add_argument("--limit", type=int, default=None, help="Show only the N most frequent words")
    count.add_argument(
        "--min-count",
        type=int,
        default=1,
        help="Hide words seen fewer than N times (default: 1)",
    )
    count.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format for stdout (default: table)",
    )
    count.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )

    serve = subparsers.add_parser("serve", help="Run the wordtally HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config()
        configure_logging(config)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.command == "count":
        limit = args.limit if args.limit is not None else config.default_limit
        try:
            request = CountRequest(
                text=read_text(args.source),
                limit=limit,
                min_count=args.min_count,
            )
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        response = run_count(request)
        if args.output:
            write_json(response, args.output)
            print(f"Wrote word counts JSON to {args.output}")
            return 0
        if args.format == "json":
            print(to_json(response))
        else:
            print(render_table(response.words))
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`wordtally serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        logger.info("serving wordtally API on %s:%d", host, port)
        uvicorn.run(
            "wordtally.api:app",
            host=host,
            port=port,
            workers=config.workers,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
