"""
Count documents from the command line.

Usage:
    elastic-count --index logs-2024 --term level=error
    elastic-count -i tweets -t tweet -q "user:olivere" --pretty --debug
"""

import argparse
import sys

from .client import ElasticClient
from .config import get_settings
from .count import CountService
from .exceptions import ElasticError
from .logging_config import configure_from_env, get_logger
from .query import QueryStringQuery, TermQuery

logger = get_logger(__name__)


def _split_names(values: list[str] | None) -> list[str]:
    names: list[str] = []
    for value in values or []:
        names.extend(part for part in value.split(",") if part)
    return names


def _parse_term(value: str) -> tuple[str, str]:
    field, sep, term = value.partition("=")
    if not sep or not field:
        raise argparse.ArgumentTypeError(f"expected FIELD=VALUE, got {value!r}")
    return field, term


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elastic-count",
        description="Count documents in an Elasticsearch compatible cluster.",
    )
    parser.add_argument("--url", help="Cluster URL (default: ELASTIC_URL or http://localhost:9200)")
    parser.add_argument(
        "-i", "--index", action="append", dest="indices", metavar="INDEX",
        help="Index to count in; repeat or comma-separate for several",
    )
    parser.add_argument(
        "-t", "--type", action="append", dest="types", metavar="TYPE",
        help="Document type; repeat or comma-separate for several",
    )
    query_group = parser.add_mutually_exclusive_group()
    query_group.add_argument("-q", "--query-string", help="Lucene query string")
    query_group.add_argument(
        "--term", type=_parse_term, metavar="FIELD=VALUE", help="Exact term match"
    )
    parser.add_argument("--pretty", action="store_true", default=None, help="Ask for pretty JSON")
    parser.add_argument("--debug", action="store_true", default=None, help="Dump request and response to stderr")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", help="Log level (default: LOG_LEVEL or WARNING)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_from_env(
        log_level=args.log_level, json_logs=args.json_logs, default_level="WARNING"
    )

    settings = get_settings()
    pretty = settings.pretty if args.pretty is None else args.pretty
    debug = settings.debug if args.debug is None else args.debug

    with ElasticClient(
        args.url or settings.url,
        timeout=settings.timeout if args.timeout is None else args.timeout,
    ) as client:
        service = (
            CountService(client)
            .indices(*_split_names(args.indices))
            .types(*_split_names(args.types))
            .pretty(pretty)
            .debug(debug)
        )
        if args.query_string:
            service.query(QueryStringQuery(args.query_string))
        elif args.term:
            service.query(TermQuery(*args.term))

        try:
            logger.debug("Counting", path=service.build_path(), url=client.url)
            count = service.do()
        except ElasticError as exc:
            logger.error("Count failed", error=exc.message, status_code=exc.status_code)
            print(f"error: {exc.message}", file=sys.stderr)
            return 1

    logger.debug("Count completed", count=count)
    print(count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
