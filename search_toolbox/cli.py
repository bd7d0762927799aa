#!/usr/bin/env python3
"""
Command line entry point for the Perplexity search tool.

Examples:
    perplexity-search "latest fusion research" --max-results 5
    perplexity-search "llm agents" "tool calling" --recency week --domain arxiv.org --exclude-domain medium.com
    perplexity-search --schema
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .logging_config import setup_logging
from .tools_impl.perplexity_search import (
    PerplexitySearch,
    PerplexitySearchConfig,
    PerplexitySearchError,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perplexity-search",
        description="Search the web with the Perplexity Search API and print the JSON response.",
    )
    parser.add_argument("query", nargs="*", help="Search query; pass up to 5 for a multi-query search")
    parser.add_argument("--max-results", type=int, help="Number of results (1-20, default 10)")
    parser.add_argument("--max-tokens-per-page", type=int, help="Tokens extracted per page (256-2048, default 1024)")
    parser.add_argument("--country", help="Two-letter country code, e.g. US")
    parser.add_argument(
        "--domain",
        action="append",
        dest="domains",
        help="Domain to include (repeatable, max 20 in total); use --domain=-example.com or --exclude-domain to exclude",
    )
    parser.add_argument(
        "--exclude-domain",
        action="append",
        dest="exclude_domains",
        help="Domain to exclude from results (repeatable)",
    )
    parser.add_argument(
        "--language",
        action="append",
        dest="languages",
        help="ISO 639-1 language code (repeatable, max 10)",
    )
    parser.add_argument("--after-date", help="Only results published after M/D/YYYY")
    parser.add_argument("--before-date", help="Only results published before M/D/YYYY")
    parser.add_argument("--recency", choices=["day", "week", "month", "year"], help="Relative time window")
    parser.add_argument("--api-key", help="Perplexity API key (defaults to PERPLEXITY_API_KEY)")
    parser.add_argument("--schema", action="store_true", help="Print the tool description and parameter schema and exit")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default 2)")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def _domain_filter(args: argparse.Namespace) -> Optional[List[str]]:
    domains = list(args.domains or [])
    domains.extend(f"-{domain.lstrip('-')}" for domain in args.exclude_domains or [])
    return domains or None


def _collect_params(args: argparse.Namespace) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "query": args.query[0] if len(args.query) == 1 else list(args.query),
        "max_results": args.max_results,
        "max_tokens_per_page": args.max_tokens_per_page,
        "country": args.country,
        "search_domain_filter": _domain_filter(args),
        "search_language_filter": args.languages,
        "search_after_date": args.after_date,
        "search_before_date": args.before_date,
        "search_recency_filter": args.recency,
    }
    return {key: value for key, value in params.items() if value is not None}


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)

    tool = PerplexitySearch(PerplexitySearchConfig(api_key=args.api_key))

    if args.schema:
        info = {
            "name": tool.name,
            "description": tool.description,
            "parameters_schema": tool.input_schema,
        }
        print(json.dumps(info, ensure_ascii=False, indent=args.indent))
        return 0

    if not args.query:
        parser.error("at least one query is required")

    try:
        response = asyncio.run(tool.execute(**_collect_params(args)))
    except PerplexitySearchError as exc:
        logger.debug("Search failed with code %s", exc.code)
        print(f"Error ({exc.code}): {exc.message}", file=sys.stderr)
        return 1

    print(json.dumps(response, ensure_ascii=False, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
