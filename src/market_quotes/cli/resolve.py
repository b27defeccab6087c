"""CLI to resolve a symbol against Yahoo Finance and print the normalized record.

Usage:
  market-quotes-resolve quote AAPL
  market-quotes-resolve chart ^GSPC --range 5d --interval 15m --head 5
  market-quotes-resolve profile MSFT
"""
import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Callable

import httpx

from market_quotes.providers import (InstrumentProviderABC, ResolverError,
                                     YahooFinanceProvider)


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


async def _resolve(provider: InstrumentProviderABC, args: argparse.Namespace) -> dict:
    if args.command == "chart":
        chart = await provider.get_chart(args.symbol, args.range, args.interval)
        data = chart.model_dump(mode="json", by_alias=True)
        if args.head:
            data["timeseries"] = data["timeseries"][: args.head]
        print(f"Found {len(chart.timeseries)} points for {args.symbol}", file=sys.stderr)
        return data
    if args.command == "quote":
        quote = await provider.get_quote(args.symbol)
        return quote.model_dump(mode="json", by_alias=True)
    profile = await provider.get_profile(args.symbol)
    return profile.model_dump(mode="json", by_alias=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve instrument data from Yahoo Finance.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log resolver diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    p = subparsers.add_parser("chart", help="Price chart")
    p.add_argument("symbol", help="Symbol (e.g. AAPL, ^GSPC)")
    p.add_argument("--range", default="1d", help="Span (default: 1d)")
    p.add_argument("--interval", default="5m", help="Granularity (default: 5m)")
    p.add_argument("--head", type=int, default=0, help="Show only first N points (0 = all)")

    p = subparsers.add_parser("quote", help="Current quote")
    p.add_argument("symbol", help="Symbol (e.g. AAPL)")

    p = subparsers.add_parser("profile", help="Company profile or index components")
    p.add_argument("symbol", help="Symbol (e.g. MSFT, ^DJI)")
    return parser


def main(
    argv: list[str] | None = None,
    provider_factory: Callable[[], InstrumentProviderABC] = YahooFinanceProvider,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    async def run() -> dict:
        async with provider_factory() as provider:
            return await _resolve(provider, args)

    try:
        data = asyncio.run(run())
    except ResolverError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 2
    print_json(data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
