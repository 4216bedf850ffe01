"""
Command line interface.

Usage:
    coincheck ticker

Credentials come from COINCHECK_API_KEY and COINCHECK_API_SECRET.
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Awaitable, Callable, Optional

import httpx

from .client import CoincheckClient
from .config import ClientConfig
from .exceptions import CoincheckError, UsageError
from .logger import ConsoleLogger, Logger


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


async def ticker_command(client: CoincheckClient) -> dict[str, Any]:
    """Check latest ticker."""
    ticker = await client.ticker()
    return ticker.model_dump(mode="json")


COMMANDS: dict[str, Callable[[CoincheckClient], Awaitable[Any]]] = {
    "ticker": ticker_command,
}


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="coincheck", description="Coincheck API client")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>", parser_class=_ArgumentParser)
    subparsers.required = True
    for name, handler in COMMANDS.items():
        subparsers.add_parser(name, help=handler.__doc__)
    return parser


async def run_command(
    command: str,
    config: ClientConfig,
    logger: Logger,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    async with httpx.AsyncClient(transport=transport, timeout=config.timeout) as http:
        client = CoincheckClient.from_config(config, logger=logger, http_client=http)
        return await COMMANDS[command](client)


def main(
    argv: Optional[list[str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        config = ClientConfig.from_env()
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 2

    logger = ConsoleLogger(level=config.log_level)
    try:
        result = asyncio.run(run_command(args.command, config, logger, transport))
    except CoincheckError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
