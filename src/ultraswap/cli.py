"""Command-line entry point for the Ultra client.

Usage:
    ultraswap quote --input-mint So11... --output-mint EPjF... --ui-amount 1.5 --input-decimals 9
    ultraswap routers
    ultraswap balances <address>
    ultraswap shield <mint> [<mint> ...]
    ultraswap execute --request-id <id> --signed-transaction-file tx.b64
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ultraswap.client.factory import UltraSwapService, create_ultra_service
from ultraswap.config import get_settings
from ultraswap.contracts.orders import SwapMode
from ultraswap.contracts.tokens import TokenInfo
from ultraswap.errors import UltraClientError
from ultraswap.services.quote_summary import summarize_quote
from ultraswap.units.conversion import to_raw_units
from ultraswap.units.formatting import NumberFormat
from ultraswap.utils.addresses import is_valid_solana_address, shorten_address

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    settings = get_settings()
    if verbose or settings.debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, default=str))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ultraswap", description="Ultra swap API client")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    quote = sub.add_parser("quote", help="Request a swap quote")
    quote.add_argument("--input-mint", required=True, help="Input token mint")
    quote.add_argument("--output-mint", required=True, help="Output token mint")
    amount = quote.add_mutually_exclusive_group(required=True)
    amount.add_argument("--amount", help="Raw input amount (smallest units)")
    amount.add_argument("--ui-amount", help="Human-readable input amount (needs --input-decimals)")
    quote.add_argument("--input-decimals", type=int, help="Input token decimals")
    quote.add_argument("--output-decimals", type=int, help="Output token decimals (for --summary)")
    quote.add_argument("--input-symbol", default="IN", help="Input token symbol (for --summary)")
    quote.add_argument("--output-symbol", default="OUT", help="Output token symbol (for --summary)")
    quote.add_argument("--taker", help="Taker wallet address")
    quote.add_argument("--swap-mode", choices=[m.value for m in SwapMode], help="Swap mode")
    quote.add_argument("--referral-account", help="Referral account")
    quote.add_argument("--referral-fee", type=int, help="Referral fee in bps")
    quote.add_argument("--summary", action="store_true", help="Print display summary instead of JSON")

    sub.add_parser("routers", help="List aggregation routers")

    balances = sub.add_parser("balances", help="Show token balances for an account")
    balances.add_argument("address", help="Account address")

    shield = sub.add_parser("shield", help="Show risk warnings for mints")
    shield.add_argument("mints", nargs="+", help="Token mint addresses")

    execute = sub.add_parser("execute", help="Submit a signed transaction")
    execute.add_argument("--request-id", required=True, help="Request ID from the quote")
    tx = execute.add_mutually_exclusive_group(required=True)
    tx.add_argument("--signed-transaction", help="Base64 signed transaction")
    tx.add_argument("--signed-transaction-file", type=Path, help="File containing the transaction")

    return parser


async def _quote(service: UltraSwapService, args: argparse.Namespace) -> None:
    if args.ui_amount is not None:
        if args.input_decimals is None:
            raise SystemExit("--ui-amount requires --input-decimals")
        raw_amount = str(to_raw_units(args.ui_amount, args.input_decimals))
    else:
        raw_amount = args.amount

    if args.taker and not is_valid_solana_address(args.taker):
        logger.warning(f"Taker {args.taker} does not look like a Solana address")

    params = {
        "input_mint": args.input_mint,
        "output_mint": args.output_mint,
        "amount": raw_amount,
        "taker": args.taker,
        "swap_mode": args.swap_mode,
        "referral_account": args.referral_account,
        "referral_fee": args.referral_fee,
    }
    quote = await service.get_quote(params)

    if not args.summary:
        _print_json(quote.to_wire())
        return

    if args.input_decimals is None or args.output_decimals is None:
        raise SystemExit("--summary requires --input-decimals and --output-decimals")

    routers = await service.get_routers()
    summary = summarize_quote(
        quote,
        TokenInfo(address=quote.input_mint, symbol=args.input_symbol, decimals=args.input_decimals),
        TokenInfo(address=quote.output_mint, symbol=args.output_symbol, decimals=args.output_decimals),
        routers=routers,
        number_format=NumberFormat.from_settings(get_settings()),
    )
    for label, value in summary.lines():
        print(f"{label:<16} {value}")
    print(f"{'Request ID':<16} {summary.request_id}")


async def _balances(service: UltraSwapService, args: argparse.Namespace) -> None:
    balances = await service.get_balance(args.address)
    logger.info(f"{len(balances)} tokens held by {shorten_address(args.address)}")
    _print_json(balances.model_dump(mode="json", by_alias=True))


async def _execute(service: UltraSwapService, args: argparse.Namespace) -> None:
    if args.signed_transaction_file is not None:
        signed = args.signed_transaction_file.read_text().strip()
    else:
        signed = args.signed_transaction
    outcome = await service.submit(signed, args.request_id)
    _print_json(outcome.to_wire())


async def run(args: argparse.Namespace, service: Optional[UltraSwapService] = None) -> int:
    """Run one CLI command. Returns the process exit code."""
    service = service or create_ultra_service()

    try:
        if args.command == "quote":
            await _quote(service, args)
        elif args.command == "routers":
            directory = await service.get_routers()
            _print_json(directory.model_dump(mode="json", by_alias=True))
        elif args.command == "balances":
            await _balances(service, args)
        elif args.command == "shield":
            result = await service.get_shield(args.mints)
            _print_json(result.to_wire())
        elif args.command == "execute":
            await _execute(service, args)
    except UltraClientError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
