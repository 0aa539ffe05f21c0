#!/usr/bin/env python3
"""
Main entry point for the transaction insight CLI.

Commands:
1. explain: explain a contract call (same pipeline as /api/gpt/completion)
2. decode: decode call data against a local ABI file
3. profile: look up a wallet's default Lens profile
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .abi import resolve_function_call
from .clients import ProfileClient
from .config import load_settings
from .errors import TxInsightError
from .pipeline import TransactionExplainer

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    if debug:
        # Create output directory for log file
        output_dir = Path("output")
        output_dir.mkdir(exist_ok=True)

        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(output_dir / 'tx_insight.log')
            ]
        )
    else:
        logging.basicConfig(
            level=logging.CRITICAL,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.NullHandler()
            ]
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Explain what a pending contract call will do',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  ETHERSCAN_API_KEY     Etherscan API key (chains 1, 5)
  POLYGONSCAN_API_KEY   Polygonscan API key (chains 137, 80001)
  GPT_API_KEY           Completion service API key
  GPT_API_ENDPOINT      Completion service base URL
  GPT_MODEL             Completion model (default: gpt-3.5-turbo)
  LENS_API_URL          Lens GraphQL endpoint

Priority: Command-line arguments > Environment variables > Defaults
        """
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Enable debug mode to log to file (default: False)'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    explain = subparsers.add_parser('explain', help='Explain a contract call')
    explain.add_argument('--contract-address', required=True, help='Called contract address')
    explain.add_argument('--input-data', required=True, help='Hex encoded call data')
    explain.add_argument('--chain-id', type=int, default=1, help='Chain ID (default: 1)')
    explain.add_argument(
        '--gpt-model',
        default=None,
        help='Completion model, overrides GPT_MODEL'
    )

    decode = subparsers.add_parser('decode', help='Decode call data against a local ABI file')
    decode.add_argument('--input-data', required=True, help='Hex encoded call data')
    decode.add_argument('--abi-file', type=Path, required=True, help='Path to contract ABI JSON file')

    profile = subparsers.add_parser('profile', help='Look up a default Lens profile')
    profile.add_argument('--wallet-address', required=True, help='Wallet address')

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.debug)
    settings = load_settings()

    try:
        if args.command == 'explain':
            if args.gpt_model:
                settings = replace(settings, gpt_model=args.gpt_model)
            explainer = TransactionExplainer.from_settings(settings)
            print(explainer.explain(args.contract_address, args.input_data, args.chain_id))
        elif args.command == 'decode':
            decoded = resolve_function_call(args.input_data, args.abi_file.read_text())
            if not decoded.is_matched:
                logger.warning("No ABI function matches the call data")
            print(json.dumps(decoded.to_dict(), indent=2))
        else:
            profile = ProfileClient(settings).get_default_profile(args.wallet_address)
            print(json.dumps(profile, indent=2))
    except TxInsightError as e:
        logger.error(f"❌ {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
