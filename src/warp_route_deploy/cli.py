"""
Command line entry point: warp-deploy.

Usage:
    warp-deploy --key 0x<64 hex chars> [--multi-collateral] [--config route.json]

Environment variables:
    WARP_PRIVATE_KEY       used when --key is not given
    WARP_RPC_URL_<CHAIN>   RPC URL override per chain, e.g. WARP_RPC_URL_GOERLI
    LOG_LEVEL              console log level (default: info)
"""

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Coroutine
from typing import Any, TypeVar

from eth_account import Account

from ._exceptions import ConfigurationError
from .balances import DEFAULT_MIN_BALANCE, assert_balances
from .config import assert_bytes32, load_warp_config
from .constants import DEFAULT_ARTIFACTS_DIR
from .deployer import HypERC20Deployer, RouterArtifacts
from .log import setup_console_logging
from .provider import MultiProvider
from .registry import ChainRegistry
from .types import GasOptions
from .warp import BaseWarpRouteDeployer, WarpRouteDeployer, WarpRouteMultiCollateralDeployer
from .warp_tokens import WARP_ROUTE_CONFIG, WARP_ROUTE_MULTI_COLLATERAL_CONFIG

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def _private_key(value: str) -> str:
    try:
        return assert_bytes32(value)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(f"--key: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="warp-deploy",
        description="Deploy Hyperlane Warp Route routers",
    )
    parser.add_argument(
        "--key",
        type=_private_key,
        default=os.environ.get("WARP_PRIVATE_KEY"),
        help="A hexadecimal private key for transaction signing (or set WARP_PRIVATE_KEY)",
    )
    parser.add_argument(
        "--multi-collateral",
        action="store_true",
        help="Deploy a multi-collateral route (several bases, one synthetic)",
    )
    parser.add_argument("--config", help="JSON warp route config (default: built-in static config)")
    parser.add_argument(
        "--artifacts-dir",
        default=DEFAULT_ARTIFACTS_DIR,
        help="Directory for warp-token-addresses.json (default: %(default)s)",
    )
    parser.add_argument(
        "--contracts-dir",
        default="./contracts/out",
        help="Compiled HypERC20 / HypERC20Collateral / HypNative artifacts (default: %(default)s)",
    )
    parser.add_argument("--addresses-file", help="Hyperlane addresses.json merged over the built-in registry")
    parser.add_argument(
        "--min-balance",
        type=int,
        default=DEFAULT_MIN_BALANCE,
        help="Minimum signer balance in wei required on every chain (default: %(default)s)",
    )
    parser.add_argument("--estimate-gas", action="store_true", help="Estimate gas instead of fixed limits")
    parser.add_argument("--dry-run", action="store_true", help="Build and log the router config, deploy nothing")
    parser.add_argument("--log-level", default="info", help="Console log level (default: %(default)s)")
    return parser


def get_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse arguments; --key is required unless WARP_PRIVATE_KEY is set."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.key:
        parser.error("--key is required (or set WARP_PRIVATE_KEY)")
    return args


def run(name: str, main: Coroutine[Any, Any, _T]) -> _T:
    """Run a coroutine to completion; log and exit with status 1 on any error."""
    logger.info("Starting %s", name)
    try:
        result = asyncio.run(main)
    except Exception:
        logger.exception("%s failed", name)
        sys.exit(1)
    logger.info("%s complete", name)
    return result


def create_deployer(args: argparse.Namespace, multi_provider: MultiProvider) -> BaseWarpRouteDeployer:
    if args.config:
        config = load_warp_config(args.config)
    elif args.multi_collateral:
        config = WARP_ROUTE_MULTI_COLLATERAL_CONFIG
    else:
        config = WARP_ROUTE_CONFIG

    router_deployer = None
    if not args.dry_run:
        gas = GasOptions(estimate_gas=True) if args.estimate_gas else None
        artifacts = RouterArtifacts.from_directory(args.contracts_dir)
        router_deployer = HypERC20Deployer(multi_provider, artifacts, gas=gas)

    deployer_class = WarpRouteMultiCollateralDeployer if args.multi_collateral else WarpRouteDeployer
    return deployer_class(multi_provider, router_deployer, config, artifacts_dir=args.artifacts_dir)


async def deploy_warp_route(args: argparse.Namespace) -> None:
    registry = ChainRegistry.default()
    if args.addresses_file:
        registry = registry.merged_with_file(args.addresses_file)

    async with MultiProvider(registry) as multi_provider:
        multi_provider.set_shared_signer(Account.from_key(args.key))
        logger.info("Preparing Warp Route deployer")
        deployer = create_deployer(args, multi_provider)

        if args.dry_run:
            config_map, _ = await deployer.build_config()
            for chain_name, config in config_map.items():
                logger.info("%s: %s", chain_name, config.model_dump_json(by_alias=True, exclude_none=True))
            return

        await assert_balances(multi_provider, deployer.chains(), args.min_balance)
        logger.info("Beginning warp route deployment")
        contracts = await deployer.deploy()
        for chain_name, contract in contracts.items():
            logger.info("%s %s router: %s", chain_name, contract.token_type.value, contract.router)


def main(argv: list[str] | None = None) -> None:
    args = get_args(argv)
    setup_console_logging(args.log_level)
    run("Warp route deployment", deploy_warp_route(args))


if __name__ == "__main__":
    main()
