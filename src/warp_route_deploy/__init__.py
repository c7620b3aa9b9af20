# Suppress websockets deprecation warning from web3.py (ethereum/web3.py#3530)
# web3.py unconditionally imports LegacyWebSocketProvider even for HTTP-only usage.
# This will be fixed in web3.py v8. Remove this filter after upgrading.
import warnings

warnings.filterwarnings(
    "ignore",
    message="websockets.legacy is deprecated",
    category=DeprecationWarning,
    module=r"websockets\.legacy",
)

"""
Warp Route deployer

Deploys Hyperlane Warp Route routers: one or more base (native or
collateral) tokens on origin chains bridged to synthetic tokens on
destination chains.

Usage (CLI):
    warp-deploy --key 0x... [--multi-collateral] [--config route.json]

Usage (library):
    import asyncio
    from eth_account import Account
    from warp_route_deploy import (
        ChainRegistry,
        HypERC20Deployer,
        MultiProvider,
        RouterArtifacts,
        WarpRouteDeployer,
    )

    async def main():
        async with MultiProvider(ChainRegistry.default()) as multi_provider:
            multi_provider.set_shared_signer(Account.from_key("0x..."))
            router_deployer = HypERC20Deployer(
                multi_provider, RouterArtifacts.from_directory("contracts/out")
            )
            deployer = WarpRouteDeployer(
                multi_provider,
                router_deployer,
                {
                    "base": {"chain_name": "goerli", "type": "native"},
                    "synthetics": [{"chain_name": "alfajores"}],
                },
            )
            contracts = await deployer.deploy()

    asyncio.run(main())

Config validation only:
    from warp_route_deploy import validate_warp_route_config

    result = validate_warp_route_config(data)
    if not result.success:
        print(result.path, result.message)
"""

from ._exceptions import (
    ChainNotSupportedError,
    ConfigurationError,
    InsufficientBalanceError,
    TransactionError,
    TransactionRevertedError,
    UnsupportedTokenTypeError,
    WarpConfigError,
    WarpDeployError,
)
from ._version import __version__

# Artifacts
from .artifacts import merge_json, write_token_deployment_artifacts

# Pre-flight checks
from .balances import assert_balances

# Config validation
from .config import (
    ValidationResult,
    assert_bytes32,
    get_warp_config_chains,
    get_warp_multi_collateral_config_chains,
    load_warp_config,
    validate_warp_route_config,
    validate_warp_route_multi_collateral_config,
)

# Router deployment
from .deployer import HypERC20Deployer, RouterArtifact, RouterArtifacts
from .metadata import fetch_token_metadata
from .provider import MultiProvider
from .registry import ChainRegistry

# Types
from .types import (
    BaseTokenInfo,
    ChainMetadata,
    CollateralTokenConfig,
    DeployedRouter,
    GasOptions,
    HyperlaneAddresses,
    NativeTokenConfig,
    RouterConfig,
    SyntheticTokenConfig,
    TokenMetadata,
    TokenType,
    WarpRouteArtifact,
    WarpRouteConfig,
    WarpRouteMultiCollateralConfig,
)

# Orchestration
from .warp import BaseWarpRouteDeployer, WarpRouteDeployer, WarpRouteMultiCollateralDeployer

__all__ = [
    # Version
    "__version__",
    # Deployers
    "BaseWarpRouteDeployer",
    "WarpRouteDeployer",
    "WarpRouteMultiCollateralDeployer",
    "HypERC20Deployer",
    "RouterArtifact",
    "RouterArtifacts",
    # Chains
    "ChainRegistry",
    "MultiProvider",
    # Operations
    "assert_balances",
    "fetch_token_metadata",
    "merge_json",
    "write_token_deployment_artifacts",
    # Config
    "ValidationResult",
    "validate_warp_route_config",
    "validate_warp_route_multi_collateral_config",
    "get_warp_config_chains",
    "get_warp_multi_collateral_config_chains",
    "assert_bytes32",
    "load_warp_config",
    # Types
    "TokenType",
    "TokenMetadata",
    "NativeTokenConfig",
    "CollateralTokenConfig",
    "SyntheticTokenConfig",
    "WarpRouteConfig",
    "WarpRouteMultiCollateralConfig",
    "BaseTokenInfo",
    "RouterConfig",
    "DeployedRouter",
    "WarpRouteArtifact",
    "ChainMetadata",
    "HyperlaneAddresses",
    "GasOptions",
    # Exceptions
    "WarpDeployError",
    "ConfigurationError",
    "WarpConfigError",
    "ChainNotSupportedError",
    "UnsupportedTokenTypeError",
    "InsufficientBalanceError",
    "TransactionError",
    "TransactionRevertedError",
]
