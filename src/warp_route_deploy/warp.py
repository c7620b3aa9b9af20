"""Warp route deployment orchestration."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ._exceptions import ConfigurationError
from .artifacts import write_token_deployment_artifacts
from .config import (
    get_warp_config_chains,
    get_warp_multi_collateral_config_chains,
    validate_warp_route_config,
    validate_warp_route_multi_collateral_config,
)
from .constants import DEFAULT_ARTIFACTS_DIR, ZERO_ADDRESS
from .deployer import HypERC20Deployer
from .metadata import fetch_token_metadata
from .provider import MultiProvider
from .types import (
    BaseTokenConfig,
    BaseTokenInfo,
    ConnectionConfig,
    DeployedRouter,
    RouterConfig,
    SyntheticTokenConfig,
    TokenType,
    WarpRouteConfig,
    WarpRouteMultiCollateralConfig,
)

logger = logging.getLogger(__name__)

ConfigMap = dict[str, RouterConfig]


class BaseWarpRouteDeployer:
    """
    Shared steps of both warp route shapes.

    Subclasses validate their config shape and decide which base and
    synthetic tokens go into the per-chain config map.
    """

    def __init__(
        self,
        multi_provider: MultiProvider,
        router_deployer: HypERC20Deployer | None,
        config: Mapping[str, Any] | WarpRouteConfig | WarpRouteMultiCollateralConfig,
        artifacts_dir: str | Path = DEFAULT_ARTIFACTS_DIR,
    ) -> None:
        self.multi_provider = multi_provider
        self.router_deployer = router_deployer
        self.raw_config = config
        self.artifacts_dir = Path(artifacts_dir)

    @property
    def registry(self):
        return self.multi_provider.registry

    def chains(self) -> list[str]:
        raise NotImplementedError

    async def build_config(self) -> tuple[ConfigMap, list[BaseTokenInfo]]:
        raise NotImplementedError

    async def deploy(self) -> dict[str, DeployedRouter]:
        if self.router_deployer is None:
            raise ConfigurationError("No router deployer configured")
        config_map, _ = await self.build_config()

        logger.info("Initiating HypERC20 deployments on %s", ", ".join(config_map))
        contracts = await self.router_deployer.deploy(config_map)
        logger.info("HypERC20 deployments complete")

        write_token_deployment_artifacts(contracts, config_map, self.artifacts_dir)
        return contracts

    async def resolve_base_token(self, base: BaseTokenConfig) -> BaseTokenInfo:
        """Pick the router's token address and fetch the token metadata."""
        token_type = TokenType(base.type)
        address = base.address if token_type == TokenType.collateral else ZERO_ADDRESS
        metadata = await fetch_token_metadata(self.multi_provider, base.chain_name, token_type, address)
        logger.info(
            "Using base token metadata: Name: %s, Symbol: %s, Decimals: %d",
            metadata.name,
            metadata.symbol,
            metadata.decimals,
        )
        return BaseTokenInfo(type=token_type, chain_name=base.chain_name, address=address, metadata=metadata)

    def connection_for(self, chain_name: str, overrides: ConnectionConfig) -> dict[str, str | None]:
        """Infrastructure addresses for a chain: explicit override, else registry default."""
        defaults = self.registry.get_addresses(chain_name)
        return {
            "mailbox": overrides.mailbox or defaults.mailbox,
            "interchain_security_module": overrides.interchain_security_module or defaults.multisig_ism,
            "interchain_gas_paymaster": (
                overrides.interchain_gas_paymaster or defaults.default_ism_interchain_gas_paymaster
            ),
        }

    def base_router_config(self, base: BaseTokenConfig, info: BaseTokenInfo, owner: str) -> RouterConfig:
        config = RouterConfig(
            type=info.type,
            token=info.address,
            owner=owner,
            **self.connection_for(base.chain_name, base),
        )
        logger.info(
            "HypERC20Config config on base chain %s: %s",
            base.chain_name,
            config.model_dump_json(by_alias=True, exclude_none=True),
        )
        return config

    def synthetic_router_config(
        self,
        synthetic: SyntheticTokenConfig,
        first_base: BaseTokenInfo,
        owner: str,
    ) -> RouterConfig:
        """Synthetic router config; name and symbol default to the first base token's."""
        config = RouterConfig(
            type=TokenType.synthetic,
            name=synthetic.name or first_base.metadata.name,
            symbol=synthetic.symbol or first_base.metadata.symbol,
            total_supply=synthetic.total_supply if synthetic.total_supply is not None else 0,
            decimals=first_base.metadata.decimals,
            owner=owner,
            **self.connection_for(synthetic.chain_name, synthetic),
        )
        logger.info(
            "HypERC20Config config on synthetic chain %s: %s",
            synthetic.chain_name,
            config.model_dump_json(by_alias=True, exclude_none=True),
        )
        return config


class WarpRouteDeployer(BaseWarpRouteDeployer):
    """Deploys a route with one base token and one or more synthetics."""

    @property
    def config(self) -> WarpRouteConfig:
        return validate_warp_route_config(self.raw_config).unwrap()

    def chains(self) -> list[str]:
        return get_warp_config_chains(self.config)

    async def build_config(self) -> tuple[ConfigMap, list[BaseTokenInfo]]:
        config = self.config
        base_token = await self.resolve_base_token(config.base)
        owner = self.multi_provider.signer.address

        config_map: ConfigMap = {
            config.base.chain_name: self.base_router_config(config.base, base_token, owner),
        }
        for synthetic in config.synthetics:
            config_map[synthetic.chain_name] = self.synthetic_router_config(synthetic, base_token, owner)
        return config_map, [base_token]


class WarpRouteMultiCollateralDeployer(BaseWarpRouteDeployer):
    """Deploys a route with several base tokens backing one synthetic."""

    @property
    def config(self) -> WarpRouteMultiCollateralConfig:
        return validate_warp_route_multi_collateral_config(self.raw_config).unwrap()

    def chains(self) -> list[str]:
        return get_warp_multi_collateral_config_chains(self.config)

    async def build_config(self) -> tuple[ConfigMap, list[BaseTokenInfo]]:
        config = self.config

        base_tokens = []
        for base in config.bases:
            base_tokens.append(await self.resolve_base_token(base))

        owner = self.multi_provider.signer.address

        config_map: ConfigMap = {}
        for base, info in zip(config.bases, base_tokens):
            config_map[base.chain_name] = self.base_router_config(base, info, owner)

        synthetic = config.synthetic
        config_map[synthetic.chain_name] = self.synthetic_router_config(synthetic, base_tokens[0], owner)
        return config_map, base_tokens
