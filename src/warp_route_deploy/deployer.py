"""
HypERC20 router deployment.

Deploys one router per chain from compiled Hyperlane token artifacts,
initializes it against the chain's mailbox and gas paymaster, and
enrolls every router with every other router of the route.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator
from web3 import AsyncWeb3

from ._exceptions import ConfigurationError, UnsupportedTokenTypeError
from .abi import ROUTER_FUNCTION_NAMES
from .async_helpers import (
    DEFAULT_GAS_CALL,
    DEFAULT_GAS_ENROLL,
    deploy_contract,
    send_transaction,
    to_bytes32,
)
from .constants import ZERO_ADDRESS
from .provider import MultiProvider
from .types import DeployedRouter, GasOptions, RouterConfig, TokenType

logger = logging.getLogger(__name__)

# Contract name of the router deployed for each token type
ROUTER_CONTRACT_NAMES: dict[TokenType, str] = {
    TokenType.synthetic: "HypERC20",
    TokenType.collateral: "HypERC20Collateral",
    TokenType.native: "HypNative",
}


class RouterArtifact(BaseModel):
    """ABI and creation bytecode of one router contract."""

    contract_name: str
    abi: list[dict[str, Any]]
    bytecode: str

    model_config = {"frozen": True}

    @field_validator("bytecode", mode="before")
    @classmethod
    def _unwrap_bytecode(cls, value: Any) -> Any:
        # Foundry nests the bytecode under {"object": ...}, Hardhat stores it flat
        if isinstance(value, dict):
            return value.get("object")
        return value

    @field_validator("bytecode")
    @classmethod
    def _check_bytecode(cls, value: str) -> str:
        if not value.startswith("0x"):
            value = "0x" + value
        if len(value) <= 2:
            raise ValueError("empty bytecode")
        return value

    @property
    def constructor_inputs(self) -> list[dict[str, Any]]:
        for entry in self.abi:
            if entry.get("type") == "constructor":
                return list(entry.get("inputs", []))
        return []

    @classmethod
    def from_file(cls, path: str | Path) -> "RouterArtifact":
        path = Path(path)
        data = json.loads(path.read_text())
        artifact = cls(
            contract_name=data.get("contractName", path.stem),
            abi=data["abi"],
            bytecode=data["bytecode"],
        )
        functions = {entry.get("name") for entry in artifact.abi if entry.get("type") == "function"}
        missing = [name for name in ROUTER_FUNCTION_NAMES if name not in functions]
        if missing:
            raise ConfigurationError(f"{path} is not a router artifact, missing: {', '.join(missing)}")
        return artifact


class RouterArtifacts(BaseModel):
    """Compiled artifacts for the three router flavours."""

    synthetic: RouterArtifact
    collateral: RouterArtifact
    native: RouterArtifact

    model_config = {"frozen": True}

    def for_type(self, token_type: TokenType) -> RouterArtifact:
        if token_type == TokenType.synthetic:
            return self.synthetic
        if token_type == TokenType.collateral:
            return self.collateral
        if token_type == TokenType.native:
            return self.native
        raise UnsupportedTokenTypeError(token_type)

    @classmethod
    def from_directory(cls, directory: str | Path) -> "RouterArtifacts":
        """
        Load artifacts from a build output directory.

        Accepts both flat (<dir>/HypERC20.json) and Foundry
        (<dir>/HypERC20.sol/HypERC20.json) layouts.

        Raises:
            ConfigurationError: If an artifact is missing
        """
        directory = Path(directory)
        loaded = {}
        for token_type, name in ROUTER_CONTRACT_NAMES.items():
            candidates = [directory / f"{name}.json", directory / f"{name}.sol" / f"{name}.json"]
            path = next((c for c in candidates if c.exists()), None)
            if path is None:
                raise ConfigurationError(f"Router artifact {name}.json not found in {directory}")
            loaded[token_type.value] = RouterArtifact.from_file(path)
        return cls(**loaded)


def constructor_args(config: RouterConfig, artifact: RouterArtifact) -> tuple[Any, ...]:
    """Constructor arguments for a router, following the artifact's constructor signature."""
    inputs = artifact.constructor_inputs
    if config.type == TokenType.collateral:
        if config.token is None:
            raise ConfigurationError("Collateral router requires a token address")
        return (AsyncWeb3.to_checksum_address(config.token),)
    if config.type == TokenType.synthetic and inputs:
        return (config.decimals if config.decimals is not None else 18,)
    return ()


def initialize_args(config: RouterConfig) -> tuple[Any, ...]:
    mailbox = AsyncWeb3.to_checksum_address(config.mailbox)
    igp = AsyncWeb3.to_checksum_address(config.interchain_gas_paymaster)
    if config.type == TokenType.synthetic:
        return (mailbox, igp, config.total_supply or 0, config.name, config.symbol)
    return (mailbox, igp)


def _is_set(address: str | None) -> bool:
    return bool(address) and address.lower() != ZERO_ADDRESS


class HypERC20Deployer:
    """
    Deploys and connects the routers of a warp route.

    The whole deployment either completes or raises; routers deployed
    before a failure are left as they are.

    Example:
        >>> deployer = HypERC20Deployer(multi_provider, RouterArtifacts.from_directory("contracts/out"))
        >>> contracts = await deployer.deploy(config_map)
        >>> contracts["alfajores"].router
        '0x...'
    """

    def __init__(
        self,
        multi_provider: MultiProvider,
        artifacts: RouterArtifacts,
        gas: GasOptions | None = None,
    ) -> None:
        self.multi_provider = multi_provider
        self.artifacts = artifacts
        self.gas = gas
        self.deployed_contracts: dict[str, DeployedRouter] = {}

    async def deploy(self, config_map: Mapping[str, RouterConfig]) -> dict[str, DeployedRouter]:
        self.deployed_contracts = {}
        for chain_name, config in config_map.items():
            self.deployed_contracts[chain_name] = await self.deploy_router(chain_name, config)

        await self.enroll_remote_routers()

        for chain_name, config in config_map.items():
            await self.transfer_ownership(chain_name, config.owner)

        return dict(self.deployed_contracts)

    def _router_contract(self, chain_name: str):
        deployed = self.deployed_contracts[chain_name]
        w3 = self.multi_provider.get_provider(chain_name)
        artifact = self.artifacts.for_type(deployed.token_type)
        return w3, w3.eth.contract(address=deployed.router, abi=artifact.abi)

    async def deploy_router(self, chain_name: str, config: RouterConfig) -> DeployedRouter:
        """Deploy and initialize the router for one chain."""
        account = self.multi_provider.signer
        w3 = self.multi_provider.get_provider(chain_name)
        artifact = self.artifacts.for_type(config.type)

        logger.info("Deploying %s on %s", artifact.contract_name, chain_name)
        address, tx_hash = await deploy_contract(
            w3,
            account,
            chain_name,
            artifact.abi,
            artifact.bytecode,
            constructor_args(config, artifact),
            gas_options=self.gas,
        )
        router = w3.eth.contract(address=address, abi=artifact.abi)

        await send_transaction(
            w3,
            account,
            chain_name,
            router.functions.initialize(*initialize_args(config)),
            DEFAULT_GAS_CALL,
            gas_options=self.gas,
        )

        if _is_set(config.interchain_security_module):
            ism = AsyncWeb3.to_checksum_address(config.interchain_security_module)
            await send_transaction(
                w3,
                account,
                chain_name,
                router.functions.setInterchainSecurityModule(ism),
                DEFAULT_GAS_CALL,
                gas_options=self.gas,
            )

        logger.info("Deployed %s on %s at %s", artifact.contract_name, chain_name, address)
        return DeployedRouter(chain_name=chain_name, router=address, token_type=config.type, tx_hash=tx_hash)

    async def enroll_remote_routers(self) -> None:
        """Enroll every deployed router with all the other routers."""
        account = self.multi_provider.signer
        for chain_name in self.deployed_contracts:
            remotes = [
                (self.multi_provider.get_domain_id(other), to_bytes32(deployed.router))
                for other, deployed in self.deployed_contracts.items()
                if other != chain_name
            ]
            if not remotes:
                continue

            domains = [domain for domain, _ in remotes]
            routers = [router for _, router in remotes]
            logger.info("Enrolling %d remote routers on %s", len(remotes), chain_name)

            w3, router = self._router_contract(chain_name)
            await send_transaction(
                w3,
                account,
                chain_name,
                router.functions.enrollRemoteRouters(domains, routers),
                DEFAULT_GAS_ENROLL,
                gas_options=self.gas,
            )

    async def transfer_ownership(self, chain_name: str, owner: str) -> None:
        """Hand the router to its configured owner, if that is not the signer."""
        account = self.multi_provider.signer
        if owner.lower() == account.address.lower():
            return

        logger.info("Transferring ownership of %s router to %s", chain_name, owner)
        w3, router = self._router_contract(chain_name)
        await send_transaction(
            w3,
            account,
            chain_name,
            router.functions.transferOwnership(AsyncWeb3.to_checksum_address(owner)),
            DEFAULT_GAS_CALL,
            gas_options=self.gas,
        )
