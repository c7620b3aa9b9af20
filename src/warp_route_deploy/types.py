"""Type definitions for warp-route-deploy."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

# Config models accept both snake_case and the camelCase keys used by
# the TypeScript warp route configs.
_CONFIG_MODEL = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class TokenType(str, Enum):
    """Router flavour deployed on a chain."""

    native = "native"
    collateral = "collateral"
    synthetic = "synthetic"


class TokenMetadata(BaseModel):
    """ERC-20 style token facts: name, symbol, decimals."""

    name: str
    symbol: str
    decimals: int = Field(ge=0, le=255)

    model_config = {"frozen": True}


class ConnectionConfig(BaseModel):
    """
    Optional per-chain infrastructure overrides.

    Any field left unset is resolved from the chain registry at deploy time.
    """

    mailbox: str | None = None
    interchain_gas_paymaster: str | None = None
    interchain_security_module: str | None = None

    model_config = _CONFIG_MODEL


class NativeTokenConfig(ConnectionConfig):
    """Base token that is the chain's native currency."""

    type: Literal["native"]
    chain_name: str
    address: str | None = None


class CollateralTokenConfig(ConnectionConfig):
    """Base token that is an existing ERC-20 locked as collateral."""

    type: Literal["collateral"]
    chain_name: str
    address: str


BaseTokenConfig = Annotated[
    NativeTokenConfig | CollateralTokenConfig,
    Field(discriminator="type"),
]


class SyntheticTokenConfig(ConnectionConfig):
    """
    Synthetic token minted on a destination chain.

    name and symbol default to the first base token's metadata,
    total_supply defaults to 0.
    """

    chain_name: str
    name: str | None = None
    symbol: str | None = None
    total_supply: int | None = Field(default=None, ge=0, strict=True)

    @field_validator("total_supply", mode="before")
    @classmethod
    def _integral_total_supply(cls, value):
        # JSON tooling writes large supplies as floats, e.g. 1e24
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class WarpRouteConfig(BaseModel):
    """One base token bridged to one or more synthetic tokens."""

    base: BaseTokenConfig
    synthetics: list[SyntheticTokenConfig] = Field(min_length=1)

    model_config = _CONFIG_MODEL


class WarpRouteMultiCollateralConfig(BaseModel):
    """One or more base tokens bridged to a single synthetic token."""

    bases: list[BaseTokenConfig] = Field(min_length=1)
    synthetic: SyntheticTokenConfig

    model_config = _CONFIG_MODEL


class BaseTokenInfo(BaseModel):
    """A base token after its address and metadata have been resolved."""

    type: TokenType
    chain_name: str
    address: str
    metadata: TokenMetadata

    model_config = {"frozen": True}


class RouterConfig(BaseModel):
    """
    Per-chain router configuration handed to the router deployer.

    Base routers carry `token`; synthetic routers carry name, symbol,
    total_supply and decimals.
    """

    type: TokenType
    owner: str
    mailbox: str
    interchain_gas_paymaster: str
    interchain_security_module: str | None = None

    token: str | None = None

    name: str | None = None
    symbol: str | None = None
    total_supply: int | None = None
    decimals: int | None = None

    model_config = _CONFIG_MODEL


class DeployedRouter(BaseModel):
    """A router contract deployed by HypERC20Deployer."""

    chain_name: str
    router: str
    token_type: TokenType
    tx_hash: str | None = None

    model_config = {"frozen": True}


class WarpRouteArtifact(BaseModel):
    """Entry written to warp-token-addresses.json, keyed by chain name."""

    router: str
    token_type: TokenType

    model_config = _CONFIG_MODEL


class ChainMetadata(BaseModel):
    """Static facts about a chain."""

    name: str
    chain_id: int
    domain_id: int
    rpc_url: str | None = None
    native_token: TokenMetadata | None = None

    model_config = _CONFIG_MODEL


class HyperlaneAddresses(BaseModel):
    """
    Hyperlane core contract addresses on one chain.

    Field aliases match the keys of a permissionless deployment
    addresses.json (mailbox, multisigIsm, defaultIsmInterchainGasPaymaster).
    """

    mailbox: str
    default_ism_interchain_gas_paymaster: str
    multisig_ism: str | None = None

    model_config = _CONFIG_MODEL


class GasOptions(BaseModel):
    """
    Gas configuration for transactions.

    By default, uses fixed gas limits and lets the RPC set gas prices.
    Enable estimate_gas for dynamic estimation, or set EIP-1559 fees explicitly.

    Example:
        GasOptions(estimate_gas=True)  # Dynamic estimation with 20% buffer
        GasOptions(max_fee_per_gas=50_000_000_000)  # 50 gwei max fee
    """

    estimate_gas: bool = False
    """Estimate gas dynamically (adds 20% buffer). Default: False (use fixed limits)."""

    gas_limit: int | None = None
    """Override gas limit. If None, uses default or estimation."""

    max_fee_per_gas: int | None = None
    """EIP-1559 max fee per gas in wei. If set, uses type 2 transactions."""

    max_priority_fee_per_gas: int | None = None
    """EIP-1559 priority fee per gas in wei. Defaults to 1 gwei if max_fee is set."""

    model_config = {"frozen": True}
