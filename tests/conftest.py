"""Pytest configuration and fixtures for warp-route-deploy tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from warp_route_deploy import ChainRegistry, MultiProvider

# Anvil's first pre-funded test account (same as Hardhat/Foundry)
# Private key is well-known - DO NOT use on mainnet
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

# Goerli USDC and Fuji USDC, used as collateral in the static configs
GOERLI_USDC = "0x07865c6E87B9F70255377e024ace6630C1Eaa37F"
FUJI_USDC = "0x5425890298aed601595a70AB815c96711a31Bc65"

TESTNET_MAILBOX = "0xCC737a94FecaeC165AbCf12dED095BB13F037685"
TESTNET_IGP = "0xF90cB82a76492614D07B82a7658917f3aC811Ac1"


class _AsyncChainId:
    """Awaitable that returns chain_id each time it's awaited."""

    def __init__(self, chain_id: int):
        self._chain_id = chain_id

    def __await__(self):
        async def _coro():
            return self._chain_id

        return _coro().__await__()


def create_mock_w3(chain_id: int = 5):
    """Create a mock AsyncWeb3 instance with proper async chain_id."""
    mock_w3 = MagicMock()
    mock_eth = MagicMock()
    mock_eth.chain_id = _AsyncChainId(chain_id)
    mock_w3.eth = mock_eth
    mock_w3.provider.disconnect = AsyncMock()
    return mock_w3


def create_erc20_w3(name: str = "USD Coin", symbol: str = "USDC", decimals: int = 6, chain_id: int = 5):
    """Mock AsyncWeb3 whose contracts answer ERC-20 metadata reads."""
    mock_w3 = create_mock_w3(chain_id)
    mock_contract = MagicMock()
    mock_contract.functions.name.return_value.call = AsyncMock(return_value=name)
    mock_contract.functions.symbol.return_value.call = AsyncMock(return_value=symbol)
    mock_contract.functions.decimals.return_value.call = AsyncMock(return_value=decimals)
    mock_w3.eth.contract.return_value = mock_contract
    return mock_w3


def create_multi_provider(
    registry: ChainRegistry | None = None,
    providers: dict | None = None,
    signer_address: str = TEST_ADDRESS,
) -> MultiProvider:
    """MultiProvider with pre-seeded mock providers and a mock signer."""
    multi_provider = MultiProvider(registry or ChainRegistry.default())
    account = MagicMock()
    account.address = signer_address
    multi_provider.set_shared_signer(account)
    multi_provider._providers.update(providers or {})
    return multi_provider


def router_abi(constructor_inputs: list[dict] | None = None) -> list[dict]:
    """Minimal router ABI with the functions the deployer calls."""
    abi = [
        {"type": "function", "name": name, "inputs": [], "outputs": [], "stateMutability": "nonpayable"}
        for name in ("initialize", "setInterchainSecurityModule", "enrollRemoteRouters", "transferOwnership")
    ]
    if constructor_inputs is not None:
        abi.append({"type": "constructor", "inputs": constructor_inputs, "stateMutability": "nonpayable"})
    return abi


@pytest.fixture
def registry() -> ChainRegistry:
    return ChainRegistry.default()
