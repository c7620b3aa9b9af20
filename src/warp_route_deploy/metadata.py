"""Token metadata resolution for base tokens."""

import asyncio
import logging

from web3 import AsyncWeb3

from ._exceptions import UnsupportedTokenTypeError
from .abi import ERC20_METADATA_ABI
from .provider import MultiProvider
from .types import TokenMetadata, TokenType

logger = logging.getLogger(__name__)


async def fetch_token_metadata(
    multi_provider: MultiProvider,
    chain_name: str,
    token_type: TokenType | str,
    address: str,
) -> TokenMetadata:
    """
    Resolve name, symbol and decimals for a token.

    Native tokens come from the registry (Ether when the chain has no
    descriptor). ERC-20 tokens are read on-chain with the three calls
    issued concurrently; if any of them fails the whole lookup fails.

    Raises:
        UnsupportedTokenTypeError: For any other token type
    """
    if token_type == TokenType.native:
        return multi_provider.registry.native_token_for(chain_name)

    if token_type in (TokenType.collateral, TokenType.synthetic):
        logger.info("Fetching token metadata for %s on %s", address, chain_name)
        w3 = multi_provider.get_provider(chain_name)
        erc20 = w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(address),
            abi=ERC20_METADATA_ABI,
        )
        name, symbol, decimals = await asyncio.gather(
            erc20.functions.name().call(),
            erc20.functions.symbol().call(),
            erc20.functions.decimals().call(),
        )
        return TokenMetadata(name=name, symbol=symbol, decimals=decimals)

    raise UnsupportedTokenTypeError(token_type)
