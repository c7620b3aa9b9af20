"""Per-chain AsyncWeb3 providers sharing one signer."""

import logging
import os
from collections.abc import Mapping

from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3

from ._exceptions import ConfigurationError
from .registry import ChainRegistry
from .types import ChainMetadata

logger = logging.getLogger(__name__)

RPC_URL_ENV_PREFIX = "WARP_RPC_URL_"


class MultiProvider:
    """
    Lazily created AsyncWeb3 providers, one per chain, plus a shared signer.

    RPC URL resolution order: explicit rpc_urls mapping, then the
    WARP_RPC_URL_<CHAIN> environment variable, then the registry default.

    Example:
        >>> async with MultiProvider(ChainRegistry.default()) as multi_provider:
        ...     multi_provider.set_shared_signer(Account.from_key("0x..."))
        ...     w3 = multi_provider.get_provider("goerli")
    """

    def __init__(
        self,
        registry: ChainRegistry,
        rpc_urls: Mapping[str, str] | None = None,
    ) -> None:
        self.registry = registry
        self._rpc_urls = dict(rpc_urls or {})
        self._providers: dict[str, AsyncWeb3] = {}
        self._signer: LocalAccount | None = None

    async def close(self) -> None:
        """Close every HTTP session that was opened."""
        for w3 in self._providers.values():
            await w3.provider.disconnect()
        self._providers.clear()

    async def __aenter__(self) -> "MultiProvider":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager and close sessions."""
        await self.close()

    def set_shared_signer(self, account: LocalAccount) -> None:
        self._signer = account

    @property
    def signer(self) -> LocalAccount:
        if self._signer is None:
            raise ConfigurationError("No signer set, call set_shared_signer() first")
        return self._signer

    def get_chain_metadata(self, chain_name: str) -> ChainMetadata:
        return self.registry.get_chain_metadata(chain_name)

    def get_domain_id(self, chain_name: str) -> int:
        return self.get_chain_metadata(chain_name).domain_id

    def rpc_url_for(self, chain_name: str) -> str:
        """
        Resolve the RPC URL for a chain.

        Raises:
            ChainNotSupportedError: If the chain is unknown and no URL was given
            ConfigurationError: If no URL is configured anywhere
        """
        url = self._rpc_urls.get(chain_name) or os.environ.get(RPC_URL_ENV_PREFIX + chain_name.upper())
        if not url:
            url = self.registry.get_chain_metadata(chain_name).rpc_url
        if not url:
            raise ConfigurationError(
                f"No RPC URL for {chain_name} (or set {RPC_URL_ENV_PREFIX}{chain_name.upper()})"
            )
        return url

    def get_provider(self, chain_name: str) -> AsyncWeb3:
        w3 = self._providers.get(chain_name)
        if w3 is None:
            url = self.rpc_url_for(chain_name)
            logger.debug("Connecting to %s at %s", chain_name, url)
            w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(url))
            self._providers[chain_name] = w3
        return w3
