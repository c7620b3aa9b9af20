"""Read-only chain registry: chain metadata and Hyperlane core addresses."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ._exceptions import ChainNotSupportedError, ConfigurationError
from .constants import CHAIN_METADATA, ETHEREUM_NATIVE_TOKEN, HYPERLANE_ADDRESSES
from .types import ChainMetadata, HyperlaneAddresses, TokenMetadata

logger = logging.getLogger(__name__)


class ChainRegistry:
    """
    Keyed lookup of chain facts, injected wherever chain data is needed.

    Example:
        >>> registry = ChainRegistry.default().merged_with_file("artifacts/addresses.json")
        >>> registry.get_addresses("goerli").mailbox
        '0x...'
    """

    def __init__(
        self,
        chains: Mapping[str, ChainMetadata],
        addresses: Mapping[str, HyperlaneAddresses],
    ) -> None:
        self._chains = dict(chains)
        self._addresses = dict(addresses)

    @classmethod
    def default(cls) -> "ChainRegistry":
        """Registry with the built-in testnet chains."""
        return cls(CHAIN_METADATA, HYPERLANE_ADDRESSES)

    @property
    def chain_names(self) -> list[str]:
        return sorted(set(self._chains) | set(self._addresses))

    def __contains__(self, chain_name: object) -> bool:
        return chain_name in self._chains or chain_name in self._addresses

    def get_chain_metadata(self, chain_name: str) -> ChainMetadata:
        metadata = self._chains.get(chain_name)
        if metadata is None:
            raise ChainNotSupportedError(chain_name)
        return metadata

    def get_addresses(self, chain_name: str) -> HyperlaneAddresses:
        addresses = self._addresses.get(chain_name)
        if addresses is None:
            raise ChainNotSupportedError(chain_name)
        return addresses

    def native_token_for(self, chain_name: str) -> TokenMetadata:
        """Native token of a chain, or Ether when the chain declares none."""
        metadata = self._chains.get(chain_name)
        if metadata is None or metadata.native_token is None:
            return ETHEREUM_NATIVE_TOKEN
        return metadata.native_token

    def merged_with(self, overrides: Mapping[str, Mapping[str, Any]]) -> "ChainRegistry":
        """
        Return a new registry with address overrides applied per field.

        Args:
            overrides: chain name -> partial addresses, keyed like addresses.json
                (mailbox, multisigIsm, defaultIsmInterchainGasPaymaster)

        Raises:
            ConfigurationError: If an entry for a new chain lacks required addresses
        """
        merged = dict(self._addresses)
        for chain_name, entry in overrides.items():
            current = merged.get(chain_name)
            base = current.model_dump(by_alias=True, exclude_none=True) if current else {}
            try:
                merged[chain_name] = HyperlaneAddresses.model_validate({**base, **entry})
            except ValidationError as e:
                raise ConfigurationError(f"Invalid Hyperlane addresses for {chain_name}: {e}") from e
        return ChainRegistry(self._chains, merged)

    def merged_with_file(self, path: str | Path) -> "ChainRegistry":
        """Overlay addresses from a deployment addresses.json file."""
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Addresses file not found: {path}")
        logger.info("Merging Hyperlane addresses from %s", path)
        return self.merged_with(json.loads(path.read_text()))
