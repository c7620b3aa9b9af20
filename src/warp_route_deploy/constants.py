"""Chain metadata and Hyperlane core addresses known out of the box."""

from .types import ChainMetadata, HyperlaneAddresses, TokenMetadata

# Canonical fallback when a chain has no native token descriptor.
ETHEREUM_NATIVE_TOKEN = TokenMetadata(name="Ether", symbol="ETH", decimals=18)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

CHAIN_METADATA: dict[str, ChainMetadata] = {
    "goerli": ChainMetadata(
        name="goerli",
        chain_id=5,
        domain_id=5,
        rpc_url="https://rpc.ankr.com/eth_goerli",
        native_token=ETHEREUM_NATIVE_TOKEN,
    ),
    "sepolia": ChainMetadata(
        name="sepolia",
        chain_id=11155111,
        domain_id=11155111,
        rpc_url="https://rpc.sepolia.org",
        native_token=ETHEREUM_NATIVE_TOKEN,
    ),
    "alfajores": ChainMetadata(
        name="alfajores",
        chain_id=44787,
        domain_id=44787,
        rpc_url="https://alfajores-forno.celo-testnet.org",
        native_token=TokenMetadata(name="CELO", symbol="CELO", decimals=18),
    ),
    "fuji": ChainMetadata(
        name="fuji",
        chain_id=43113,
        domain_id=43113,
        rpc_url="https://api.avax-test.network/ext/bc/C/rpc",
        native_token=TokenMetadata(name="Avalanche", symbol="AVAX", decimals=18),
    ),
    "mumbai": ChainMetadata(
        name="mumbai",
        chain_id=80001,
        domain_id=80001,
        rpc_url="https://rpc-mumbai.maticvigil.com",
        native_token=TokenMetadata(name="MATIC", symbol="MATIC", decimals=18),
    ),
    "bsctestnet": ChainMetadata(
        name="bsctestnet",
        chain_id=97,
        domain_id=97,
        rpc_url="https://data-seed-prebsc-1-s3.binance.org:8545",
        native_token=TokenMetadata(name="BNB", symbol="BNB", decimals=18),
    ),
}

# Hyperlane testnet core deployment (same addresses on every testnet via CREATE2).
# multisigIsm is left unset: routers then fall back to the mailbox default ISM.
_TESTNET_MAILBOX = "0xCC737a94FecaeC165AbCf12dED095BB13F037685"
_TESTNET_IGP = "0xF90cB82a76492614D07B82a7658917f3aC811Ac1"

HYPERLANE_ADDRESSES: dict[str, HyperlaneAddresses] = {
    chain: HyperlaneAddresses(
        mailbox=_TESTNET_MAILBOX,
        default_ism_interchain_gas_paymaster=_TESTNET_IGP,
    )
    for chain in CHAIN_METADATA
}

# Default artifact locations
DEFAULT_ARTIFACTS_DIR = "./artifacts/"
WARP_TOKEN_ADDRESSES_FILE = "warp-token-addresses.json"
