"""
Contract ABIs used by warp-route-deploy.

Router ABIs come from the compiled artifacts passed to the deployer;
only the ERC-20 metadata reads are needed up front.
"""

# ERC-20 metadata ABI
ERC20_METADATA_ABI = [
    {
        "type": "function",
        "name": "name",
        "inputs": [],
        "outputs": [{"type": "string"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "symbol",
        "inputs": [],
        "outputs": [{"type": "string"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "decimals",
        "inputs": [],
        "outputs": [{"type": "uint8"}],
        "stateMutability": "view",
    },
]

# Router functions called after deployment, shared by
# HypERC20, HypERC20Collateral and HypNative.
ROUTER_FUNCTION_NAMES = (
    "initialize",
    "setInterchainSecurityModule",
    "enrollRemoteRouters",
    "transferOwnership",
)
