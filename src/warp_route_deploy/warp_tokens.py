"""
Static warp route configs used when no --config file is given.

Chain names must be known to the chain registry. Infrastructure
addresses (mailbox, interchain_gas_paymaster, interchain_security_module)
may be set per token; unset ones come from the registry.
"""

# One collateral token on goerli bridged to a synthetic on alfajores.
# For a native base token use type "native" and omit the address.
WARP_ROUTE_CONFIG = {
    "base": {
        "chain_name": "goerli",
        "type": "collateral",
        "address": "0x07865c6E87B9F70255377e024ace6630C1Eaa37F",
    },
    "synthetics": [
        # name, symbol and total_supply default to the base token's
        {"chain_name": "alfajores"},
    ],
}

# Two collateral tokens on goerli and fuji backing one synthetic on alfajores.
WARP_ROUTE_MULTI_COLLATERAL_CONFIG = {
    "bases": [
        {
            "chain_name": "goerli",
            "type": "collateral",
            "address": "0x07865c6E87B9F70255377e024ace6630C1Eaa37F",
        },
        {
            "chain_name": "fuji",
            "type": "collateral",
            "address": "0x5425890298aed601595a70AB815c96711a31Bc65",
        },
    ],
    "synthetic": {"chain_name": "alfajores"},
}
