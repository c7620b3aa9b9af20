"""Async transaction helpers for warp-route-deploy."""

import logging
from typing import Any, cast

from eth_account.signers.local import LocalAccount
from eth_typing import ChecksumAddress
from web3 import AsyncWeb3
from web3.contract.async_contract import AsyncContractConstructor, AsyncContractFunction

from ._exceptions import TransactionRevertedError
from .types import GasOptions

logger = logging.getLogger(__name__)

# Type alias for transaction params
TxParams = dict[str, int | str]

# Default gas limits for operations
DEFAULT_GAS_DEPLOY = 4_000_000
DEFAULT_GAS_CALL = 300_000
DEFAULT_GAS_ENROLL = 600_000
DEFAULT_PRIORITY_FEE = 1_000_000_000  # 1 gwei


def to_bytes32(address: str) -> bytes:
    """Left-pad a 20 byte address to the bytes32 form routers are enrolled with."""
    raw = AsyncWeb3.to_bytes(hexstr=address)
    if len(raw) != 20:
        raise ValueError(f"Expected a 20 byte address, got {len(raw)} bytes: {address}")
    return raw.rjust(32, b"\x00")


async def build_tx_params(
    w3: AsyncWeb3,
    sender: ChecksumAddress | str,
    chain_id: int,
    default_gas: int,
    gas_options: GasOptions | None = None,
    contract_call: AsyncContractFunction | AsyncContractConstructor | None = None,
) -> TxParams:
    """
    Build transaction parameters with gas options.

    Handles:
    - Gas estimation (with 20% buffer) when estimate_gas=True
    - EIP-1559 type 2 transactions when max_fee_per_gas is set
    - Fallback to legacy transactions otherwise

    Args:
        w3: AsyncWeb3 instance
        sender: Sender address
        chain_id: Chain ID
        default_gas: Default gas limit if not estimating
        gas_options: Optional gas configuration
        contract_call: Contract call or constructor for estimation (required if estimate_gas=True)

    Returns:
        Transaction parameters dict
    """
    nonce = await w3.eth.get_transaction_count(cast(ChecksumAddress, sender))

    tx_params: TxParams = {
        "from": sender,
        "nonce": nonce,
        "chainId": chain_id,
    }

    opts = gas_options or GasOptions()

    # Determine gas limit
    if opts.gas_limit is not None:
        tx_params["gas"] = opts.gas_limit
    elif opts.estimate_gas and contract_call is not None:
        estimated = await contract_call.estimate_gas({"from": sender})
        tx_params["gas"] = int(estimated * 1.2)  # 20% buffer
    else:
        tx_params["gas"] = default_gas

    # EIP-1559 or legacy
    if opts.max_fee_per_gas is not None:
        tx_params["type"] = "0x2"
        tx_params["maxFeePerGas"] = opts.max_fee_per_gas
        tx_params["maxPriorityFeePerGas"] = (
            opts.max_priority_fee_per_gas if opts.max_priority_fee_per_gas is not None else DEFAULT_PRIORITY_FEE
        )

    return tx_params


async def send_transaction(
    w3: AsyncWeb3,
    account: LocalAccount,
    chain_name: str,
    contract_call: AsyncContractFunction | AsyncContractConstructor,
    default_gas: int,
    gas_options: GasOptions | None = None,
) -> Any:
    """
    Sign, send and wait for a contract call.

    Returns:
        The transaction receipt

    Raises:
        TransactionRevertedError: If the receipt status is 0
    """
    chain_id = await w3.eth.chain_id
    tx_params = await build_tx_params(
        w3,
        account.address,
        chain_id,
        default_gas,
        gas_options=gas_options,
        contract_call=contract_call,
    )
    tx = await contract_call.build_transaction(tx_params)

    signed = account.sign_transaction(tx)
    tx_hash = await w3.eth.send_raw_transaction(signed.raw_transaction)
    logger.debug("Sent transaction %s on %s", AsyncWeb3.to_hex(tx_hash), chain_name)

    receipt = await w3.eth.wait_for_transaction_receipt(tx_hash)
    if receipt["status"] == 0:
        raise TransactionRevertedError(chain_name, AsyncWeb3.to_hex(tx_hash))
    return receipt


async def deploy_contract(
    w3: AsyncWeb3,
    account: LocalAccount,
    chain_name: str,
    abi: list[dict[str, Any]],
    bytecode: str,
    constructor_args: tuple[Any, ...] = (),
    gas_options: GasOptions | None = None,
) -> tuple[ChecksumAddress, str]:
    """
    Deploy a contract from its ABI and creation bytecode.

    Returns:
        (contract address, deployment transaction hash)
    """
    factory = w3.eth.contract(abi=abi, bytecode=bytecode)
    constructor = factory.constructor(*constructor_args)
    receipt = await send_transaction(
        w3,
        account,
        chain_name,
        constructor,
        DEFAULT_GAS_DEPLOY,
        gas_options=gas_options,
    )
    address = AsyncWeb3.to_checksum_address(receipt["contractAddress"])
    return address, AsyncWeb3.to_hex(receipt["transactionHash"])
