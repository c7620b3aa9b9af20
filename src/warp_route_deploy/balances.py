"""Pre-flight signer balance checks."""

import logging
from collections.abc import Iterable

from ._exceptions import InsufficientBalanceError
from .provider import MultiProvider

logger = logging.getLogger(__name__)

# Any non-zero balance passes by default
DEFAULT_MIN_BALANCE = 1


async def assert_balances(
    multi_provider: MultiProvider,
    chains: Iterable[str],
    min_balance: int = DEFAULT_MIN_BALANCE,
) -> None:
    """
    Check the signer holds at least min_balance wei on every chain.

    Chains are checked in order, each once. Must run before any
    transaction is sent.

    Raises:
        InsufficientBalanceError: On the first chain below min_balance
    """
    address = multi_provider.signer.address
    for chain_name in dict.fromkeys(chains):
        w3 = multi_provider.get_provider(chain_name)
        balance = await w3.eth.get_balance(address)
        if balance < min_balance:
            raise InsufficientBalanceError(chain_name, balance, min_balance)
        logger.info("Signer %s has %d wei on %s", address, balance, chain_name)
