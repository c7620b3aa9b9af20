"""Custom exceptions for warp-route-deploy."""


class WarpDeployError(Exception):
    """Base exception for warp-route-deploy."""


class ConfigurationError(WarpDeployError):
    """Invalid runtime configuration (missing RPC URL, bad private key, etc.)."""


class WarpConfigError(WarpDeployError):
    """Warp route config failed schema validation."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Invalid warp config: {path} => {message}")
        self.path = path
        self.message = message


class ChainNotSupportedError(WarpDeployError):
    """Chain is not known to the registry."""

    def __init__(self, chain_name: str) -> None:
        super().__init__(f"Chain {chain_name} is not supported")
        self.chain_name = chain_name


class UnsupportedTokenTypeError(WarpDeployError):
    """Token type cannot be handled at this point of the deployment."""

    def __init__(self, token_type: object) -> None:
        super().__init__(f"Unsupported token type: {token_type}")
        self.token_type = token_type


class InsufficientBalanceError(WarpDeployError):
    """Signer does not hold enough native balance on a chain."""

    def __init__(self, chain_name: str, balance: int, required: int) -> None:
        super().__init__(
            f"Insufficient balance on {chain_name}: have {balance} wei, need at least {required} wei"
        )
        self.chain_name = chain_name
        self.balance = balance
        self.required = required


class TransactionError(WarpDeployError):
    """Transaction failed."""


class TransactionRevertedError(TransactionError):
    """Transaction reverted on-chain."""

    def __init__(self, chain_name: str, tx_hash: str) -> None:
        super().__init__(f"Transaction {tx_hash} reverted on {chain_name}")
        self.chain_name = chain_name
        self.tx_hash = tx_hash
