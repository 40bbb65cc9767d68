"""Package level exceptions."""


class WalletViewError(Exception):
    """Base class for walletview errors."""


class InvalidSessionTokenError(WalletViewError):
    """Raised when a session token cannot be decoded into a user id."""


class InvalidTransactionError(WalletViewError):
    """Raised when a stored transaction cannot be shown, e.g. a negative amount."""
