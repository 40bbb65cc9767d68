"""Server-rendered wallet dashboard and transaction history."""

__version__ = "0.1.0"
