"""Wallet-plugin side of the insight flow."""

from .client import InsightApiClient
from .handlers import on_rpc_request, on_transaction
from .state import PluginState

__all__ = [
    "InsightApiClient",
    "PluginState",
    "on_rpc_request",
    "on_transaction",
]
