"""Exception hierarchy for the transaction insight pipeline."""


class TxInsightError(Exception):
    """Base class for all errors raised by tx_insight."""


class DecodeError(TxInsightError):
    """Call data matched an ABI fragment but could not be decoded."""


class CompletionError(TxInsightError):
    """The completion service failed to produce a summary."""


class TransportError(TxInsightError):
    """A network collaborator (explorer, profile or insight API) failed."""


class InvalidRequestError(TxInsightError):
    """A wallet-plugin request is missing required parameters."""


class MethodNotFoundError(TxInsightError):
    """A JSON-RPC method is not handled by the plugin."""
