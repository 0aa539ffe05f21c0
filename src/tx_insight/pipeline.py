"""
End-to-end transaction explanation.

Flow:
1. Fetch verified contract details from the chain's explorer
2. Resolve the called function and decode its arguments
3. Extract the function's source snippet
4. Ask the completion service what the call does
"""

import logging

from .abi import resolve_function_call
from .clients import CompletionClient, ContractMetadataClient
from .config import Settings
from .constants import NOT_DECODED_WARNING, NOT_VERIFIED_WARNING
from .errors import DecodeError
from .prompts import build_summarization_prompt
from .source_code import extract_source_snippet

logger = logging.getLogger(__name__)


class TransactionExplainer:
    """Explain a pending contract call in natural language."""

    def __init__(
        self,
        metadata_client: ContractMetadataClient,
        completion_client: CompletionClient
    ):
        self.metadata_client = metadata_client
        self.completion_client = completion_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "TransactionExplainer":
        return cls(ContractMetadataClient(settings), CompletionClient(settings))

    def explain(self, contract_address: str, input_data: str, chain_id: int) -> str:
        """
        Produce the explanation text for a call.

        Unverified contracts and undecodable calls are answered with a warning
        string and the completion service is not called.

        Args:
            contract_address: Called contract
            input_data: Hex call data
            chain_id: Chain ID

        Returns:
            Completion text, or a warning string

        Raises:
            TransportError: If the explorer cannot be reached
            CompletionError: If the completion service fails
        """
        logger.info(f"Explaining call to {contract_address} on chain {chain_id}")

        try:
            contract = self.metadata_client.fetch_contract_details(chain_id, contract_address)
        except DecodeError as e:
            logger.warning(f"Unusable ABI for {contract_address}: {e}")
            return NOT_DECODED_WARNING
        if contract is None:
            return NOT_VERIFIED_WARNING

        try:
            decoded_call = resolve_function_call(input_data, contract.abi_json)
        except DecodeError as e:
            logger.warning(f"Could not decode call to {contract_address}: {e}")
            return NOT_DECODED_WARNING

        if not decoded_call.is_matched:
            logger.warning(f"No ABI function matches the call to {contract_address}")
            return NOT_DECODED_WARNING

        snippet = extract_source_snippet(contract.source_text, decoded_call.function_name)
        prompt = build_summarization_prompt(contract_address, contract.name, snippet, decoded_call)

        return self.completion_client.request_summary(prompt)
