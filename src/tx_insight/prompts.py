"""
Prompt generation for transaction summaries.

The prompt is a fixed list of labeled fields followed by a single instruction
sentence; the completion service answers in free text.
"""

import json

from .constants import SUMMARY_INSTRUCTION
from .models import DecodedCall


def build_summarization_prompt(
    contract_address: str,
    contract_name: str,
    function_source_code: str,
    decoded_call: DecodedCall
) -> str:
    """
    Build the summarization prompt for a decoded call.

    Args:
        contract_address: Address of the called contract
        contract_name: Verified contract name
        function_source_code: Extracted snippet ("" when unavailable)
        decoded_call: Result of resolve_function_call

    Returns:
        Prompt text
    """
    fragment = decoded_call.matched_fragment
    function_abi_string = json.dumps(
        fragment.raw if fragment else {},
        separators=(",", ":"),
        ensure_ascii=False
    )

    return (
        f"・ContractAddress: {contract_address}\n"
        f"・ContractName: {contract_name}\n"
        f"・FunctionName: {decoded_call.function_name}\n"
        f"・FunctionArgs: {decoded_call.render_arguments()}\n"
        f"・FunctionABI: {function_abi_string}\n"
        f"・FunctionSourceCode: {function_source_code}\n"
        f"{SUMMARY_INSTRUCTION}"
    )
