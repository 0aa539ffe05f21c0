"""
ABI handling for the transaction insight pipeline.

This module provides ABI parsing, function selector utilities and call data
decoding into tagged ABI values.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple, Union

from eth_abi.exceptions import DecodingError, ParseError
from eth_utils import keccak
from web3 import Web3

from .errors import DecodeError
from .models import (
    AbiValue,
    AddressValue,
    ArrayValue,
    BoolValue,
    BytesValue,
    DecodedCall,
    FixedValue,
    FunctionFragment,
    IntegerValue,
    StringValue,
    TupleValue,
)

logger = logging.getLogger(__name__)

_ARRAY_SUFFIX = re.compile(r'^(.*)\[(\d*)\]$')


def function_selector(signature: str) -> str:
    """
    Convert a function signature to a function selector.

    Args:
        signature: Function signature (e.g., "transfer(address,uint256)")

    Returns:
        Function selector as hex string (e.g., "0xa9059cbb")
    """
    return "0x" + keccak(text=signature).hex()[:8]


class ABI:
    """
    Class to interact with contract ABI.
    Handles function selector calculation, ABI lookups and calldata decoding.
    """

    def __init__(self, abi: list):
        """
        Initialize with an ABI.

        Args:
            abi: Contract ABI as a list of dictionaries
        """
        self.abi = abi
        self.w3 = Web3()

    @classmethod
    def from_json(cls, abi_json: Union[str, list]) -> "ABI":
        """
        Build an ABI helper from its serialized form.

        Args:
            abi_json: ABI as a JSON string, or an already parsed list

        Returns:
            ABI instance

        Raises:
            DecodeError: If the ABI is not a JSON array
        """
        if isinstance(abi_json, str):
            try:
                abi = json.loads(abi_json)
            except json.JSONDecodeError as e:
                raise DecodeError(f"Invalid ABI JSON: {e}") from e
        else:
            abi = abi_json

        if not isinstance(abi, list):
            raise DecodeError(f"ABI must be a list of fragments, got {type(abi).__name__}")

        return cls(abi)

    def _param_abi_type_to_str(self, param: Dict[str, Any]) -> str:
        """
        Recursively convert ABI input types into signature strings.

        Args:
            param: Parameter definition from ABI

        Returns:
            Type string for signature (e.g., "address", "(uint256,address)[]")
        """
        type_str = param["type"]
        if type_str.startswith("tuple"):
            inner = ",".join(
                self._param_abi_type_to_str(p) for p in param["components"]
            )
            return f"({inner})" + type_str[len("tuple"):]
        return type_str

    def _to_fragment(self, item: Dict[str, Any]) -> FunctionFragment:
        return FunctionFragment(
            name=item["name"],
            input_types=tuple(self._param_abi_type_to_str(p) for p in item.get("inputs", [])),
            output_types=tuple(self._param_abi_type_to_str(p) for p in item.get("outputs", [])),
            state_mutability=item.get("stateMutability", "nonpayable"),
            raw=item,
        )

    def fragments(self) -> List[FunctionFragment]:
        """
        Return every function fragment in ABI order.

        Entries whose signature cannot be built (missing name/type/components)
        are skipped.
        """
        fragments = []
        for item in self.abi:
            if not isinstance(item, dict) or item.get("type", "function") != "function":
                continue
            try:
                fragments.append(self._to_fragment(item))
            except (KeyError, TypeError) as e:
                logger.debug(f"Skipping malformed ABI entry {item.get('name')!r}: {e}")
        return fragments

    def find_function_by_selector(self, selector: str) -> Optional[FunctionFragment]:
        """
        Find function by selector in ABI.

        The selector is the first 4 bytes of the keccak256 hash of the function signature,
        e.g., keccak256("transfer(address,uint256)") = '0xa9059cbb'.

        Args:
            selector: Function selector as hex string

        Returns:
            The matching FunctionFragment, or None
        """
        for fragment in self.fragments():
            if function_selector(fragment.signature) == selector.lower():
                return fragment
        return None

    def _convert_decoded_value(self, value: Any, type_info: Dict[str, Any]) -> AbiValue:
        """
        Recursively convert a decoded ABI value into its tagged variant.

        Args:
            value: Raw decoded value from web3
            type_info: ABI type information dict with 'type' and optional 'components'

        Returns:
            AbiValue matching the ABI type category
        """
        abi_type = self._param_abi_type_to_str(type_info)
        type_str = type_info["type"]

        # Arrays (uint256[], tuple[2], bytes32[][], ...): strip the outermost dimension
        array_match = _ARRAY_SUFFIX.match(type_str)
        if array_match:
            element_info = dict(type_info, type=array_match.group(1))
            return ArrayValue(
                abi_type,
                tuple(self._convert_decoded_value(item, element_info) for item in value),
            )

        if type_str == "tuple":
            components = type_info.get("components", [])
            return TupleValue(
                abi_type,
                tuple(
                    self._convert_decoded_value(item, component)
                    for item, component in zip(value, components)
                ),
                tuple(component.get("name", "") for component in components),
            )

        if type_str == "address":
            return AddressValue(abi_type, value)
        if type_str == "bool":
            return BoolValue(abi_type, value)
        if type_str == "string":
            return StringValue(abi_type, value)
        if type_str.startswith("bytes"):
            return BytesValue(abi_type, bytes(value))
        if type_str.startswith(("uint", "int")):
            return IntegerValue(abi_type, value)
        if type_str.startswith(("ufixed", "fixed")):
            return FixedValue(abi_type, value)

        raise DecodeError(f"Unsupported ABI type: {type_str}")

    def decode_arguments(self, fragment: FunctionFragment, calldata: str) -> Tuple[AbiValue, ...]:
        """
        Decode the argument part of the calldata (selector already removed).

        Args:
            fragment: Matched function fragment
            calldata: Hex string without the 4-byte selector and without 0x prefix

        Returns:
            One AbiValue per declared input

        Raises:
            DecodeError: If the data does not decode against the fragment's inputs
        """
        inputs = fragment.raw.get("inputs", [])
        try:
            decoded_values = self.w3.codec.decode(list(fragment.input_types), bytes.fromhex(calldata))
            arguments = tuple(
                self._convert_decoded_value(value, input_def)
                for value, input_def in zip(decoded_values, inputs)
            )
        except (DecodingError, ParseError, ValueError, TypeError, KeyError) as e:
            raise DecodeError(f"Failed to decode arguments for {fragment.signature}: {e}") from e

        if len(arguments) != len(fragment.input_types):
            raise DecodeError(
                f"Decoded {len(arguments)} arguments for {fragment.signature}, "
                f"expected {len(fragment.input_types)}"
            )
        return arguments


def resolve_function_call(call_data: str, abi_json: Union[str, list, ABI]) -> DecodedCall:
    """
    Determine which function the call data invokes and decode its arguments.

    Args:
        call_data: Hex encoded call data, first 4 bytes are the selector
        abi_json: Contract ABI (JSON string, parsed list, or ABI helper)

    Returns:
        DecodedCall. An empty DecodedCall (no name, no arguments) when no
        fragment matches the selector.

    Raises:
        DecodeError: If the ABI is not parseable, or the matched fragment
            does not decode the call data
    """
    abi = abi_json if isinstance(abi_json, ABI) else ABI.from_json(abi_json)

    hex_data = call_data[2:] if call_data[:2].lower() == "0x" else call_data
    if len(hex_data) < 8:
        logger.info(f"Call data too short to contain a selector: {call_data!r}")
        return DecodedCall()

    selector = "0x" + hex_data[:8].lower()
    fragment = abi.find_function_by_selector(selector)
    if fragment is None:
        logger.info(f"No ABI function matches selector {selector}")
        return DecodedCall()

    arguments = abi.decode_arguments(fragment, hex_data[8:])
    logger.debug(f"Decoded {fragment.signature} with {len(arguments)} arguments")

    return DecodedCall(
        function_name=fragment.name,
        arguments=arguments,
        matched_fragment=fragment,
    )
