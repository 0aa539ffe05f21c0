"""Tests for ABI function resolution and calldata decoding."""

import json

import pytest
from eth_abi import encode

from tx_insight.abi import ABI, function_selector, resolve_function_call
from tx_insight.errors import DecodeError
from tx_insight.models import (
    AddressValue,
    ArrayValue,
    BoolValue,
    BytesValue,
    IntegerValue,
    StringValue,
    TupleValue,
)

from .helpers import ERC20_ABI, RECIPIENT, encode_transfer

ORDER_ABI = [
    {
        "type": "function",
        "name": "submit",
        "inputs": [
            {
                "name": "order",
                "type": "tuple",
                "components": [
                    {"name": "amount", "type": "uint256"},
                    {"name": "maker", "type": "address"},
                ],
            },
            {"name": "ids", "type": "uint256[]"},
        ],
        "outputs": [],
        "stateMutability": "payable",
    },
    {
        "type": "function",
        "name": "setInfo",
        "inputs": [
            {"name": "flag", "type": "bool"},
            {"name": "tag", "type": "bytes32"},
            {"name": "label", "type": "string"},
            {"name": "blob", "type": "bytes"},
        ],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
]


class TestSelectors:
    """Tests for selector computation and lookup."""

    def test_known_selectors(self) -> None:
        """ERC-20 selectors match their well-known values."""
        assert function_selector("transfer(address,uint256)") == "0xa9059cbb"
        assert function_selector("approve(address,uint256)") == "0x095ea7b3"

    def test_tuple_inputs_use_canonical_signature(self) -> None:
        """Tuple inputs expand to their component types."""
        fragments = ABI(ORDER_ABI).fragments()
        assert fragments[0].signature == "submit((uint256,address),uint256[])"

    def test_events_are_ignored(self) -> None:
        """Only function entries become fragments."""
        names = [fragment.name for fragment in ABI(ERC20_ABI).fragments()]
        assert names == ["transfer", "approve"]

    def test_malformed_entries_are_skipped(self) -> None:
        """Entries without an input type cannot be matched and are skipped."""
        abi = ABI([{"type": "function", "name": "broken", "inputs": [{"name": "x"}]}] + ERC20_ABI)
        assert [fragment.name for fragment in abi.fragments()] == ["transfer", "approve"]

    def test_find_function_by_selector_is_case_insensitive(self) -> None:
        fragment = ABI(ERC20_ABI).find_function_by_selector("0xA9059CBB")
        assert fragment is not None
        assert fragment.name == "transfer"
        assert fragment.state_mutability == "nonpayable"
        assert fragment.output_types == ("bool",)


class TestResolveFunctionCall:
    """Tests for resolve_function_call."""

    def test_transfer(self, erc20_abi_json) -> None:
        """transfer call data decodes to an address and an integer."""
        decoded = resolve_function_call(encode_transfer(amount=1000), erc20_abi_json)

        assert decoded.function_name == "transfer"
        assert len(decoded.arguments) == 2
        assert isinstance(decoded.arguments[0], AddressValue)
        assert decoded.arguments[0].value.lower() == RECIPIENT
        assert decoded.arguments[1] == IntegerValue("uint256", 1000)
        assert decoded.matched_fragment.raw == ERC20_ABI[0]

    def test_accepts_parsed_abi(self) -> None:
        decoded = resolve_function_call(encode_transfer(), ERC20_ABI)
        assert decoded.function_name == "transfer"

    def test_unknown_selector_returns_empty_call(self, erc20_abi_json) -> None:
        """A selector with no matching fragment is not an error."""
        decoded = resolve_function_call("0xdeadbeef" + "00" * 64, erc20_abi_json)

        assert decoded.function_name == ""
        assert decoded.arguments == ()
        assert decoded.matched_fragment is None
        assert not decoded.is_matched

    @pytest.mark.parametrize("call_data", ["", "0x", "0xa905", "not hex at all"])
    def test_short_or_garbage_call_data_returns_empty_call(self, erc20_abi_json, call_data) -> None:
        decoded = resolve_function_call(call_data, erc20_abi_json)
        assert decoded.function_name == ""

    def test_truncated_arguments_raise_decode_error(self, erc20_abi_json) -> None:
        """A matching selector with missing argument bytes fails to decode."""
        with pytest.raises(DecodeError):
            resolve_function_call(encode_transfer()[:10 + 64], erc20_abi_json)

    def test_non_hex_arguments_raise_decode_error(self, erc20_abi_json) -> None:
        with pytest.raises(DecodeError):
            resolve_function_call("0xa9059cbb" + "zz" * 64, erc20_abi_json)

    def test_invalid_abi_json_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            resolve_function_call(encode_transfer(), "{not json")

    def test_non_list_abi_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            resolve_function_call(encode_transfer(), json.dumps({"abi": ERC20_ABI}))

    def test_is_deterministic(self, erc20_abi_json) -> None:
        call_data = encode_transfer(amount=42)
        assert resolve_function_call(call_data, erc20_abi_json) == resolve_function_call(call_data, erc20_abi_json)


class TestTaggedValues:
    """Decoded arguments are tagged by ABI category."""

    def test_tuple_and_array(self) -> None:
        maker = "0x" + "ab" * 20
        body = encode(["(uint256,address)", "uint256[]"], [(5, maker), [1, 2, 3]])
        call_data = function_selector("submit((uint256,address),uint256[])") + body.hex()

        decoded = resolve_function_call(call_data, ORDER_ABI)

        order, ids = decoded.arguments
        assert isinstance(order, TupleValue)
        assert order.abi_type == "(uint256,address)"
        assert order.names == ("amount", "maker")
        assert order.items[0] == IntegerValue("uint256", 5)
        assert order.items[1].value.lower() == maker
        assert isinstance(ids, ArrayValue)
        assert ids.abi_type == "uint256[]"
        assert [item.value for item in ids.items] == [1, 2, 3]
        assert ids.render() == "1,2,3"
        assert order.to_json()["amount"] == "5"

    def test_bool_bytes_and_string(self) -> None:
        body = encode(["bool", "bytes32", "string", "bytes"], [True, b"\x01" * 32, "hello", b"\xca\xfe"])
        call_data = function_selector("setInfo(bool,bytes32,string,bytes)") + body.hex()

        decoded = resolve_function_call(call_data, ORDER_ABI)

        flag, tag, label, blob = decoded.arguments
        assert flag == BoolValue("bool", True)
        assert isinstance(tag, BytesValue) and tag.value == b"\x01" * 32
        assert label == StringValue("string", "hello")
        assert blob.render() == "0xcafe"
        assert decoded.render_arguments() == f"true,0x{'01' * 32},hello,0xcafe"
