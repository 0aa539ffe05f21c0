"""Structured models used by the transaction insight pipeline."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class AbiValue:
    """Base class for decoded ABI values. `abi_type` is the canonical type string."""
    abi_type: str

    def render(self) -> str:
        raise NotImplementedError

    def to_json(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class IntegerValue(AbiValue):
    value: int

    def render(self) -> str:
        return str(self.value)

    def to_json(self) -> Any:
        # JSON consumers lose precision above 2**53
        return str(self.value)


@dataclass(frozen=True)
class FixedValue(AbiValue):
    value: Decimal

    def render(self) -> str:
        return str(self.value)

    def to_json(self) -> Any:
        return str(self.value)


@dataclass(frozen=True)
class AddressValue(AbiValue):
    value: str

    def render(self) -> str:
        return self.value

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class BoolValue(AbiValue):
    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class BytesValue(AbiValue):
    value: bytes

    def render(self) -> str:
        return '0x' + self.value.hex()

    def to_json(self) -> Any:
        return self.render()


@dataclass(frozen=True)
class StringValue(AbiValue):
    value: str

    def render(self) -> str:
        return self.value

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ArrayValue(AbiValue):
    items: Tuple[AbiValue, ...]

    def render(self) -> str:
        return ",".join(item.render() for item in self.items)

    def to_json(self) -> Any:
        return [item.to_json() for item in self.items]


@dataclass(frozen=True)
class TupleValue(AbiValue):
    items: Tuple[AbiValue, ...]
    names: Tuple[str, ...] = ()

    def render(self) -> str:
        return ",".join(item.render() for item in self.items)

    def to_json(self) -> Any:
        if self.names and all(self.names):
            return {name: item.to_json() for name, item in zip(self.names, self.items)}
        return [item.to_json() for item in self.items]


@dataclass(frozen=True)
class FunctionFragment:
    """A single `type == "function"` entry of a contract ABI."""
    name: str
    input_types: Tuple[str, ...]
    output_types: Tuple[str, ...]
    state_mutability: str
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.input_types)})"


@dataclass(frozen=True)
class ContractDescriptor:
    """Verified contract metadata as returned by a block explorer."""
    name: str
    source_text: str
    abi: Tuple[FunctionFragment, ...]
    abi_json: str = ""


@dataclass(frozen=True)
class DecodedCall:
    """Result of matching call data against an ABI."""
    function_name: str = ""
    arguments: Tuple[AbiValue, ...] = ()
    matched_fragment: Optional[FunctionFragment] = None

    @property
    def is_matched(self) -> bool:
        return bool(self.function_name)

    def render_arguments(self) -> str:
        return ",".join(argument.render() for argument in self.arguments)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'function_name': self.function_name,
            'arguments': [argument.to_json() for argument in self.arguments],
            'function_abi': self.matched_fragment.raw if self.matched_fragment else {},
        }


@dataclass(frozen=True)
class PendingTransaction:
    """Transaction fields supplied by the wallet host."""
    from_address: Optional[str] = None
    to: Optional[str] = None
    data: Optional[str] = None

    @classmethod
    def from_dict(cls, transaction: Dict[str, Any]) -> "PendingTransaction":
        return cls(
            from_address=transaction.get('from'),
            to=transaction.get('to'),
            data=transaction.get('data'),
        )


__all__ = [
    "AbiValue",
    "AddressValue",
    "ArrayValue",
    "BoolValue",
    "BytesValue",
    "ContractDescriptor",
    "DecodedCall",
    "FixedValue",
    "FunctionFragment",
    "IntegerValue",
    "PendingTransaction",
    "StringValue",
    "TupleValue",
]
