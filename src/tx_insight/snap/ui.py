"""Panel components rendered by the wallet host."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Component:
    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class Heading(Component):
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'heading', 'value': self.value}


@dataclass(frozen=True)
class Text(Component):
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'text', 'value': self.value}


@dataclass(frozen=True)
class Copyable(Component):
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'copyable', 'value': self.value}


@dataclass(frozen=True)
class Divider(Component):
    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'divider'}


@dataclass(frozen=True)
class Panel(Component):
    children: Tuple[Component, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'panel', 'children': [child.to_dict() for child in self.children]}
