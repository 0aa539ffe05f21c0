"""Shared fixtures built on the ERC-20 test contract."""

import json

import pytest

from tx_insight.abi import ABI
from tx_insight.models import ContractDescriptor

from .helpers import ERC20_ABI, TOKEN_SOURCE


@pytest.fixture
def erc20_abi_json() -> str:
    return json.dumps(ERC20_ABI)


@pytest.fixture
def token_contract(erc20_abi_json) -> ContractDescriptor:
    return ContractDescriptor(
        name="Token",
        source_text=TOKEN_SOURCE,
        abi=tuple(ABI(ERC20_ABI).fragments()),
        abi_json=erc20_abi_json,
    )
