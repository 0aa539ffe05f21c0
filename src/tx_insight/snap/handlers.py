"""
Wallet-plugin entry points.

on_transaction gathers profile, approval-list and summary insights for a
pending transaction; on_rpc_request manages the plugin state.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

from ..constants import VERIFICATION_URL
from ..errors import InvalidRequestError, MethodNotFoundError
from ..models import PendingTransaction
from .client import InsightApiClient
from .state import PluginState
from .ui import Copyable, Divider, Heading, Panel, Text

logger = logging.getLogger(__name__)


def not_unique_human_panel() -> Panel:
    return Panel((
        Heading('Not a unique human!!'),
        Text('Please prove that you are a unique human.'),
        Copyable(VERIFICATION_URL),
    ))


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def render_insights(lens_profile: Any, approved_address_list: Any, gpt_completion: Any) -> Panel:
    profile = lens_profile.get('data') if isinstance(lens_profile, dict) else None
    handle = profile.get('handle') if isinstance(profile, dict) else None
    summary = gpt_completion.get('data') if isinstance(gpt_completion, dict) else None

    return Panel((
        Heading('Lens Insights🌿'),
        Divider(),
        Text('LensProfile:'),
        Text(handle or 'No default profile'),
        Text('LensFollowingExecution:'),
        Text(_as_text(approved_address_list)),
        Heading('GPT Insights🌐'),
        Divider(),
        Text(_as_text(summary)),
    ))


async def on_transaction(
    transaction: PendingTransaction,
    chain_id: Optional[str],
    state: PluginState,
    client: InsightApiClient
) -> Dict[str, Any]:
    """
    Handle an incoming transaction, and return any insights.

    The three lookups run concurrently and must all succeed; the first failure
    is raised and the remaining lookups are left to finish on their own.

    Args:
        transaction: Pending transaction from the wallet host
        chain_id: CAIP-2 chain id (e.g. "eip155:1")
        state: Plugin state
        client: Insight API client

    Returns:
        {'content': panel dict}
    """
    if not state.is_verified:
        logger.info("World ID not set, asking the user to verify")
        return {'content': not_unique_human_panel().to_dict()}

    wallet_address = transaction.from_address
    contract_address = transaction.to
    input_data = transaction.data
    if not wallet_address or not contract_address or not input_data or not chain_id:
        raise InvalidRequestError('Missing required parameters')

    extracted_chain_id = chain_id.split(':')[-1]

    lens_profile, approved_address_list, gpt_completion = await asyncio.gather(
        asyncio.to_thread(client.get_profile, wallet_address),
        asyncio.to_thread(
            client.get_approved_address_list,
            wallet_address,
            contract_address,
            input_data,
            extracted_chain_id,
        ),
        asyncio.to_thread(client.get_completion, contract_address, input_data, extracted_chain_id),
    )

    return {'content': render_insights(lens_profile, approved_address_list, gpt_completion).to_dict()}


def on_rpc_request(method: str, params: Optional[Dict[str, Any]], state: PluginState) -> Any:
    """
    Handle JSON-RPC requests sent to the plugin.

    Args:
        method: "setData" or "getData"
        params: Request params ({"worldId": ...} for setData)
        state: Plugin state

    Returns:
        None for setData, the state snapshot for getData

    Raises:
        MethodNotFoundError: For any other method
    """
    if method == 'setData':
        state.update((params or {}).get('worldId'))
        return None
    if method == 'getData':
        return state.snapshot()
    raise MethodNotFoundError('Method not found.')
