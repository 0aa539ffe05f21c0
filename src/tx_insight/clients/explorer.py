"""Contract metadata lookups against Etherscan-compatible explorers."""

import logging
from typing import Optional, Tuple

import requests

from ..abi import ABI
from ..config import Settings
from ..constants import EXPLORER_ENDPOINTS
from ..errors import TransportError
from ..models import ContractDescriptor
from ..source_code import flatten_source_code

logger = logging.getLogger(__name__)


class ContractMetadataClient:
    """Fetch verified contract name, source and ABI for a (chain, address) pair."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    def get_api_endpoint(self, chain_id: int) -> Optional[Tuple[str, dict]]:
        """
        Get the explorer endpoint and query parameters for a chain.

        Args:
            chain_id: Chain ID

        Returns:
            Tuple of (url, base params) or None if the chain is not supported
        """
        entry = EXPLORER_ENDPOINTS.get(chain_id)
        if entry is None:
            logger.info(f"ChainId {chain_id} not supported.")
            return None

        url, key_attr = entry
        params = {'module': 'contract', 'action': 'getsourcecode'}
        if key_attr:
            params['apikey'] = getattr(self.settings, key_attr)
        return url, params

    def fetch_contract_details(self, chain_id: int, contract_address: str) -> Optional[ContractDescriptor]:
        """
        Get verified contract details from the explorer.

        Args:
            chain_id: Chain ID
            contract_address: Contract address

        Returns:
            ContractDescriptor, or None when the chain is unsupported or the
            contract is not verified

        Raises:
            TransportError: If the explorer request fails
        """
        endpoint = self.get_api_endpoint(chain_id)
        if endpoint is None:
            return None

        url, params = endpoint
        params['address'] = contract_address

        try:
            response = self.session.get(url, params=params, timeout=self.settings.http_timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise TransportError(f"Explorer request failed for {contract_address} on chain {chain_id}: {e}") from e

        result = data.get('result') if isinstance(data, dict) else None
        if not (isinstance(result, list) and result and isinstance(result[0], dict)):
            logger.info(f"No source code result for {contract_address} on chain {chain_id}")
            return None

        contract_name = result[0].get('ContractName', '')
        source_code = result[0].get('SourceCode', '')
        abi_json = result[0].get('ABI', '')
        if not contract_name or not source_code or not abi_json:
            logger.info(f"Contract {contract_address} is not verified on chain {chain_id}")
            return None

        abi = ABI.from_json(abi_json)
        logger.info(f"Fetched verified contract {contract_name} ({len(source_code)} chars)")

        return ContractDescriptor(
            name=contract_name,
            source_text=flatten_source_code(source_code),
            abi=tuple(abi.fragments()),
            abi_json=abi_json,
        )
