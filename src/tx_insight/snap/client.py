"""HTTP client for the insight API consumed by the wallet plugin."""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import Settings
from ..errors import TransportError

logger = logging.getLogger(__name__)


class InsightApiClient:
    """Blocking client for the profile, approval-list and completion endpoints."""

    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "InsightApiClient":
        return cls(settings.insight_api_base_url, timeout=settings.http_timeout)

    def _get(self, path: str, params: Dict[str, str]) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} {params}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            raise TransportError(f"HTTP error! Status: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON from {url}: {e}") from e

    def get_profile(self, wallet_address: str) -> Any:
        return self._get('/lens/profile', {'walletAddress': wallet_address})

    def get_approved_address_list(
        self,
        wallet_address: str,
        contract_address: str,
        input_data: str,
        chain_id: str
    ) -> Any:
        return self._get('/lens/following', {
            'walletAddress': wallet_address,
            'contractAddress': contract_address,
            'inputData': input_data,
            'chainId': chain_id,
        })

    def get_completion(self, contract_address: str, input_data: str, chain_id: str) -> Any:
        return self._get('/gpt/completion', {
            'contractAddress': contract_address,
            'inputData': input_data,
            'chainId': chain_id,
        })
