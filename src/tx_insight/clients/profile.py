"""Default-profile lookups against the Lens GraphQL API."""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import Settings
from ..errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_QUERY = """
query DefaultProfile($request: DefaultProfileRequest!) {
  defaultProfile(request: $request) {
    id
    name
    handle
    ownedBy
  }
}
"""


class ProfileClient:
    """Resolve a wallet address to its default Lens profile."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.url = settings.lens_api_url
        self.timeout = settings.http_timeout
        self.session = session or requests.Session()

    def get_default_profile(self, wallet_address: str) -> Optional[Dict[str, Any]]:
        """
        Query the default profile of a wallet.

        Args:
            wallet_address: Ethereum address

        Returns:
            Profile dict (id, name, handle, ownedBy) or None if the wallet has none

        Raises:
            TransportError: On HTTP failure or GraphQL errors
        """
        payload = {
            'query': DEFAULT_PROFILE_QUERY,
            'variables': {'request': {'ethereumAddress': wallet_address}},
        }
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise TransportError(f"Profile request failed for {wallet_address}: {e}") from e

        if not isinstance(data, dict):
            raise TransportError(f"Unexpected profile response for {wallet_address}: {data}")
        if data.get('errors'):
            raise TransportError(f"Profile query returned errors: {data['errors']}")

        result = data.get('data') or {}
        if not isinstance(result, dict):
            raise TransportError(f"Unexpected profile data for {wallet_address}: {result}")
        profile = result.get('defaultProfile')
        logger.debug(f"profiles: result {profile}")
        return profile
